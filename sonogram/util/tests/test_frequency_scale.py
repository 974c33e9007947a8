import numpy as np

from sonogram.errors import InvalidConfiguration, InvalidDimensions
from sonogram.tests.test_case import TestCase
from sonogram.util.frequency_scale import FrequencyScale
import sonogram.util.frequency_scale as frequency_scale


LINEAR = FrequencyScale.LINEAR
LOG = FrequencyScale.LOGARITHMIC


class FrequencyScaleTests(TestCase):


    def test_parse(self):
        
        cases = [
            ('linear', LINEAR),
            ('Linear', LINEAR),
            ('log', LOG),
            ('LOG', LOG),
            ('logarithmic', LOG),
            (LINEAR, LINEAR),
            (LOG, LOG)
        ]
        
        for name, expected in cases:
            actual = FrequencyScale.parse(name)
            self.assertIs(actual, expected)
            
            
    def test_parse_errors(self):
        for name in ('', 'mel', 'bobo', None, 1):
            self.assert_raises(
                InvalidConfiguration, FrequencyScale.parse, name)
            
            
    def test_get_source_positions(self):
        
        cases = [
            (LINEAR, 5, 1, [0]),
            (LINEAR, 5, 2, [0, 4]),
            (LINEAR, 5, 5, [0, 1, 2, 3, 4]),
            (LINEAR, 3, 5, [0, .5, 1, 1.5, 2]),
            (LINEAR, 5, 3, [0, 2, 4]),
            (LOG, 5, 1, [0]),
            (LOG, 4, 3, [0, 1, 3]),
            (LOG, 9, 3, [0, 2, 8]),
            (LOG, 3, 3, [0, np.sqrt(3) - 1, 2])
        ]
        
        for scale, num_sources, num_outputs, expected in cases:
            actual = frequency_scale.get_source_positions(
                scale, num_sources, num_outputs)
            self.assert_arrays_close(actual, np.array(expected))
            
            
    def test_log_source_positions_are_monotonic(self):
        
        for num_sources in (2, 3, 513, 1025):
            
            for num_outputs in (2, 10, 256, 2000):
                
                positions = frequency_scale.get_source_positions(
                    LOG, num_sources, num_outputs)
                
                self.assertEqual(len(positions), num_outputs)
                self.assertEqual(positions[0], 0)
                self.assertAlmostEqual(positions[-1], num_sources - 1)
                self.assertTrue(np.all(np.diff(positions) >= 0))
                
                
    def test_log_scale_expands_low_frequencies(self):
        
        linear = frequency_scale.get_source_positions(LINEAR, 513, 256)
        log = frequency_scale.get_source_positions(LOG, 513, 256)
        
        self.assertTrue(np.all(log[1:-1] < linear[1:-1]))
        
        
    def test_interpolate(self):
        
        matrix = np.array([
            [0, 10, 20],
            [100, 110, 120]
        ], dtype='float64')
        
        actual = frequency_scale.interpolate(
            matrix, np.array([0, .25, 1]), axis=0)
        expected = np.array([
            [0, 10, 20],
            [25, 35, 45],
            [100, 110, 120]
        ])
        self.assert_arrays_close(actual, expected)
        
        actual = frequency_scale.interpolate(
            matrix, np.array([0, 1.5, 2]), axis=1)
        expected = np.array([
            [0, 15, 20],
            [100, 115, 120]
        ])
        self.assert_arrays_close(actual, expected)
        
        
    def test_remap_matrix_identity(self):
        
        matrix = np.random.default_rng(3).random((17, 9))
        
        actual = frequency_scale.remap_matrix(matrix, 9, 17)
        
        self.assertEqual(actual.shape, (17, 9))
        self.assert_arrays_close(actual, matrix)
        
        
    def test_remap_matrix(self):
        
        cases = [
            
            # upsample frequency axis
            ([[0], [10]], 1, 3, LINEAR, [[0], [5], [10]]),
            
            # upsample time axis
            ([[0, 10]], 5, 1, LINEAR, [[0, 2.5, 5, 7.5, 10]]),
            
            # downsample both axes
            ([[0, 1, 2], [3, 4, 5], [6, 7, 8]], 2, 2, LINEAR,
             [[0, 2], [6, 8]]),
            
            # single output row and column
            ([[1, 2], [3, 4]], 1, 1, LINEAR, [[1]]),
            
            # logarithmic frequency axis
            ([[0], [10], [20]], 1, 3, LOG,
             [[0], [10 * (np.sqrt(3) - 1)], [20]]),
            
            # frequency scale specified by name
            ([[0], [10], [20]], 1, 3, 'log',
             [[0], [10 * (np.sqrt(3) - 1)], [20]])
            
        ]
        
        for matrix, width, height, scale, expected in cases:
            
            matrix = np.array(matrix, dtype='float64')
            expected = np.array(expected)
            
            actual = frequency_scale.remap_matrix(
                matrix, width, height, scale)
            
            self.assertEqual(actual.shape, (height, width))
            self.assert_arrays_close(actual, expected)
            
            
    def test_remap_matrix_does_not_modify_input(self):
        matrix = np.ones((4, 4))
        result = frequency_scale.remap_matrix(matrix, 4, 4)
        result[0, 0] = 2
        self.assertEqual(matrix[0, 0], 1)
        
        
    def test_remap_matrix_errors(self):
        
        matrix = np.ones((4, 4))
        
        for width, height in ((0, 4), (4, 0), (-1, 4), (4, -1), (2.5, 4)):
            self.assert_raises(
                InvalidDimensions, frequency_scale.remap_matrix, matrix,
                width, height)
            
        for bad_matrix in (np.ones(4), np.ones((0, 4)), np.ones((2, 2, 2))):
            self.assert_raises(
                InvalidDimensions, frequency_scale.remap_matrix, bad_matrix,
                4, 4)
            
        self.assert_raises(
            InvalidConfiguration, frequency_scale.remap_matrix, matrix,
            4, 4, 'mel')
