import numpy as np

from sonogram.errors import InvalidConfiguration
from sonogram.tests.test_case import TestCase
from sonogram.util.colour_gradient import ColourGradient, RgbaColour
import sonogram.util.colour_gradient as colour_gradient


_BLACK = RgbaColour(0, 0, 0, 255)
_WHITE = RgbaColour(255, 255, 255, 255)
_RED = RgbaColour(255, 0, 0, 255)
_CLEAR = RgbaColour(0, 0, 0, 0)


class ColourGradientTests(TestCase):


    def test_init(self):
        
        gradient = ColourGradient()
        self.assertEqual(len(gradient), 0)
        self.assertEqual(gradient.colours, ())
        
        gradient = ColourGradient([_BLACK, (255, 255, 255, 255)])
        self.assertEqual(len(gradient), 2)
        self.assertEqual(gradient.colours, (_BLACK, _WHITE))
        self.assertIsInstance(gradient.colours[1], RgbaColour)
        
        
    def test_eq(self):
        a = ColourGradient([_BLACK, _WHITE])
        self.assertEqual(a, ColourGradient([_BLACK, _WHITE]))
        self.assertNotEqual(a, ColourGradient([_WHITE, _BLACK]))
        self.assertNotEqual(a, ColourGradient([_BLACK]))
        self.assertNotEqual(a, (_BLACK, _WHITE))
        
        
    def test_add_colour(self):
        
        gradient = ColourGradient()
        gradient.add_colour(_RED)
        gradient.add_colour(np.array([1, 2, 3, 4], dtype='uint8'))
        
        self.assertEqual(gradient.colours, (_RED, RgbaColour(1, 2, 3, 4)))
        
        # Colours are kept in the order in which they were added.
        gradient.add_colour(_BLACK)
        self.assertEqual(gradient.colours[-1], _BLACK)
        
        
    def test_add_colour_errors(self):
        
        cases = [
            (0, 0, 0),
            (0, 0, 0, 0, 0),
            (256, 0, 0, 255),
            (0, -1, 0, 255),
            (0, 0, .5, 255),
            ('0', 0, 0, 255)
        ]
        
        gradient = ColourGradient()
        
        for colour in cases:
            self.assert_raises(
                InvalidConfiguration, gradient.add_colour, colour)
            
        self.assertEqual(len(gradient), 0)
        
        
    def test_interpolate(self):
        
        gradient = ColourGradient([_BLACK, _WHITE])
        
        cases = [
            (0, _BLACK),
            (1, _WHITE),
            (.5, RgbaColour(128, 128, 128, 255)),
            (.25, RgbaColour(64, 64, 64, 255)),
            (.1, RgbaColour(26, 26, 26, 255))
        ]
        
        for t, expected in cases:
            actual = gradient.interpolate(t)
            self.assertEqual(actual, expected)
            
            
    def test_interpolate_three_colours(self):
        
        gradient = ColourGradient([_BLACK, _WHITE, _BLACK])
        
        cases = [
            (0, _BLACK),
            (.125, RgbaColour(64, 64, 64, 255)),
            (.5, _WHITE),
            (.75, RgbaColour(128, 128, 128, 255)),
            (1, _BLACK)
        ]
        
        for t, expected in cases:
            actual = gradient.interpolate(t)
            self.assertEqual(actual, expected)
            
            
    def test_interpolate_alpha(self):
        gradient = ColourGradient([_CLEAR, _BLACK])
        self.assertEqual(gradient.interpolate(.5), RgbaColour(0, 0, 0, 128))
        
        
    def test_interpolate_clamps(self):
        
        gradient = ColourGradient([_BLACK, _RED, _WHITE])
        
        for t in (-1, -.001, 0):
            self.assertEqual(gradient.interpolate(t), _BLACK)
            
        for t in (1, 1.001, 100):
            self.assertEqual(gradient.interpolate(t), _WHITE)
            
            
    def test_interpolate_nan(self):
        
        gradient = ColourGradient([_BLACK, _RED, _WHITE])
        
        self.assertEqual(gradient.interpolate(float('nan')), _BLACK)
        self.assertEqual(gradient.interpolate(np.nan), _BLACK)
        
        actual = gradient.interpolate_array(np.array([np.nan, 1, np.nan]))
        expected = np.array([_BLACK, _WHITE, _BLACK], dtype='uint8')
        self.assert_arrays_equal(actual, expected)
            
            
    def test_interpolate_single_colour(self):
        gradient = ColourGradient([_RED])
        for t in (-1, 0, .3, 1, 2):
            self.assertEqual(gradient.interpolate(t), _RED)
            
            
    def test_interpolate_empty_gradient(self):
        gradient = ColourGradient()
        self.assert_raises(InvalidConfiguration, gradient.interpolate, .5)
        self.assert_raises(
            InvalidConfiguration, gradient.interpolate_array, np.zeros(3))
        
        
    def test_interpolate_array(self):
        
        values = np.array([
            [-1, 0, .1, .125, .25],
            [.5, .6, .75, 1, 2]
        ])
        
        for colours in (
                [_RED],
                [_BLACK, _WHITE],
                [_BLACK, _WHITE, _BLACK],
                [_CLEAR, _RED, _BLACK, _WHITE]):
            
            gradient = ColourGradient(colours)
            
            actual = gradient.interpolate_array(values)
            
            self.assertEqual(actual.shape, (2, 5, 4))
            self.assertEqual(actual.dtype, np.uint8)
            
            for i in range(values.shape[0]):
                for j in range(values.shape[1]):
                    expected = gradient.interpolate(values[i, j])
                    self.assertEqual(tuple(actual[i, j]), expected)
                    
                    
    def test_create(self):
        
        for name in colour_gradient.THEME_NAMES:
            
            gradient = ColourGradient.create(name)
            
            self.assertGreaterEqual(len(gradient), 2)
            
            for colour in gradient.colours:
                self.assertEqual(colour.a, 255)
                
                
    def test_create_black_white(self):
        
        gradient = ColourGradient.create('black-white')
        self.assertEqual(gradient.colours, (_BLACK, _WHITE))
        
        gradient = ColourGradient.create('white-black')
        self.assertEqual(gradient.colours, (_WHITE, _BLACK))
        
        
    def test_create_returns_new_gradient(self):
        a = ColourGradient.create('default')
        a.add_colour(_RED)
        b = ColourGradient.create('default')
        self.assertEqual(len(b), len(a) - 1)
        
        
    def test_create_errors(self):
        for name in ('', 'Default', 'bobo', None):
            self.assert_raises(
                InvalidConfiguration, ColourGradient.create, name)
