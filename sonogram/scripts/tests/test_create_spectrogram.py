from pathlib import Path
import csv
import tempfile

from PIL import Image
import numpy as np

from sonogram.tests.test_case import TestCase
import sonogram.scripts.create_spectrogram as create_spectrogram
import sonogram.signal.audio_file_utils as audio_file_utils


_SAMPLE_RATE = 22050


class CreateSpectrogramTests(TestCase):
    
    
    def setUp(self):
        
        self._temp_dir = tempfile.TemporaryDirectory()
        self._dir_path = Path(self._temp_dir.name)
        
        times = np.arange(8192) / _SAMPLE_RATE
        samples = 10000 * np.sin(2 * np.pi * 1000 * times)
        samples = np.stack((samples, np.zeros(len(samples))))
        
        self._wav_path = self._path('tone.wav')
        audio_file_utils.write_wave_file(
            self._wav_path, samples, _SAMPLE_RATE)
        
        
    def tearDown(self):
        self._temp_dir.cleanup()
        
        
    def _path(self, name):
        return str(self._dir_path / name)
    
    
    def _main(self, *args):
        return create_spectrogram.main(
            ['--quiet', '--wav', self._wav_path] + list(args))
    
    
    def test_png(self):
        
        png_path = self._path('tone.png')
        
        status = self._main(
            '--png', png_path, '--width', '64', '--height', '48',
            '--window-size', '512', '--overlap', '.5', '--freq-scale', 'log',
            '--gradient', 'rainbow', '--window-function', 'blackman-harris')
        
        self.assertEqual(status, 0)
        
        with Image.open(png_path) as image:
            self.assertEqual(image.size, (64, 48))
            self.assertEqual(image.mode, 'RGBA')
            
            
    def test_default_dimensions(self):
        
        png_path = self._path('tone.png')
        
        status = self._main('-p', png_path, '--chunk-len', '1024')
        
        self.assertEqual(status, 0)
        
        with Image.open(png_path) as image:
            self.assertEqual(image.size, (256, 256))
            
            
    def test_csv(self):
        
        csv_path = self._path('tone.csv')
        
        status = self._main(
            '--csv', csv_path, '-x', '8', '-y', '4', '--window-size', '256',
            '--workers', '2')
        
        self.assertEqual(status, 0)
        
        with open(csv_path, newline='') as file_:
            rows = list(csv.reader(file_))
            
        self.assertEqual(len(rows), 5)
        self.assertEqual(rows[0], [str(i) for i in range(8)])
        
        
    def test_png_and_csv(self):
        
        png_path = self._path('tone.png')
        csv_path = self._path('tone.csv')
        
        status = self._main(
            '--png', png_path, '--csv', csv_path, '-x', '16', '-y', '16',
            '--downsample', '2', '--scale', '.5')
        
        self.assertEqual(status, 0)
        self.assertTrue(Path(png_path).exists())
        self.assertTrue(Path(csv_path).exists())
        
        
    def test_silent_channel(self):
        
        png_path = self._path('silence.png')
        
        status = self._main(
            '--png', png_path, '--channel', '2', '-x', '4', '-y', '4',
            '--gradient', 'black-white')
        
        self.assertEqual(status, 0)
        
        with Image.open(png_path) as image:
            pixels = np.array(image)
            
        self.assert_arrays_equal(pixels, np.full((4, 4, 4), [0, 0, 0, 255]))
        
        
    def test_settings_file(self):
        
        settings_path = self._path('settings.yaml')
        
        with open(settings_path, 'w') as file_:
            file_.write('''
window_size: 1024
overlap: .75
window: Rectangular
width: 30
height: 20
gradient:
    - [0, 0, 0]
    - [255, 255, 255]
''')
            
        png_path = self._path('tone.png')
        
        status = self._main('--png', png_path, '--settings', settings_path)
        self.assertEqual(status, 0)
        
        with Image.open(png_path) as image:
            self.assertEqual(image.size, (30, 20))
            
        # Command line options take precedence over settings.
        status = self._main(
            '--png', png_path, '--settings', settings_path, '-x', '40')
        self.assertEqual(status, 0)
        
        with Image.open(png_path) as image:
            self.assertEqual(image.size, (40, 20))
            
            
    def test_errors(self):
        
        png_path = self._path('tone.png')
        
        bad_settings = [
            'bobo: 1\n',
            '1: 2\n',
            'width: true\n',
            'num_workers: false\n'
        ]
        
        bad_settings_paths = []
        
        for i, contents in enumerate(bad_settings):
            path = self._path(f'bad_{i}.yaml')
            with open(path, 'w') as file_:
                file_.write(contents)
            bad_settings_paths.append(path)
            
        cases = [
            ('--window-size', '1000'),
            ('--overlap', '1'),
            ('--width', '0'),
            ('--channel', '3'),
            ('--downsample', '0'),
            ('--scale', '0'),
            ('--window-size', '16384'),
            ('--settings', self._path('missing.yaml'))
        ] + [('--settings', p) for p in bad_settings_paths]
        
        for args in cases:
            status = self._main('--png', png_path, *args)
            self.assertEqual(status, 1)
            self.assertFalse(Path(png_path).exists())
            
            
    def test_truncated_wave_file(self):
        
        # Cut the file off partway through a sample.
        path = Path(self._wav_path)
        path.write_bytes(path.read_bytes()[:1001])
        
        png_path = self._path('tone.png')
        
        status = self._main('--png', png_path, '--window-size', '128')
        
        self.assertEqual(status, 0)
        self.assertTrue(Path(png_path).exists())
        
        
    def test_missing_wave_file(self):
        
        png_path = self._path('tone.png')
        
        status = create_spectrogram.main(
            ['--quiet', '--wav', self._path('missing.wav'), '-p', png_path])
        
        self.assertEqual(status, 1)
        
        
    def test_argument_errors(self):
        
        cases = [
            
            # no output file
            [],
            
            # unrecognized window function
            ['--png', 'x.png', '--window-function', 'hamming'],
            
            # unrecognized gradient
            ['--png', 'x.png', '--gradient', 'bobo'],
            
            # quiet and verbose
            ['--png', 'x.png', '--verbose']
            
        ]
        
        for args in cases:
            with self.assertRaises(SystemExit) as context:
                self._main(*args)
            self.assertEqual(context.exception.code, 2)
