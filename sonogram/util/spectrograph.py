"""Module containing class `Spectrograph`."""


import logging

from sonogram.util.spectrogram import Spectrogram
from sonogram.util.spectrogram_renderer import SpectrogramRenderer
from sonogram.util.spec_options import get_gradient
import sonogram.util.csv_file_utils as csv_file_utils
import sonogram.util.frequency_scale as frequency_scale
import sonogram.util.image_file_utils as image_file_utils


_logger = logging.getLogger(__name__)


class Spectrograph:

    """
    Spectrogram computation and export pipeline.

    A spectrograph is configured at construction with a waveform and
    spectrogram options. It computes the spectrogram of the waveform
    once, when first needed, and can then export it any number of
    times, in various forms and sizes:

        options = SpecOptionsBuilder(512, 128).set_overlap(.5).build()
        spectrograph = Spectrograph(waveform, options)
        spectrograph.write_png_file('spectrogram.png')
        spectrograph.write_csv_file('spectrogram.csv')

    The export methods accept optional `width`, `height`, and
    `freq_scale` arguments that override the corresponding options.
    When neither an argument nor an option specifies a dimension, the
    spectrogram's own dimension is used, i.e. one column per record
    or one row per DFT bin.
    """


    def __init__(self, waveform, options):
        self._waveform = waveform
        self._options = options
        self._spectrogram = None


    @property
    def waveform(self):
        return self._waveform


    @property
    def options(self):
        return self._options


    def compute(self):

        """Computes the spectrogram if needed, and returns it."""

        if self._spectrogram is None:

            _logger.debug(
                f'Waveform has {len(self._waveform)} samples at '
                f'{self._waveform.sample_rate} Hz, with duration '
                f'{self._waveform.duration:.3f} seconds.')

            self._spectrogram = Spectrogram(self._waveform, self._options)

        return self._spectrogram


    def get_matrix(self, width=None, height=None, freq_scale=None):

        """
        Gets the spectrogram matrix, remapped and resized for output.

        :Returns:

            a new `height` by `width` NumPy array of linear magnitudes.
            Row zero is the lowest frequency.
        """

        spectrogram = self.compute()

        width = _choose(width, self._options.width, spectrogram.num_frames)
        height = _choose(height, self._options.height, spectrogram.num_bins)
        freq_scale = frequency_scale.FrequencyScale.parse(
            _choose(freq_scale, self._options.freq_scale))

        _logger.debug(
            f'Remapping {spectrogram.num_bins} x {spectrogram.num_frames} '
            f'spectrogram to {height} x {width} with {freq_scale.value} '
            f'frequency scale...')

        return frequency_scale.remap_matrix(
            spectrogram.magnitudes, width, height, freq_scale)


    def get_normalized_matrix(self, width=None, height=None, freq_scale=None):

        """
        Gets the output matrix with the values that determine its colours.

        The values are the log-compressed, normalized values in [0, 1]
        that the renderer maps to colours.
        """

        matrix = self.get_matrix(width, height, freq_scale)
        return self._create_renderer().normalize(matrix)


    def _create_renderer(self, gradient=None):
        if gradient is None:
            gradient = self._options.gradient
        else:
            gradient = get_gradient(gradient)
        return SpectrogramRenderer(gradient)


    def get_pixel_grid(
            self, width=None, height=None, freq_scale=None, gradient=None):

        """Renders the spectrogram as a `PixelGrid`."""

        matrix = self.get_matrix(width, height, freq_scale)
        return self._create_renderer(gradient).render(matrix)


    def get_rgba_bytes(
            self, width=None, height=None, freq_scale=None, gradient=None):

        """Renders the spectrogram as raw, row-major RGBA bytes."""

        grid = self.get_pixel_grid(width, height, freq_scale, gradient)
        return grid.to_bytes()


    def get_png_bytes(
            self, width=None, height=None, freq_scale=None, gradient=None):

        """Renders the spectrogram as an in-memory PNG image."""

        grid = self.get_pixel_grid(width, height, freq_scale, gradient)
        return image_file_utils.encode_png(grid)


    def write_png_file(
            self, path, width=None, height=None, freq_scale=None,
            gradient=None):

        grid = self.get_pixel_grid(width, height, freq_scale, gradient)
        image_file_utils.write_png_file(path, grid)


    def write_csv_file(
            self, path, width=None, height=None, freq_scale=None,
            normalized=False):

        """
        Writes the spectrogram to a CSV file.

        By default the file contains the remapped linear magnitudes. If
        `normalized` is true it contains instead the normalized values
        that determine the colours of a rendered image.
        """

        if normalized:
            matrix = self.get_normalized_matrix(width, height, freq_scale)
        else:
            matrix = self.get_matrix(width, height, freq_scale)

        csv_file_utils.write_csv_file(path, matrix)


def _choose(*values):

    """Returns the first of the specified values that is not `None`."""

    for value in values:
        if value is not None:
            return value

    return None
