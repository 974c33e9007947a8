"""Module containing classes `SpecOptions` and `SpecOptionsBuilder`."""


import numpy as np

from sonogram.errors import InvalidConfiguration, InvalidDimensions
from sonogram.util.colour_gradient import ColourGradient
from sonogram.util.fft_engine import is_power_of_two
from sonogram.util.frequency_scale import FrequencyScale
import sonogram.util.data_windows as data_windows
import sonogram.util.time_frequency_analysis_utils as tfa_utils


DEFAULT_WINDOW_SIZE = 2048
DEFAULT_OVERLAP = 0.
DEFAULT_WINDOW_NAME = 'Hann'
DEFAULT_GRADIENT_NAME = 'default'


class SpecOptions:

    """
    Immutable spectrogram options.

    Spectrogram options are created by a `SpecOptionsBuilder`, which
    checks them. They should not be created directly.
    """


    def __init__(
            self, window_size, overlap, step_size, window_name, width,
            height, freq_scale, gradient, num_workers):

        self._window_size = window_size
        self._overlap = overlap
        self._step_size = step_size
        self._window_name = window_name
        self._width = width
        self._height = height
        self._freq_scale = freq_scale
        self._gradient = gradient
        self._num_workers = num_workers


    def __repr__(self):
        return (
            f'SpecOptions(window_size={self._window_size}, '
            f'overlap={self._overlap}, step_size={self._step_size}, '
            f'window_name={self._window_name!r}, width={self._width}, '
            f'height={self._height}, freq_scale={self._freq_scale}, '
            f'num_workers={self._num_workers})')


    @property
    def window_size(self):
        return self._window_size


    @property
    def overlap(self):
        return self._overlap


    @property
    def step_size(self):
        return self._step_size


    @property
    def window_name(self):
        return self._window_name


    @property
    def width(self):
        return self._width


    @property
    def height(self):
        return self._height


    @property
    def freq_scale(self):
        return self._freq_scale


    @property
    def gradient(self):

        # Return a copy so the caller cannot modify our gradient.
        return ColourGradient(self._gradient.colours)


    @property
    def num_workers(self):
        return self._num_workers


class SpecOptionsBuilder:

    """
    Accumulates spectrogram options and builds a `SpecOptions`.

    Each setter returns the builder, so calls can be chained:

        options = SpecOptionsBuilder(512, 128) \\
            .set_window_size(1024) \\
            .set_overlap(.5) \\
            .set_gradient('rainbow') \\
            .build()

    The options are checked only when `build` is called.
    """


    _SETTING_NAMES = frozenset((
        'window_size', 'overlap', 'window', 'width', 'height',
        'freq_scale', 'gradient', 'num_workers'))


    def __init__(self, width=None, height=None):
        self._window_size = DEFAULT_WINDOW_SIZE
        self._overlap = DEFAULT_OVERLAP
        self._window_name = DEFAULT_WINDOW_NAME
        self._width = width
        self._height = height
        self._freq_scale = FrequencyScale.LINEAR
        self._gradient = DEFAULT_GRADIENT_NAME
        self._num_workers = 1


    def set_window_size(self, window_size):
        self._window_size = window_size
        return self


    def set_overlap(self, overlap):
        self._overlap = overlap
        return self


    def set_window(self, window_name):
        self._window_name = window_name
        return self


    def set_dimensions(self, width, height):
        self._width = width
        self._height = height
        return self


    def set_width(self, width):
        self._width = width
        return self


    def set_height(self, height):
        self._height = height
        return self


    def set_freq_scale(self, freq_scale):
        self._freq_scale = freq_scale
        return self


    def set_gradient(self, gradient):

        """
        Sets the colour gradient.

        `gradient` may be a `ColourGradient` or the name of a gradient
        theme.
        """

        self._gradient = gradient
        return self


    def set_num_workers(self, num_workers):
        self._num_workers = num_workers
        return self


    def apply_settings(self, settings):

        """
        Sets options from a `Settings` object.

        The recognized settings are `window_size`, `overlap`, `window`,
        `width`, `height`, `freq_scale`, `gradient`, and `num_workers`.
        A `gradient` setting is either a theme name or a list of colours,
        each a list of three (RGB) or four (RGBA) channel values.
        Settings that are absent leave the corresponding options
        unchanged.
        """

        unrecognized = sorted(set(settings) - self._SETTING_NAMES)

        if len(unrecognized) != 0:
            raise InvalidConfiguration(
                f'Unrecognized spectrogram setting(s): '
                f'{", ".join(unrecognized)}.')

        get = settings.get

        if 'window_size' in settings:
            self.set_window_size(get('window_size'))

        if 'overlap' in settings:
            self.set_overlap(get('overlap'))

        if 'window' in settings:
            self.set_window(get('window'))

        if 'width' in settings:
            self.set_width(get('width'))

        if 'height' in settings:
            self.set_height(get('height'))

        if 'freq_scale' in settings:
            self.set_freq_scale(get('freq_scale'))

        if 'gradient' in settings:
            self.set_gradient(_parse_gradient_setting(get('gradient')))

        if 'num_workers' in settings:
            self.set_num_workers(get('num_workers'))

        return self


    def build(self):

        window_size = self._window_size

        if not is_power_of_two(window_size):
            raise InvalidConfiguration(
                f'Window size must be a positive power of two, but was '
                f'{window_size!r}.')

        overlap = _check_overlap(self._overlap)

        step_size = tfa_utils.get_hop_size(window_size, overlap)

        if step_size < 1:
            raise InvalidConfiguration(
                f'Overlap {overlap} is too large for window size '
                f'{window_size}, since it yields a step size of zero.')

        window_name = data_windows.get_window_name(self._window_name)

        width = _check_dimension('width', self._width)
        height = _check_dimension('height', self._height)

        freq_scale = FrequencyScale.parse(self._freq_scale)

        gradient = get_gradient(self._gradient)

        num_workers = self._num_workers

        if not _is_integer(num_workers) or num_workers < 1:
            raise InvalidConfiguration(
                f'Number of workers must be a positive integer, but was '
                f'{num_workers!r}.')

        return SpecOptions(
            int(window_size), overlap, step_size, window_name, width,
            height, freq_scale, gradient, int(num_workers))


def _check_overlap(overlap):

    try:
        overlap = float(overlap)
    except (TypeError, ValueError):
        raise InvalidConfiguration(
            f'Overlap must be a number, but was {overlap!r}.')

    if not 0 <= overlap < 1:
        raise InvalidConfiguration(
            f'Overlap must be in [0, 1), but was {overlap}.')

    return overlap


def _check_dimension(name, value):

    if value is None:
        return None

    if not _is_integer(value) or value <= 0:
        raise InvalidDimensions(
            f'Output {name} must be a positive integer, but was {value!r}.')

    return int(value)


def _is_integer(value):

    # `bool` is a subclass of `int`, but `True` is not a size.
    return isinstance(value, (int, np.integer)) and \
        not isinstance(value, (bool, np.bool_))


def get_gradient(gradient):

    """
    Gets a copy of a colour gradient, or the gradient of a named theme.
    """

    if isinstance(gradient, str):
        gradient = ColourGradient.create(gradient)

    elif not isinstance(gradient, ColourGradient):
        raise InvalidConfiguration(
            f'Colour gradient must be a ColourGradient or a theme name, '
            f'not a {gradient.__class__.__name__}.')

    if len(gradient) == 0:
        raise InvalidConfiguration('Colour gradient has no colours.')

    # Copy the gradient so later changes to it do not affect the options.
    return ColourGradient(gradient.colours)


def _parse_gradient_setting(setting):

    if isinstance(setting, str):
        return setting

    if not isinstance(setting, list):
        raise InvalidConfiguration(
            'Gradient setting must be a theme name or a list of colours.')

    gradient = ColourGradient()

    for colour in setting:

        if not isinstance(colour, list) or len(colour) not in (3, 4):
            raise InvalidConfiguration(
                f'Gradient colour {colour!r} is not a list of three or '
                f'four channel values.')

        if len(colour) == 3:
            colour = colour + [255]

        gradient.add_colour(colour)

    return gradient
