"""
Frequency axis scaling and resizing of spectrogram matrices.

A spectrogram matrix has one row per DFT bin and one column per
analysis record. To display a spectrogram we resample it to the
height and width of the display, and we may at the same time warp its
frequency axis. With a linear frequency scale the output rows are
evenly spaced in frequency. With a logarithmic frequency scale they
are evenly spaced in the logarithm of (one plus) the bin number,
which expands the low frequencies, where perceptual frequency
resolution is highest, and compresses the high frequencies.

Both axes are resampled by linear interpolation between the two
nearest source values. The first output row (column) always samples
the first source row (column), and the last output row (column)
always samples the last source row (column).
"""


import enum

import numpy as np

from sonogram.errors import InvalidConfiguration, InvalidDimensions


class FrequencyScale(enum.Enum):
    
    LINEAR = 'linear'
    LOGARITHMIC = 'logarithmic'
    
    
    @staticmethod
    def parse(name):
        
        """
        Gets the frequency scale with the specified name.
        
        The recognized names are "linear", "log", and "logarithmic".
        A `FrequencyScale` is returned unchanged.
        """
        
        if isinstance(name, FrequencyScale):
            return name
        
        try:
            return _SCALE_NAMES[name.lower()]
        except (KeyError, AttributeError):
            raise InvalidConfiguration(
                f'Unrecognized frequency scale "{name}".')
        
        
_SCALE_NAMES = {
    'linear': FrequencyScale.LINEAR,
    'log': FrequencyScale.LOGARITHMIC,
    'logarithmic': FrequencyScale.LOGARITHMIC,
}


def get_source_positions(scale, num_sources, num_outputs):
    
    """
    Gets the source positions sampled by a sequence of outputs.
    
    :Parameters:
    
        scale : `FrequencyScale`
            the scale of the output axis.
            
        num_sources : `int`
            the number of source values, i.e. source rows or columns.
            
        num_outputs : `int`
            the number of output values.
            
    :Returns:
    
        a NumPy array of `num_outputs` monotonically non-decreasing
        continuous source positions in [0, `num_sources` - 1].
    """
    
    if num_outputs == 1:
        return np.zeros(1)
    
    ratios = np.arange(num_outputs) / (num_outputs - 1)
    
    if scale is FrequencyScale.LINEAR:
        positions = ratios * (num_sources - 1)
        
    else:
        positions = np.exp(np.log(num_sources) * ratios) - 1
        
    # Clip to protect against rounding error in `exp` at the top end.
    return np.clip(positions, 0, num_sources - 1)


def interpolate(matrix, positions, axis):
    
    """
    Samples a matrix at continuous positions along one axis.
    
    Each output slice is a linear interpolation of the two source
    slices nearest its position. An integral position reproduces its
    source slice exactly.
    """
    
    size = matrix.shape[axis]
    
    lower = np.minimum(np.floor(positions).astype(int), size - 1)
    upper = np.minimum(lower + 1, size - 1)
    fractions = positions - lower
    
    if axis == 0:
        fractions = fractions[:, np.newaxis]
    else:
        fractions = fractions[np.newaxis, :]
    
    a = np.take(matrix, lower, axis=axis)
    b = np.take(matrix, upper, axis=axis)
    
    return (1 - fractions) * a + fractions * b


def remap_matrix(matrix, width, height, scale=FrequencyScale.LINEAR):
    
    """
    Remaps the frequency axis of a spectrogram matrix and resizes it.
    
    :Parameters:
    
        matrix : NumPy array
            spectrogram matrix with one row per frequency bin and one
            column per analysis record.
            
        width : `int`
            the number of output columns.
            
        height : `int`
            the number of output rows.
            
        scale : `FrequencyScale`
            the frequency scale of the output rows.
            
    :Returns:
    
        a new `height` by `width` NumPy array. Row zero of the array
        is the lowest frequency.
    """
    
    _check_dimensions(width, height)
    
    scale = FrequencyScale.parse(scale)
    
    matrix = np.asarray(matrix, dtype='float64')
    
    if matrix.ndim != 2 or matrix.size == 0:
        raise InvalidDimensions(
            f'Cannot remap spectrogram matrix of shape {matrix.shape}.')
    
    num_bins, num_records = matrix.shape
    
    row_positions = get_source_positions(scale, num_bins, height)
    result = interpolate(matrix, row_positions, axis=0)
    
    column_positions = get_source_positions(
        FrequencyScale.LINEAR, num_records, width)
    result = interpolate(result, column_positions, axis=1)
    
    return result


def _check_dimensions(width, height):
    
    for name, value in (('width', width), ('height', height)):
        
        if not isinstance(value, (int, np.integer)):
            raise InvalidDimensions(
                f'Output {name} must be an integer, but was {value!r}.')
            
        if value <= 0:
            raise InvalidDimensions(
                f'Output {name} must be positive, but was {value}.')
