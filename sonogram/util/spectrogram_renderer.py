"""Module containing classes `SpectrogramRenderer` and `PixelGrid`."""


import numpy as np

from sonogram.errors import InvalidDimensions
from sonogram.util.colour_gradient import RgbaColour


class PixelGrid:
    
    """
    Grid of RGBA pixels.
    
    The pixels are stored in a `height` by `width` by 4 NumPy array of
    `uint8` channel values. Row zero is the top row of the image.
    """
    
    
    def __init__(self, pixels):
        
        pixels = np.array(pixels, dtype='uint8')
        
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(
                f'Pixel array must have shape (height, width, 4), but '
                f'shape was {pixels.shape}.')
        
        self._pixels = pixels
        
        
    @property
    def pixels(self):
        return self._pixels
    
    
    @property
    def width(self):
        return self._pixels.shape[1]
    
    
    @property
    def height(self):
        return self._pixels.shape[0]
    
    
    def get_pixel(self, x, y):
        return RgbaColour(*(int(v) for v in self._pixels[y, x]))
    
    
    def to_bytes(self):
        
        """Gets the pixels as row-major RGBA bytes, top row first."""
        
        return self._pixels.tobytes()
    
    
class SpectrogramRenderer:
    
    """
    Renders spectrogram matrices as pixel grids.
    
    Rendering compresses the dynamic range of a matrix by taking the
    logarithm of one plus each value, normalizes the compressed values
    to [0, 1] according to their minimum and maximum, and maps the
    normalized values to colours with a colour gradient. Since row
    zero of a spectrogram matrix is the lowest frequency and row zero
    of a pixel grid is the top of an image, the rows are flipped so
    that frequency increases upward.
    
    A renderer does not modify its gradient, so one gradient can be
    shared by renderers that run concurrently.
    """
    
    
    def __init__(self, gradient):
        self._gradient = gradient
        
        
    @property
    def gradient(self):
        return self._gradient
    
    
    def normalize(self, matrix):
        
        """
        Compresses and normalizes the values of a matrix.
        
        :Returns:
        
            a new NumPy array of values in [0, 1], in the same
            orientation as `matrix`. If all of the compressed values
            are equal, every normalized value is zero.
        """
        
        matrix = np.asarray(matrix, dtype='float64')
        
        if matrix.ndim != 2 or matrix.size == 0:
            raise InvalidDimensions(
                f'Cannot render spectrogram matrix of shape '
                f'{matrix.shape}.')
        
        values = np.log1p(matrix)
        
        min_value = values.min()
        max_value = values.max()
        
        if max_value == min_value:
            return np.zeros(values.shape)
        
        values -= min_value
        values /= max_value - min_value
        
        return np.clip(values, 0, 1, out=values)
    
    
    def render(self, matrix):
        
        """Renders a spectrogram matrix as a `PixelGrid`."""
        
        values = self.normalize(matrix)
        pixels = self._gradient.interpolate_array(values[::-1])
        return PixelGrid(pixels)
