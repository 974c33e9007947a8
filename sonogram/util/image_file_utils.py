"""Functions that encode pixel grids as PNG images."""


from io import BytesIO
import logging

from PIL import Image

from sonogram.errors import EncodeFailure
import sonogram.util.os_utils as os_utils


_logger = logging.getLogger(__name__)


def _create_image(pixel_grid):
    
    # A `uint8` array of shape (height, width, 4) becomes an RGBA image
    # with eight bits per channel.
    return Image.fromarray(pixel_grid.pixels)


def encode_png(pixel_grid):
    
    """Encodes a `PixelGrid` as PNG, returning the encoded bytes."""
    
    try:
        image = _create_image(pixel_grid)
        buffer = BytesIO()
        image.save(buffer, format='PNG')
        
    except (OSError, ValueError) as e:
        raise EncodeFailure(
            f'Could not encode PNG image. Error message was: {e}') from e
    
    return buffer.getvalue()


def write_png_file(path, pixel_grid):
    
    """
    Writes a `PixelGrid` to a PNG file.
    
    The file is written in full or not at all: if writing fails, no
    file is left at `path`.
    """
    
    image = _create_image(pixel_grid)
    
    def write(temp_path):
        image.save(temp_path, format='PNG')
        
    try:
        os_utils.write_file_atomically(path, write)
        
    except (OSError, ValueError) as e:
        raise EncodeFailure(
            f'Could not write PNG file "{path}". Error message was: '
            f'{e}') from e
        
    _logger.info(
        f'Wrote {pixel_grid.width} x {pixel_grid.height} spectrogram '
        f'image to "{path}".')
