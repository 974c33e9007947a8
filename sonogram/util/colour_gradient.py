"""Module containing class `ColourGradient`."""


from collections import namedtuple
import math

import numpy as np

from sonogram.errors import InvalidConfiguration


# RGBA colour, with integer channel values in [0, 255].
RgbaColour = namedtuple('RgbaColour', ('r', 'g', 'b', 'a'))


_OPAQUE = 255

_THEMES = {
    
    'default': (
        (0, 0, 0),             # black
        (55, 0, 110),          # purple
        (0, 0, 180),           # blue
        (0, 255, 255),         # cyan
        (0, 255, 0),           # green
    ),
    
    # the default spectrogram colours of the Audacity audio editor
    'audacity': (
        (215, 215, 215),       # grey
        (114, 169, 242),       # blue
        (227, 61, 215),        # pink
        (246, 55, 55),         # red
        (255, 255, 255),       # white
    ),
    
    'rainbow': (
        (0, 0, 0),             # black
        (148, 0, 211),         # violet
        (75, 0, 130),          # indigo
        (0, 0, 255),           # blue
        (0, 255, 0),           # green
        (255, 255, 0),         # yellow
        (255, 127, 0),         # orange
        (255, 0, 0),           # red
        (255, 255, 255),       # white
    ),
    
    'black-white': (
        (0, 0, 0),
        (255, 255, 255),
    ),
    
    'white-black': (
        (255, 255, 255),
        (0, 0, 0),
    ),
    
}


THEME_NAMES = tuple(_THEMES.keys())


class ColourGradient:
    
    """
    Ordered sequence of control colours defining a colour map on [0, 1].
    
    A gradient with N colours divides [0, 1] into N - 1 segments of
    equal length. The colour at a point in a segment is interpolated
    linearly, channel by channel, between the colours at the segment's
    ends. Points below zero map to the first colour and points above
    one map to the last. NaN maps to the first colour. A gradient with
    only one colour maps every point to that colour.
    
    Colours are interpolated in the order in which they were added,
    and are never sorted.
    """
    
    
    @staticmethod
    def create(theme_name):
        
        """
        Creates a gradient from a named theme.
        
        The theme names are "default", "audacity", "rainbow",
        "black-white", and "white-black".
        """
        
        try:
            colours = _THEMES[theme_name]
        except KeyError:
            raise InvalidConfiguration(
                f'Unrecognized colour gradient theme "{theme_name}". '
                f'Recognized themes are: {", ".join(THEME_NAMES)}.')
            
        return ColourGradient((r, g, b, _OPAQUE) for r, g, b in colours)
    
    
    def __init__(self, colours=()):
        self._colours = []
        for colour in colours:
            self.add_colour(colour)
            
            
    def __eq__(self, other):
        return isinstance(other, ColourGradient) and \
            self._colours == other._colours
            
            
    def __len__(self):
        return len(self._colours)
    
    
    def __repr__(self):
        return f'ColourGradient({self._colours!r})'
    
    
    @property
    def colours(self):
        return tuple(self._colours)
    
    
    def add_colour(self, colour):
        
        """
        Appends a colour to this gradient.
        
        The colour may be an `RgbaColour` or any sequence of four
        integers in [0, 255].
        """
        
        try:
            colour = RgbaColour(*colour)
        except TypeError:
            raise InvalidConfiguration(
                f'Colour {colour!r} does not have four channels.')
            
        for value in colour:
            if not isinstance(value, (int, np.integer)) or \
                    value < 0 or value > 255:
                raise InvalidConfiguration(
                    f'Colour {tuple(colour)} has a channel value that '
                    f'is not an integer in [0, 255].')
                
        self._colours.append(RgbaColour(*(int(v) for v in colour)))
        
        
    def interpolate(self, t):
        
        """Gets the colour at the specified point of [0, 1]."""
        
        colours = self._get_colours()
        
        # NaN is not greater than zero, so it maps to the first colour.
        if len(colours) == 1 or not t > 0:
            return colours[0]
        
        elif t >= 1:
            return colours[-1]
        
        scaled = t * (len(colours) - 1)
        i = int(math.floor(scaled))
        ratio = scaled - i
        
        start = colours[i]
        finish = colours[i + 1]
        
        return RgbaColour(*(
            _round(s + (f - s) * ratio) for s, f in zip(start, finish)))
        
        
    def _get_colours(self):
        
        if len(self._colours) == 0:
            raise InvalidConfiguration('Colour gradient has no colours.')
        
        return self._colours
        
        
    def interpolate_array(self, values):
        
        """
        Gets the colours at an array of points.
        
        This has the same effect as calling `interpolate` for each
        element of `values`, but is much faster for large arrays.
        
        :Returns:
        
            a NumPy `uint8` array with the shape of `values` plus a
            trailing axis of length four for the RGBA channels.
        """
        
        colours = np.array(self._get_colours(), dtype='float64')
        values = np.asarray(values, dtype='float64')
        values = np.clip(np.nan_to_num(values, nan=0.), 0, 1)
        
        n = len(colours)
        
        if n == 1:
            result = np.broadcast_to(colours[0], values.shape + (4,))
            return np.array(result, dtype='uint8')
        
        scaled = values * (n - 1)
        
        # Index of start colour of each value's segment. A value of one
        # lands at the end of the last segment rather than the start of
        # a nonexistent one.
        indices = np.minimum(np.floor(scaled).astype(int), n - 2)
        ratios = (scaled - indices)[..., np.newaxis]
        
        start = colours[indices]
        finish = colours[indices + 1]
        
        return np.floor(start + (finish - start) * ratios + .5).astype('uint8')


def _round(x):
    
    # Round half up, as opposed to Python's round half to even.
    return int(math.floor(x + .5))
