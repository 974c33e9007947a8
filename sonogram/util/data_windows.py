"""Module containing data window definitions."""


import numpy as np
import scipy.signal.windows as windows

from sonogram.errors import InvalidConfiguration


# All windows are symmetric, i.e. their first and last samples are
# equal, as is usual for spectral analysis of finite records.


class RectangularWindow:
    
    name = 'Rectangular'
    
    def __init__(self, N):
        self.size = N
        self.samples = np.ones(N)
    
    
class HannWindow:
    
    name = 'Hann'
    
    def __init__(self, N):
        self.size = N
        self.samples = windows.hann(N, sym=True)
        
        
class BlackmanHarrisWindow:
    
    """Four-term Blackman-Harris window, with -92 dB sidelobes."""
    
    name = 'Blackman-Harris'
    
    def __init__(self, N):
        self.size = N
        self.samples = windows.blackmanharris(N, sym=True)
    
    
_WINDOW_TYPES = dict(
    (t.name.lower(), t)
    for t in (RectangularWindow, HannWindow, BlackmanHarrisWindow))


WINDOW_NAMES = tuple(t.name for t in _WINDOW_TYPES.values())


def get_window_name(name):
    
    """
    Gets the canonical name of the specified window type.
    
    Window names are case-insensitive, and an underscore may stand
    in for a hyphen, so that "blackman_harris" names the
    Blackman-Harris window.
    """
    
    return _get_window_type(name).name


def _get_window_type(name):
    
    try:
        return _WINDOW_TYPES[name.lower().replace('_', '-')]
    except (KeyError, AttributeError):
        raise InvalidConfiguration(
            'Unrecognized window type "{}".'.format(name))


def create_window(name, N):
    window_type = _get_window_type(name)
    return window_type(N)
