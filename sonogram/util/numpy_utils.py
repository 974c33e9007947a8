"""Utility functions pertaining to NumPy arrays."""


import numpy as np


def arrays_equal(x, y):
    
    """
    Tests if two arrays have the same shape and the same values.
    
    The arrays may have different dtypes. Unlike `np.all(x == y)`, this
    does not broadcast, so `np.zeros(1)` does not equal `np.zeros(2)`.
    """
    
    return x.shape == y.shape and bool(np.all(x == y))
    
    
def arrays_close(x, y):
    
    """
    Tests if two arrays have the same shape and close values, as
    judged by `np.allclose`.
    """
    
    return x.shape == y.shape and bool(np.allclose(x, y))


def make_read_only(x):
    
    """
    Marks an array read-only and returns it.
    
    Spectrogram matrices and waveform samples are shared freely once
    created, so we protect them from accidental modification.
    """
    
    x.setflags(write=False)
    return x
