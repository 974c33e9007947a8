"""Utility functions for time-frequency analysis."""


from concurrent.futures import ThreadPoolExecutor

import numpy as np

from sonogram.errors import InsufficientData, InvalidConfiguration
from sonogram.util.fft_engine import FftEngine


def get_dft_freqs(sample_rate, dft_size):

    """
    Gets the frequencies of a DFT analysis.

    It is assumed that the analyzed signal is real, so that the
    analysis will be performed at `dft_size // 2 + 1` frequencies.
    """

    num_freqs = dft_size // 2 + 1
    spacing = sample_rate / dft_size
    return np.arange(num_freqs) * spacing


def get_hop_size(record_size, overlap):
    
    """
    Gets the hop size for the specified record size and overlap.
    
    The overlap is the fraction of each record that is shared with
    the next record. It must be in [0, 1).
    """
    
    if not 0 <= overlap < 1:
        raise InvalidConfiguration(
            f'Overlap must be in [0, 1), but was {overlap}.')
    
    return int(record_size * (1 - overlap))


def get_num_analysis_records(num_samples, record_size, hop_size):

    if record_size <= 0:
        raise InvalidConfiguration('Record size must be positive.')

    elif hop_size <= 0:
        raise InvalidConfiguration('Hop size must be positive.')

    elif hop_size > record_size:
        raise InvalidConfiguration('Hop size must not exceed record size.')

    if num_samples < record_size:
        # not enough samples for any records

        return 0

    else:
        # have enough samples for at least one record

        overlap = record_size - hop_size
        return (num_samples - overlap) // hop_size


def compute_spectrogram_matrix(samples, window, hop_size, num_workers=1):

    """
    Computes the magnitude spectrogram of a real signal.
    
    The signal is divided into records of the window's length that
    start every `hop_size` samples, beginning with the first sample.
    Samples at the end of the signal that do not fill a record are
    ignored. Each record is multiplied by the window, and the
    magnitudes of the non-negative-frequency bins of its DFT form one
    column of the result.
    
    :Parameters:
    
        samples : one-dimensional NumPy array
            the signal samples.
            
        window : one-dimensional NumPy array
            the window samples. The window length is the DFT size,
            and must be a power of two.
            
        hop_size : `int`
            the record hop size in samples, at least one.
            
        num_workers : `int`
            the number of threads among which to divide the DFTs.
            
    :Returns:
    
        a NumPy array with `len(window) // 2 + 1` rows, one per DFT
        bin, and one column per record.
    """

    window = np.asarray(window, dtype='float64')
    window_size = len(window)
    
    engine = FftEngine(window_size)
    
    if hop_size < 1:
        raise InvalidConfiguration(
            f'Hop size must be at least one, but was {hop_size}.')
        
    samples = np.ascontiguousarray(samples, dtype='float64')
    num_samples = samples.shape[-1]
    
    if num_samples < window_size:
        raise InsufficientData(
            f'Signal has {num_samples} samples, fewer than the window '
            f'size of {window_size}.')

    records = _get_analysis_records(samples, window_size, hop_size)
    num_records = len(records)
    
    result = np.empty((engine.num_bins, num_records))
    
    def compute(start, end):
        magnitudes = engine.compute_magnitudes(window * records[start:end])
        result[:, start:end] = magnitudes.T
        
    if num_workers <= 1 or num_records == 1:
        compute(0, num_records)
        
    else:
        
        # Each worker fills its own block of result columns, so the
        # result does not depend on the order in which blocks finish.
        bounds = _get_block_bounds(num_records, num_workers)
        
        with ThreadPoolExecutor(max_workers=num_workers) as pool:
            futures = [pool.submit(compute, *b) for b in bounds]
            for future in futures:
                future.result()
                
    return result


def _get_block_bounds(num_items, num_blocks):
    
    """
    Divides a sequence of items into contiguous blocks of nearly equal
    size, returning a list of `(start, end)` index pairs.
    """
    
    num_blocks = min(num_blocks, num_items)
    edges = np.linspace(0, num_items, num_blocks + 1).astype(int)
    return [(int(s), int(e)) for s, e in zip(edges[:-1], edges[1:])]


def _get_analysis_records(samples, record_size, hop_size):

    """
    Creates a sequence of hopped sample records from the specified samples.

    This method uses a NumPy array stride trick to create the desired
    sequence as a view of the input samples that can be created at very
    little cost. The view is read-only, since when the hop size is less
    than the record size the view's records overlap in memory.

    The trick is from the `_fft_helper` function of the
    `scipy.signal.spectral` module of SciPy.
    """

    # Get result shape.
    num_samples = samples.shape[-1]
    num_vectors = get_num_analysis_records(num_samples, record_size, hop_size)
    shape = samples.shape[:-1] + (num_vectors, record_size)

    # Get result strides.
    stride = samples.strides[-1]
    strides = samples.strides[:-1] + (hop_size * stride, stride)

    return np.lib.stride_tricks.as_strided(
        samples, shape, strides, writeable=False)
