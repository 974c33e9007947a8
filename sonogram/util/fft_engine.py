"""Module containing class `FftEngine`."""


import numpy as np

from sonogram.errors import InvalidConfiguration


def is_power_of_two(n):
    return isinstance(n, (int, np.integer)) and not isinstance(n, bool) \
        and n > 0 and (n & (n - 1)) == 0


class FftEngine:
    
    """
    Computes DFT magnitudes of real records of a fixed size.
    
    The DFT size must be a positive power of two. Since the input
    records are real, the DFT of a record is conjugate symmetric, and
    the engine returns only the magnitudes of its `dft_size // 2 + 1`
    non-negative-frequency bins.
    """
    
    
    def __init__(self, dft_size):
        
        if not is_power_of_two(dft_size):
            raise InvalidConfiguration(
                f'DFT size {dft_size} is not a positive power of two.')
            
        self._dft_size = int(dft_size)
        
        
    @property
    def dft_size(self):
        return self._dft_size
    
    
    @property
    def num_bins(self):
        return self._dft_size // 2 + 1
    
    
    def compute_magnitudes(self, records):
        
        """
        Computes DFT magnitudes of one or more records.
        
        :Parameters:
        
            records : NumPy array
                records of length `dft_size` along the last axis.
                
        :Returns:
        
            NumPy array of `float64` magnitudes whose last axis has
            length `num_bins`.
        """
        
        records = np.asarray(records, dtype='float64')
        
        if records.shape[-1] != self._dft_size:
            raise ValueError(
                f'Record length {records.shape[-1]} does not match DFT '
                f'size {self._dft_size}.')
            
        # `rfft` computes exactly the non-negative-frequency half of
        # the complex DFT of a real input.
        spectra = np.fft.rfft(records, n=self._dft_size, axis=-1)
        
        return np.abs(spectra)
