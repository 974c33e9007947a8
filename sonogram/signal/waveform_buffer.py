"""Module containing class `WaveformBuffer`."""


import numpy as np

from sonogram.errors import InsufficientData, InvalidConfiguration
import sonogram.util.numpy_utils as numpy_utils


_INT16_FULL_SCALE = 32767


class WaveformBuffer:
    
    """
    One channel of audio samples together with their sample rate.
    
    A waveform buffer is immutable: its sample array is a private,
    read-only copy of the samples it was created from. Operations that
    derive a new waveform from an existing one, like `downsample` and
    `scale`, return new buffers.
    """
    
    
    @staticmethod
    def create_from_int16(samples, sample_rate):
        
        """
        Creates a waveform buffer from 16-bit integer samples.
        
        The samples are divided by 32767, so that a full scale 16-bit
        sample becomes 1.
        """
        
        samples = np.asarray(samples, dtype='float64') / _INT16_FULL_SCALE
        return WaveformBuffer(samples, sample_rate)
    
    
    def __init__(self, samples, sample_rate):
        
        samples = np.array(samples, dtype='float64')
        
        if samples.ndim != 1:
            raise InvalidConfiguration(
                f'Waveform samples must be one-dimensional, but sample '
                f'array has {samples.ndim} dimensions.')
            
        if len(samples) == 0:
            raise InsufficientData('Waveform contains no samples.')
        
        if sample_rate <= 0:
            raise InvalidConfiguration(
                f'Sample rate must be positive, but was {sample_rate}.')
        
        self._samples = numpy_utils.make_read_only(samples)
        self._sample_rate = float(sample_rate)
        
        
    def __eq__(self, other):
        return isinstance(other, WaveformBuffer) and \
            self.sample_rate == other.sample_rate and \
            numpy_utils.arrays_equal(self.samples, other.samples)
            
            
    def __len__(self):
        return len(self._samples)
    
    
    @property
    def samples(self):
        return self._samples
    
    
    @property
    def sample_rate(self):
        return self._sample_rate
    
    
    @property
    def duration(self):
        return len(self._samples) / self._sample_rate
    
    
    def downsample(self, divisor):
        
        """
        Downsamples this waveform by an integer factor.
        
        Each group of `divisor` consecutive samples is replaced by its
        average, and the sample rate is divided by `divisor`. Trailing
        samples that do not fill a complete group are dropped. This is
        a cheap way of reducing the cost of subsequent analysis, at
        the price of some aliasing.
        """
        
        if divisor < 1:
            raise InvalidConfiguration(
                f'Downsampling divisor must be at least one, but was '
                f'{divisor}.')
            
        if divisor == 1:
            return self
        
        num_groups = len(self._samples) // divisor
        
        if num_groups == 0:
            raise InsufficientData(
                f'Cannot downsample {len(self._samples)} samples by a '
                f'factor of {divisor}.')
            
        groups = self._samples[:num_groups * divisor].reshape(
            (num_groups, divisor))
        
        return WaveformBuffer(
            groups.mean(axis=1), self._sample_rate / divisor)
        
        
    def scale(self, factor):
        
        """Returns a copy of this waveform with its samples scaled."""
        
        if factor == 1:
            return self
        
        return WaveformBuffer(self._samples * factor, self._sample_rate)
    
    
    def normalize(self):
        
        """
        Returns a copy of this waveform scaled to unit peak magnitude.
        
        A silent waveform is returned unchanged.
        """
        
        peak = np.max(np.abs(self._samples))
        
        if peak == 0:
            return self
        
        return self.scale(1 / peak)
