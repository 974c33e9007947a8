"""Module containing `Spectrogram` class."""


import logging

from sonogram.errors import InvalidConfiguration
from sonogram.util.fft_engine import is_power_of_two
import sonogram.util.data_windows as data_windows
import sonogram.util.numpy_utils as numpy_utils
from sonogram.util.time_frequency_analysis import TimeFrequencyAnalysis
import sonogram.util.time_frequency_analysis_utils as tfa_utils


_logger = logging.getLogger(__name__)


class Spectrogram(TimeFrequencyAnalysis):


    def __init__(self, waveform, settings):

        """
        Initializes this spectrogram.

        :Parameters:

            waveform : `WaveformBuffer`
                the waveform of which to compute the spectrogram.

            settings : `object`
                the spectrogram settings, typically a `SpecOptions`.

                This parameter must be a Python object with the
                following attributes:

                    window_size : `int`
                        the window size in samples, a power of two.
                        This is also the DFT size.

                    step_size : `int`
                        the spectrogram hop size in samples.

                    window_name : `str`
                        the name of the data window, for example
                        "Hann".

                    num_workers : `int`
                        the number of threads among which to divide
                        the DFTs of the spectrogram.
        """
        
        if not is_power_of_two(settings.window_size):
            raise InvalidConfiguration(
                f'Window size must be a positive power of two, but was '
                f'{settings.window_size!r}.')
            
        window = data_windows.create_window(
            settings.window_name, settings.window_size)
        
        freqs = tfa_utils.get_dft_freqs(
            waveform.sample_rate, settings.window_size)
        
        self.num_workers = settings.num_workers

        super().__init__(waveform, window, settings.step_size, freqs)


    def _analyze(self):
        
        _logger.debug(
            f'Computing spectrogram of {len(self.waveform)} samples '
            f'with {self.window.name} window of size {self.window.size}, '
            f'hop size {self.hop_size}, and {self.num_workers} '
            f'worker(s)...')

        magnitudes = tfa_utils.compute_spectrogram_matrix(
            self.waveform.samples, self.window.samples, self.hop_size,
            self.num_workers)
        
        _logger.debug(
            f'Computed spectrogram with {magnitudes.shape[0]} bins and '
            f'{magnitudes.shape[1]} records.')

        return numpy_utils.make_read_only(magnitudes)


    @property
    def magnitudes(self):
        
        """
        The spectrogram magnitude matrix.
        
        The matrix has one row per DFT bin, starting with the DC bin,
        and one column per analysis record, starting with the earliest.
        It is read-only.
        """
        
        return self.analyses
    
    
    @property
    def num_bins(self):
        return self.analyses.shape[0]
    
    
    @property
    def num_frames(self):
        return self.analyses.shape[1]


    @property
    def freq_spacing(self):
        return self.waveform.sample_rate / self.window.size
    
    
    def row(self, i):
        
        """Gets the magnitudes of DFT bin `i` for all records."""
        
        return self.analyses[i]
