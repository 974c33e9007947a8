"""
Abstract parent class for time-frequency analyses.

By a *time-frequency analysis*, we mean an analysis of a waveform that
produces an analysis vector for each of a sequence of regularly spaced,
windowed waveform segments. We refer to the spacing of the waveform
segments as the *hop size*, and to each of the analysis vectors as
an *analysis*. The analyses are stored as the columns of a matrix,
so that time increases from left to right.
"""


import numpy as np


class TimeFrequencyAnalysis:
    
    
    def __init__(self, waveform, window, hop_size, freqs):
        
        self.waveform = waveform
        self.window = window
        self.hop_size = hop_size
        self.freqs = freqs
        
        self.analyses = self._analyze()
        
        self._times = None
        self._min_value = None
        self._max_value = None

        
    @property
    def analysis_rate(self):
        return self.waveform.sample_rate / self.hop_size
    
    
    @property
    def num_analyses(self):
        return self.analyses.shape[-1]
         

    @property
    def times(self):
        
        """Times of the centers of the analysis records, in seconds."""
        
        if self._times is None:
            waveform = self.waveform
            offset = (self.window.size - 1) / 2. / waveform.sample_rate
            self._times = \
                offset + np.arange(self.num_analyses) / self.analysis_rate
        return self._times
        
        
    @property
    def min_value(self):
        if self._min_value is None and self.analyses.size != 0:
            self._min_value = float(np.min(self.analyses))
        return self._min_value
     
     
    @property
    def max_value(self):
        if self._max_value is None and self.analyses.size != 0:
            self._max_value = float(np.max(self.analyses))
        return self._max_value
    
    
    def _analyze(self):
        raise NotImplementedError()
