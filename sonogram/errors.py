"""Module containing the Sonogram exception classes."""


class SonogramError(Exception):
    pass


class InvalidConfiguration(SonogramError):
    
    """
    Raised for a malformed window size, overlap, window function,
    gradient, or other spectrogram setting.
    """
    
    pass


class InsufficientData(SonogramError):
    
    """Raised when a waveform is empty or shorter than one window."""
    
    pass


class InvalidDimensions(SonogramError):
    
    """Raised when an output of zero width or height is requested."""
    
    pass


class DecodeFailure(SonogramError):
    
    """Raised when an audio file cannot be read."""
    
    pass


class EncodeFailure(SonogramError):
    
    """Raised when an image or table file cannot be written."""
    
    pass
