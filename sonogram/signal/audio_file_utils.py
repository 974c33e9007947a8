"""
Functions pertaining to audio files.

For the time being, this module supports only uncompressed 16-bit
WAVE files, with any number of channels. A spectrogram is computed
from a single channel, so reading a file yields a `WaveformBuffer`
for one channel of the file.
"""


from collections import namedtuple
import wave

import numpy as np

from sonogram.errors import DecodeFailure, SonogramError
from sonogram.signal.waveform_buffer import WaveformBuffer


_WAVE_SAMPLE_DTYPE = np.dtype('<i2')


WaveFileInfo = namedtuple(
    'WaveFileInfo',
    ('num_channels', 'length', 'sample_size', 'sample_rate',
     'compression_type', 'compression_name'))


def _read_header(reader):
    
    p = reader.getparams()
        
    sample_size = p.sampwidth * 8

    _check_wave_file_format(sample_size, p.comptype)
    
    sample_rate = float(p.framerate)
    
    return WaveFileInfo(
        num_channels=p.nchannels,
        length=p.nframes,
        sample_size=sample_size,
        sample_rate=sample_rate,
        compression_type=p.comptype,
        compression_name=p.compname)
 
 
def _check_wave_file_format(sample_size, compression_type):
    
    if sample_size != 16:
        raise DecodeFailure(
            ('Audio file has unsupported sample size of {} bits. Only '
             '16-bit samples are currently supported.').format(sample_size))
        
    if compression_type != 'NONE':
        raise DecodeFailure(
            'Audio file compression type is not "NONE". Only uncompressed '
            'audio files are currently supported.')


def read_wave_file(path, channel=1):
    
    """
    Reads one channel of a WAVE file.
    
    :Parameters:
    
        path : `str` or `Path`
            the path of the file to read.
            
        channel : `int`
            the number of the channel to read, starting from one.
            
    :Returns:
    
        a `WaveformBuffer` containing the samples of the specified
        channel, normalized so that full scale is one.
    """
    
    if channel < 1:
        raise DecodeFailure(
            f'Channel number must be at least one, but was {channel}.')
    
    try:
        
        with wave.open(str(path), 'rb') as reader:
            
            info = _read_header(reader)
            
            if channel > info.num_channels:
                raise DecodeFailure(
                    f'Cannot read channel {channel} of audio file '
                    f'"{path}", which has {info.num_channels} '
                    f'channel(s).')
                
            samples = _read_samples(reader, info.length, info.num_channels)
            
    except (OSError, EOFError, wave.Error) as e:
        raise DecodeFailure(
            f'Could not read audio file "{path}". Error message was: '
            f'{e}') from e
    
    try:
        return WaveformBuffer.create_from_int16(
            samples[channel - 1], info.sample_rate)
    
    except SonogramError as e:
        raise DecodeFailure(
            f'Audio file "{path}" contains no usable samples. Error '
            f'message was: {e}') from e
    
    
def _read_samples(reader, length, num_channels):
    
    data = reader.readframes(length)
    
    # A truncated file can yield fewer frames than its header promises,
    # and can end partway through a frame.
    frame_size = _WAVE_SAMPLE_DTYPE.itemsize * num_channels
    length = len(data) // frame_size
    data = data[:length * frame_size]
    
    samples = np.frombuffer(data, dtype=_WAVE_SAMPLE_DTYPE)
    
    return samples.reshape((length, num_channels)).transpose()


def write_wave_file(path, samples, sample_rate):
    
    """
    Writes a 16-bit WAVE file.
    
    `samples` is a NumPy array of integer-valued samples with either
    one dimension (one channel) or two, the first of which indexes
    channels.
    """
    
    dim_count = len(samples.shape)
    
    if dim_count != 1 and dim_count != 2:
        raise ValueError('Sample array must have one or two dimensions.')
    
    if dim_count == 1:
        samples = samples.reshape((1, -1))
        
    num_channels = samples.shape[0]
    
    with wave.open(str(path), 'wb') as writer:
        _write_header(writer, num_channels, sample_rate)
        _write_samples(writer, samples)
        
        
def _write_header(writer, num_channels, sample_rate):
    
    sample_size = 2
    sample_rate = int(round(sample_rate))
    length = 0
    compression_type = 'NONE'
    compression_name = 'not compressed'
    
    writer.setparams((
        num_channels, sample_size, sample_rate, length,
        compression_type, compression_name))
    
    
def _write_samples(writer, samples):
    
    # Ensure that samples are of the correct type.
    if samples.dtype != _WAVE_SAMPLE_DTYPE:
        samples = np.array(np.round(samples), dtype=_WAVE_SAMPLE_DTYPE)
        
    # Convert samples to bytes, interleaving samples of multiple channels.
    samples = samples.tobytes('F')
    
    writer.writeframes(samples)
