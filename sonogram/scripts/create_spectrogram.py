"""
Creates a spectrogram PNG image and/or CSV table from a WAVE file.

Usage example:

    sonogram --wav input.wav --png spectrogram.png --width 1024 \\
        --height 512 --window-size 1024 --overlap .5 --freq-scale log \\
        --gradient audacity

Spectrogram options can also be read from a YAML settings file with
the `--settings` option. Options specified on the command line take
precedence over ones from a settings file. An example settings file:

    window_size: 1024
    overlap: .75
    window: Blackman-Harris
    width: 800
    height: 400
    freq_scale: log
    gradient:
        - [0, 0, 0]
        - [255, 128, 0]
        - [255, 255, 255]

The script exits with status zero on success, with status one if the
spectrogram could not be created, and with status two if its arguments
are invalid.
"""


import argparse
import logging
import sys

from sonogram.errors import InvalidConfiguration, SonogramError
from sonogram.util.colour_gradient import THEME_NAMES
from sonogram.util.settings import Settings
from sonogram.util.spec_options import SpecOptionsBuilder
from sonogram.util.spectrograph import Spectrograph
import sonogram.signal.audio_file_utils as audio_file_utils
import sonogram.util.logging_utils as logging_utils
import sonogram.version as version


_DEFAULT_WIDTH = 256
_DEFAULT_HEIGHT = 256
_MIN_SCALE_FACTOR = 1e-6
_MAX_SCALE_FACTOR = 1e5
_WINDOW_FUNCTION_NAMES = ('rectangular', 'hann', 'blackman-harris')


_logger = logging.getLogger(__name__)


def _main():
    sys.exit(main())


def main(argv=None):

    args = _parse_args(argv)

    level = logging_utils.get_logging_level(args.quiet, args.verbose)
    logging_utils.configure_root_logger(level)

    try:
        _create_spectrogram(args)

    except SonogramError as e:

        message = f'Could not create spectrogram. Error message was: {e}'

        if args.verbose:
            message = logging_utils.append_stack_trace(message)

        _logger.error(message)

        return 1

    return 0


def _parse_args(argv):

    parser = argparse.ArgumentParser(
        prog='sonogram',
        description=(
            'Creates a spectrogram as a PNG image and/or a CSV table '
            'from a WAVE file.'))

    parser.add_argument(
        '-w', '--wav', dest='wav_file_path', metavar='FILE', required=True,
        help='the input file, a 16-bit WAVE file')

    parser.add_argument(
        '-p', '--png', dest='png_file_path', metavar='FILE',
        help='the output PNG file')

    parser.add_argument(
        '-c', '--csv', dest='csv_file_path', metavar='FILE',
        help='the output CSV file')

    parser.add_argument(
        '-n', '--channel', type=int, default=1, metavar='NUM',
        help='the number of the audio channel to analyze (default: 1)')

    parser.add_argument(
        '-d', '--downsample', type=int, default=1, metavar='NUM',
        help='downsample the audio by this factor (default: 1)')

    parser.add_argument(
        '--scale', type=float, default=1., metavar='SCALE',
        help=(
            'scale the audio samples by this factor before computing the '
            'spectrogram (default: 1)'))

    parser.add_argument(
        '-f', '--window-function', choices=_WINDOW_FUNCTION_NAMES,
        help='the window function (default: hann)')

    parser.add_argument(
        '-x', '--width', type=int, metavar='PIXELS',
        help=f'the width of the output (default: {_DEFAULT_WIDTH})')

    parser.add_argument(
        '-y', '--height', type=int, metavar='PIXELS',
        help=f'the height of the output (default: {_DEFAULT_HEIGHT})')

    parser.add_argument(
        '--window-size', '--chunk-len', dest='window_size', type=int,
        metavar='NUM',
        help=(
            'the window size in samples, a power of two (default: 2048)'))

    parser.add_argument(
        '--overlap', type=float, metavar='OVERLAP',
        help='the overlap of consecutive windows, in [0, 1) (default: 0)')

    parser.add_argument(
        '--freq-scale', choices=('linear', 'log'),
        help='the frequency scale (default: linear)')

    parser.add_argument(
        '-g', '--gradient', choices=THEME_NAMES,
        help='the colour gradient (default: default)')

    parser.add_argument(
        '--workers', type=int, metavar='NUM',
        help='the number of threads with which to compute the spectrogram')

    parser.add_argument(
        '--settings', dest='settings_file_path', metavar='FILE',
        help='a YAML file of spectrogram settings')

    verbosity = parser.add_mutually_exclusive_group()

    verbosity.add_argument(
        '-q', '--quiet', action='store_true',
        help='log only errors')

    verbosity.add_argument(
        '-v', '--verbose', action='store_true',
        help='log progress messages')

    parser.add_argument(
        '--version', action='version',
        version=f'%(prog)s {version.full_version}')

    args = parser.parse_args(argv)

    if args.png_file_path is None and args.csv_file_path is None:
        parser.error('at least one of --png and --csv is required')

    return args


def _create_spectrogram(args):

    options = _create_options(args)

    waveform = _read_waveform(args)

    spectrograph = Spectrograph(waveform, options)

    if args.png_file_path is not None:
        spectrograph.write_png_file(args.png_file_path)

    if args.csv_file_path is not None:
        spectrograph.write_csv_file(args.csv_file_path)


def _create_options(args):

    builder = SpecOptionsBuilder(_DEFAULT_WIDTH, _DEFAULT_HEIGHT)

    if args.settings_file_path is not None:
        builder.apply_settings(_read_settings(args.settings_file_path))

    if args.window_size is not None:
        builder.set_window_size(args.window_size)

    if args.overlap is not None:
        builder.set_overlap(args.overlap)

    if args.window_function is not None:
        builder.set_window(args.window_function)

    if args.width is not None:
        builder.set_width(args.width)

    if args.height is not None:
        builder.set_height(args.height)

    if args.freq_scale is not None:
        builder.set_freq_scale(args.freq_scale)

    if args.gradient is not None:
        builder.set_gradient(args.gradient)

    if args.workers is not None:
        builder.set_num_workers(args.workers)

    return builder.build()


def _read_settings(file_path):

    try:
        return Settings.create_from_yaml_file(file_path)

    except (OSError, ValueError) as e:
        raise InvalidConfiguration(
            f'Could not read settings file "{file_path}". Error message '
            f'was: {e}') from e


def _read_waveform(args):

    scale = args.scale

    if not _MIN_SCALE_FACTOR <= scale < _MAX_SCALE_FACTOR:
        raise InvalidConfiguration(
            f'Scale factor {scale} is out of range. It must be at least '
            f'{_MIN_SCALE_FACTOR} and less than {_MAX_SCALE_FACTOR}.')

    waveform = audio_file_utils.read_wave_file(
        args.wav_file_path, args.channel)

    _logger.info(
        f'Read {waveform.duration:.3f} seconds of audio from channel '
        f'{args.channel} of "{args.wav_file_path}".')

    return waveform.downsample(args.downsample).scale(scale)


if __name__ == '__main__':
    _main()
