"""Utilities pertaining to logging."""


import logging
import traceback


_MESSAGE_FORMAT = '%(asctime)s,%(msecs)03d %(levelname)-8s %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logging_level(quiet=False, verbose=False):
    
    """
    Gets the root logging level for the specified verbosity.
    
    By default warnings and errors are logged. Quiet mode logs only
    errors, and verbose mode logs informational messages as well, for
    example about the files written.
    """
    
    if quiet:
        return logging.ERROR
    elif verbose:
        return logging.INFO
    else:
        return logging.WARNING


def configure_root_logger(level=logging.WARNING):
    logging.basicConfig(
        format=_MESSAGE_FORMAT, datefmt=_DATE_FORMAT, level=level)


def append_stack_trace(message):
    return f'{message} See stack trace below.\n{traceback.format_exc()}'
