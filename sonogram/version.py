"""
Module containing the Sonogram version.

The `setup.py` script loads this module to get the package version,
and the `sonogram` command reports it for its `--version` option, so
this module must not import anything from the rest of the package.
"""


__version__ = '0.7.1'

full_version = __version__
