"""
YAML utility functions.

Sonogram reads YAML 1.2 with `ruamel.yaml`. Under YAML 1.2 a value
like `12:34` is a string rather than a sexagesimal number, and `on`
and `off` are strings rather than booleans.
"""


from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError


def _create_yaml():
    
    # The pure-Python implementation is slower than the C one, but
    # behaves the same everywhere. Settings files are small.
    return YAML(typ='safe', pure=True)


def load(source):
    
    """
    Loads YAML from a string or stream.
    
    A YAML syntax error raises a `ValueError`.
    """
    
    try:
        return _create_yaml().load(source)
    
    except YAMLError as e:
        raise ValueError(f'YAML parse failed. Error message was: {e}') \
            from e

