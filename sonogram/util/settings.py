"""Module containing class `Settings`."""


import sonogram.util.os_utils as os_utils
import sonogram.util.yaml_utils as yaml_utils


class Settings:
    
    """
    Collection of spectrogram settings.
    
    A setting has a name, which must be a Python identifier, and a
    value, which is `None`, a boolean, number, string, list, or nested
    `Settings` object. A setting `x` of a settings object `s` is
    accessed as the attribute `s.x`.
    
    Settings are created from keyword arguments, from a dictionary, or
    from YAML. Settings objects passed as positional arguments to the
    initializer supply defaults for the keyword arguments, with later
    objects overriding earlier ones:
    
        defaults = Settings(window_size=1024, overlap=.5)
        settings = Settings(defaults, overlap=.75)
    """
    
    
    @staticmethod
    def create_from_dict(d):
        
        """Creates settings from a dictionary, recursively."""
        
        if not isinstance(d, dict):
            raise TypeError(
                f'Settings data must be a dictionary, not a '
                f'{d.__class__.__name__}.')
            
        for k in d:
            if not isinstance(k, str) or not k.isidentifier():
                raise ValueError(
                    f'Setting name {k!r} is not a Python identifier.')
                
        return Settings(**{k: _convert_value(v) for k, v in d.items()})
    
    
    @staticmethod
    def create_from_yaml(s):
        
        """
        Creates settings from a YAML string.
        
        The YAML must be a mapping, or empty. Malformed YAML raises a
        `ValueError`.
        """
        
        d = yaml_utils.load(s)
        
        if d is None:
            d = {}
            
        elif not isinstance(d, dict):
            raise ValueError(
                f'Settings YAML must be a mapping, not a '
                f'{d.__class__.__name__}.')
            
        return Settings.create_from_dict(d)
    
    
    @staticmethod
    def create_from_yaml_file(file_path):
        
        """Creates settings from a YAML file."""
        
        s = os_utils.read_file(file_path)
        
        try:
            return Settings.create_from_yaml(s)
        
        except ValueError as e:
            raise ValueError(
                f'Bad settings file "{file_path}": {e}') from e
    
    
    def __init__(self, *defaults, **settings):
        
        for d in defaults:
            self.__dict__.update(d.__dict__)
            
        self.__dict__.update(settings)
        
        
    def __eq__(self, other):
        return isinstance(other, Settings) and \
            self.__dict__ == other.__dict__
            
            
    def __repr__(self):
        items = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'Settings({items})'
    
    
    def __len__(self):
        return len(self.__dict__)
    
    
    def __contains__(self, name):
        return name in self.__dict__
    
    
    def __iter__(self):
        return iter(self.__dict__)
    
    
    def get(self, name, default=None):
        return self.__dict__.get(name, default)
    
    
def _convert_value(v):
    if isinstance(v, dict):
        return Settings.create_from_dict(v)
    elif isinstance(v, list):
        return [_convert_value(i) for i in v]
    else:
        return v
