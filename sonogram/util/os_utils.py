"""Operating system utility functions."""


import os
import stat
import tempfile


def read_file(path):
    
    path = str(path)
    
    try:
        with open(path, 'r') as file_:
            return file_.read()
        
    except Exception as e:
        raise OSError(
            'Could not read file "{:s}". Error message was: {:s}'.format(
                path, str(e)))


def delete_file(path, check_existence=True):
    
    path = str(path)
    
    if check_existence and not os.path.exists(path):
        return
    
    try:
        os.remove(path)
        
    except OSError as e:
        message = (
            'Could not delete file "{:s}". Error message was: '
            '{:s}').format(path, str(e))
        raise OSError(message)


def write_file_atomically(path, write):
    
    """
    Writes a file so that it appears only when complete.
    
    `write` is a function of one argument, a file path, that writes
    the file contents to that path. This function calls `write` with
    the path of a temporary file in the same directory as `path`, and
    then renames the temporary file to `path`. If `write` raises an
    exception, the temporary file is deleted and the exception is
    propagated, leaving any existing file at `path` untouched.
    
    The new file gets the mode of any existing file at `path`, or else
    the mode that `open` would give it under the current umask.
    """
    
    path = os.path.abspath(str(path))
    dir_path, file_name = os.path.split(path)
    
    fd, temp_path = tempfile.mkstemp(
        prefix=f'.{file_name}.', suffix='.tmp', dir=dir_path)
    os.close(fd)
    
    try:
        write(temp_path)
        os.chmod(temp_path, _get_file_mode(path))
        os.replace(temp_path, path)
        
    except BaseException:
        delete_file(temp_path)
        raise


def _get_file_mode(path):
    
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    
    except FileNotFoundError:
        
        # There is no way to read the umask without setting it.
        umask = os.umask(0)
        os.umask(umask)
        
        return 0o666 & ~umask
