"""Functions that write spectrogram matrices to CSV files."""


import csv
import logging

import numpy as np

from sonogram.errors import EncodeFailure
import sonogram.util.os_utils as os_utils


_logger = logging.getLogger(__name__)


def get_csv_records(matrix):
    
    """
    Gets the CSV records of a spectrogram matrix.
    
    The first record is a header containing the column numbers of the
    matrix. It is followed by one record per matrix row. The rows are
    in reverse order, so that the highest frequency comes first as in
    a spectrogram image. Each value is formatted with `repr`, so it
    can be parsed back into exactly the same float.
    """
    
    matrix = np.asarray(matrix, dtype='float64')
    
    if matrix.ndim != 2:
        raise ValueError(
            f'Spectrogram matrix must have two dimensions, but has '
            f'{matrix.ndim}.')
    
    yield [str(i) for i in range(matrix.shape[1])]
    
    for row in matrix[::-1]:
        yield [repr(float(v)) for v in row]


def write_csv_file(path, matrix):
    
    """
    Writes a spectrogram matrix to a CSV file.
    
    The file is written in full or not at all: if writing fails, no
    file is left at `path`.
    """
    
    def write(temp_path):
        with open(temp_path, 'w', newline='') as file_:
            writer = csv.writer(file_)
            writer.writerows(get_csv_records(matrix))
            
    try:
        os_utils.write_file_atomically(path, write)
        
    except (OSError, ValueError, csv.Error) as e:
        raise EncodeFailure(
            f'Could not write CSV file "{path}". Error message was: '
            f'{e}') from e
        
    num_rows, num_columns = np.shape(matrix)
    
    _logger.info(
        f'Wrote {num_rows} x {num_columns} spectrogram table to "{path}".')
