"""
Grid dimensions and display constants.

Exports:
    NUM_ROWS (int): Default number of rows in a sheet.
    NUM_COLS (int): Default number of columns in a sheet.
    MAX_COLS (int): Upper bound on columns, one per letter A..Z.
    ERROR_MARKER (str): Display text of a cell whose formula failed.
    RESULT_FORMAT (str): printf-style format of a formula result.
"""

NUM_ROWS = 10
NUM_COLS = 7

# Formula references name a column with a single letter
MAX_COLS = 26

ERROR_MARKER = "ERROR"
RESULT_FORMAT = "%g"
