"""
Reader for flat text files of floats, e.g. "0.1, 0.2, 0.3" or one value per line.
"""

import os
import re
import numpy as np
from ..funcs.volume import Volume

# a single decimal float in the forms C's %f conversion accepts
_FLOAT = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE)


def parse_values(text: str) -> np.ndarray:
    """
    Parse floats separated by commas and/or whitespace.

    Scanning stops at the first token that is not a number; everything
    before it is returned. A comma is only consumed directly after a value.
    """
    values = []
    pos = 0
    while True:
        match = _FLOAT.match(text, pos)
        if match is None:
            break
        values.append(float(match.group(1)))
        pos = match.end()
        if text.startswith(",", pos):
            pos += 1
    return np.asarray(values, dtype=np.float32)


def read_values_from_file(filename: str) -> np.ndarray:
    """
    Read a flat list of floats from a text file.

    Args:
        filename (str)      : path to a comma and/or whitespace delimited file
    Returns:
        values (np.ndarray) : float32 array, possibly empty
    Raises:
        FileNotFoundError   : the file does not exist
    """
    if not os.path.isfile(filename):
        raise FileNotFoundError(f"could not open file '{filename}'")
    with open(filename, "r") as fp:
        return parse_values(fp.read())


def load_volume(
    filename: str,
    depth: int,
    rows: int,
    cols: int,
    dtype: type = np.float32) -> Volume:
    """
    Read a flat list of floats and lay it out as a (depth, rows, cols) volume.

    Raises:
        ValueError : the file does not hold exactly depth*rows*cols values
    """
    values = read_values_from_file(filename)
    if values.size != depth * rows * cols:
        raise ValueError(
            f"'{filename}' holds {values.size} values, ({depth}, {rows}, {cols}) needs {depth * rows * cols}")
    return Volume.from_values(values, depth, rows, cols, dtype=dtype)
