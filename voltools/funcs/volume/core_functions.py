from numba import njit
import numpy as np
from .constants import *
from .errors import AllocationFailure

##########################################################################################
# Core numba JIT functions for volume addressing
##########################################################################################

@njit(sig_flat_index, cache=True)
def flat_index_nb_core(
    i,
    j,
    k,
    rows,
    cols):
    """
    Row-major offset of element (i, j, k). No bounds checking.
    """
    return i * rows * cols + j * cols + k


##########################################################################################
# Core numpy functions for volume addressing and allocation
##########################################################################################


def flat_index_np_core(
    i : int,
    j : int,
    k : int,
    rows : int,
    cols : int) -> int:
    """
    Row-major offset of element (i, j, k) in a (depth, rows, cols) buffer.

    Args:
        i, j, k (int)       : channel, row and column coordinate
        rows, cols (int)    : row and column extents of the volume
    Returns:
        offset (int)        : i*rows*cols + j*cols + k
    """
    return i * rows * cols + j * cols + k


def volume_at_np_core(
    data : np.ndarray,
    rows : int,
    cols : int,
    i : int,
    j : int,
    k : int) -> float:
    """
    Unchecked element access into a flat row-major buffer.
    Only for coordinates already known to be in range.
    """
    return data[flat_index_np_core(i, j, k, rows, cols)]


def allocate_volume_np_core(
    depth : int,
    rows : int,
    cols : int,
    dtype : type = np.float32,
    zero : bool = True) -> np.ndarray:
    """
    Allocate the flat buffer backing a (depth, rows, cols) volume.

    Args:
        depth, rows, cols (int) : extents, all positive
        dtype (type)            : buffer dtype
        zero (bool)             : zero-fill the buffer, otherwise leave it uninitialised
    Returns:
        buffer (np.ndarray)     : C-contiguous 1D array of depth*rows*cols elements
    Raises:
        AllocationFailure       : the buffer is larger than the address space, or the
                                  runtime could not provide it
    """
    n = depth * rows * cols
    if n * np.dtype(dtype).itemsize > np.iinfo(np.intp).max:
        raise AllocationFailure(
            f"a ({depth}, {rows}, {cols}) volume of {np.dtype(dtype)} does not fit in the address space")
    try:
        if zero:
            return np.zeros(n, dtype=dtype)
        return np.empty(n, dtype=dtype)
    except MemoryError as e:
        raise AllocationFailure(
            f"could not allocate {n} elements for a ({depth}, {rows}, {cols}) volume") from e
