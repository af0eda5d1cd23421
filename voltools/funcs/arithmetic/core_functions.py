from numba import njit, prange
import numpy as np
from .constants import *
from ..volume.core_functions import flat_index_nb_core

##########################################################################################
# Core numba JIT functions for volume arithmetic
##########################################################################################

# No fastmath here: NaN/Inf have to propagate with plain IEEE-754 semantics.

@njit([sig_add_32, sig_add_64], parallel=True, cache=True)
def volume_add_nb_core(
    volume_a,
    volume_b,
    out,
    extents):
    """
    Elementwise sum of two same-shape volumes, in row-major order.

    Args:
        volume_a: flat buffer (depth*rows*cols,)
        volume_b: flat buffer (depth*rows*cols,)
        out: flat output buffer (depth*rows*cols,)
        extents: (depth, rows, cols)
    """
    depth, rows, cols = extents
    for i in prange(depth):
        for j in range(rows):
            for k in range(cols):
                idx = flat_index_nb_core(i, j, k, rows, cols)
                out[idx] = volume_a[idx] + volume_b[idx]


@njit([sig_negate_32, sig_negate_64], parallel=True, cache=True)
def volume_negate_nb_core(
    volume,
    out,
    extents):
    """
    Additive inverse of every element
    """
    depth, rows, cols = extents
    for i in prange(depth):
        for j in range(rows):
            for k in range(cols):
                idx = flat_index_nb_core(i, j, k, rows, cols)
                out[idx] = -volume[idx]


@njit([sig_scale_32, sig_scale_64], parallel=True, cache=True)
def volume_scale_nb_core(
    volume,
    scalar,
    out,
    extents):
    """
    Every element times a scalar
    """
    depth, rows, cols = extents
    for i in prange(depth):
        for j in range(rows):
            for k in range(cols):
                idx = flat_index_nb_core(i, j, k, rows, cols)
                out[idx] = volume[idx] * scalar


@njit([sig_multiply_32, sig_multiply_64], parallel=True, cache=True)
def volume_multiply_nb_core(
    volume_a,
    volume_b,
    out,
    extents_a,
    extents_b):
    """
    Per-channel matrix product out[i,j,k] = sum_m a[i,j,m] * b[i,m,k]

    Args:
        volume_a: flat buffer of a (depth, a_rows, a_cols) volume
        volume_b: flat buffer of a (depth, a_cols, b_cols) volume
        out: flat output buffer of a (depth, a_rows, b_cols) volume
        extents_a: (depth, a_rows, a_cols)
        extents_b: (depth, a_cols, b_cols)
    """
    depth, a_rows, a_cols = extents_a
    b_rows, b_cols = extents_b[1], extents_b[2]
    for i in prange(depth):
        for j in range(a_rows):
            for k in range(b_cols):
                sum_val = 0.0
                # inner index in increasing order
                for m in range(a_cols):
                    sum_val += (volume_a[flat_index_nb_core(i, j, m, a_rows, a_cols)] *
                                volume_b[flat_index_nb_core(i, m, k, b_rows, b_cols)])
                out[flat_index_nb_core(i, j, k, a_rows, b_cols)] = sum_val


##########################################################################################
# Core numpy functions for volume arithmetic
##########################################################################################


def volume_add_np_core(
    volume_a : np.ndarray,
    volume_b : np.ndarray,
    out : np.ndarray) -> np.ndarray:
    """
    Elementwise sum of two flat buffers of equal length.
    Args:
        volume_a (np.ndarray)   : flat buffer (depth*rows*cols,)
        volume_b (np.ndarray)   : flat buffer (depth*rows*cols,)
        out (np.ndarray)        : preallocated flat output buffer
    Returns:
        out (np.ndarray)        : a + b
    """
    return np.add(volume_a, volume_b, out=out)


def volume_negate_np_core(
    volume : np.ndarray,
    out : np.ndarray) -> np.ndarray:
    """
    Additive inverse of a flat buffer.
    """
    return np.negative(volume, out=out)


def volume_scale_np_core(
    volume : np.ndarray,
    scalar : float,
    out : np.ndarray) -> np.ndarray:
    """
    Scalar multiple of a flat buffer. The scalar is cast to the buffer dtype first.
    """
    return np.multiply(volume, out.dtype.type(scalar), out=out)


def volume_multiply_np_core(
    volume_a : np.ndarray,
    volume_b : np.ndarray,
    out : np.ndarray,
    extents_a : tuple,
    extents_b : tuple) -> np.ndarray:
    """
    Per-channel matrix product of two flat volumes.
    Args:
        volume_a (np.ndarray)   : flat buffer of a (D, N, M) volume
        volume_b (np.ndarray)   : flat buffer of a (D, M, K) volume
        out (np.ndarray)        : preallocated flat buffer of a (D, N, K) volume
        extents_a (tuple)       : (D, N, M)
        extents_b (tuple)       : (D, M, K)
    Returns:
        out (np.ndarray)        : a_ijm b_imk -> c_ijk
    """
    depth, a_rows, _ = extents_a
    b_cols = extents_b[2]
    np.einsum('ijm,imk->ijk',
              volume_a.reshape(extents_a),
              volume_b.reshape(extents_b),
              out=out.reshape((depth, a_rows, b_cols)))
    return out
