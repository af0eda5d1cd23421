from numba import njit, prange
import numpy as np
from scipy.signal import correlate
from typing import Tuple
from .constants import *
from ..volume.core_functions import flat_index_nb_core

##########################################################################################
# Core numba JIT functions for convolution
##########################################################################################

@njit(sig_window_start, cache=True)
def conv_window_start_nb_core(
    out_coord,
    stride,
    padding):
    """
    First input coordinate seen by an output coordinate (can be negative)
    """
    return out_coord * stride - padding


@njit([sig_conv_32, sig_conv_64], parallel=True, fastmath=True, cache=True)
def volume_conv_nb_core(
    input_volume,
    kernel,
    out,
    extents_in,
    extents_kernel,
    extents_out,
    stride,
    padding):
    """
    Strided cross-correlation of a volume with a kernel volume, zero padded.

    Input coordinates that fall outside the volume are skipped, which is the
    same as reading zeros from a padded copy without building one.

    Args:
        input_volume: flat buffer (in_d*in_r*in_c,)
        kernel: flat buffer (k_d*k_r*k_c,)
        out: flat output buffer (o_d*o_r*o_c,), zero initialised
        extents_in: (in_d, in_r, in_c)
        extents_kernel: (k_d, k_r, k_c)
        extents_out: (o_d, o_r, o_c)
        stride: step between output positions, >= 1
        padding: implicit zeros on each side, >= 0
    """
    in_d, in_r, in_c = extents_in
    k_d, k_r, k_c = extents_kernel
    o_d, o_r, o_c = extents_out

    for i in prange(o_d):
        start_i = conv_window_start_nb_core(i, stride, padding)
        for j in range(o_r):
            start_j = conv_window_start_nb_core(j, stride, padding)
            for k in range(o_c):
                start_k = conv_window_start_nb_core(k, stride, padding)

                sum_val = 0.0
                for l in range(k_d):
                    in_i = start_i + l
                    if in_i < 0 or in_i >= in_d:
                        continue
                    for m in range(k_r):
                        in_j = start_j + m
                        if in_j < 0 or in_j >= in_r:
                            continue
                        for n in range(k_c):
                            in_k = start_k + n
                            if in_k < 0 or in_k >= in_c:
                                continue
                            sum_val += (input_volume[flat_index_nb_core(in_i, in_j, in_k, in_r, in_c)] *
                                        kernel[flat_index_nb_core(l, m, n, k_r, k_c)])

                out[flat_index_nb_core(i, j, k, o_r, o_c)] = sum_val


##########################################################################################
# Core numpy functions for convolution
##########################################################################################


def conv_output_shape_np_core(
    extents_in : Tuple[int, int, int],
    extents_kernel : Tuple[int, int, int],
    stride : int,
    padding : int) -> Tuple[int, int, int]:
    """
    Output extents of a strided, padded cross-correlation.

    Each axis independently: (input - kernel + 2*padding) // stride + 1.
    A numerator that stride does not divide is truncated. A kernel wider than
    the padded input gives an extent <= 0.

    Args:
        extents_in (tuple)      : (depth, rows, cols) of the input
        extents_kernel (tuple)  : (depth, rows, cols) of the kernel
        stride (int)            : step between output positions
        padding (int)           : implicit zeros on each side
    Returns:
        extents_out (tuple)     : (depth, rows, cols) of the output
    """
    return tuple(
        (n_in - n_kernel + 2 * padding) // stride + 1
        for n_in, n_kernel in zip(extents_in, extents_kernel))


def volume_conv_np_core(
    input_volume : np.ndarray,
    kernel : np.ndarray,
    out : np.ndarray,
    extents_in : Tuple[int, int, int],
    extents_kernel : Tuple[int, int, int],
    extents_out : Tuple[int, int, int],
    stride : int,
    padding : int) -> np.ndarray:
    """
    Strided, zero-padded cross-correlation using scipy.signal.correlate.

    Args:
        input_volume (np.ndarray)   : flat input buffer
        kernel (np.ndarray)         : flat kernel buffer
        out (np.ndarray)            : preallocated flat output buffer
        extents_in (tuple)          : (depth, rows, cols) of the input
        extents_kernel (tuple)      : (depth, rows, cols) of the kernel
        extents_out (tuple)         : (depth, rows, cols) of the output
        stride (int)                : step between output positions
        padding (int)               : implicit zeros on each side
    Returns:
        out (np.ndarray)            : the flat output buffer
    """
    padded = np.pad(input_volume.reshape(extents_in),
                    padding,
                    mode='constant',
                    constant_values=0)
    # correlate does not flip the kernel
    full = correlate(padded,
                     kernel.reshape(extents_kernel),
                     mode='valid',
                     method='direct')
    out.reshape(extents_out)[...] = full[::stride, ::stride, ::stride]
    return out
