"""
    VOLtools: Convolution Operations

    Strided, zero-padded cross-correlation of a rank-3 volume with a kernel
    volume, using a Numba kernel with a SciPy fallback. The kernel is not
    flipped.

    Geometry that would give an empty or negative output, a stride below 1 or
    a negative padding is rejected with DegenerateGeometry before anything is
    allocated.

"""

from typing import Tuple
from ..volume import (
    Volume,
    VolumeResult,
    DegenerateGeometry,
    make,
    resolve_precision,
    ensure_precision,
    check_operand,
    report_failure
)
from ..volume.constants import DEFAULT_PRECISION
from .constants import *
from .core_functions import *


class ConvolutionOperations():
    """
    Convolution of volumes using Numba kernels.
    No data objects. Only methods.
    """

    def __init__(
        self,
        use_numba: bool = True,
        precision: str = DEFAULT_PRECISION,
        debug: bool = False) -> None:
        """
        Initialize the ConvolutionOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions, otherwise scipy.signal. Defaults to True.
            precision (str, optional): working precision, 'float32' or 'float64'. Defaults to 'float32'.
            debug (bool, optional): print conversions and recoverable conditions. Defaults to False.
        """
        self.use_numba = use_numba
        self.precision = precision
        self.float_dtype = resolve_precision(precision)
        self.debug = debug


    def conv_output_shape(
        self,
        input_shape: Tuple[int, int, int],
        kernel_shape: Tuple[int, int, int],
        stride: int = DEFAULT_STRIDE,
        padding: int = DEFAULT_PADDING) -> Tuple[int, int, int]:
        """
        Output extents (depth, rows, cols) of convolve, without computing it.
        Extents <= 0 mean the geometry is degenerate.
        """
        if stride < 1:
            raise ValueError(f"stride must be >= 1, got {stride}")
        if padding < 0:
            raise ValueError(f"padding must be >= 0, got {padding}")
        return conv_output_shape_np_core(tuple(input_shape), tuple(kernel_shape), stride, padding)


    def convolve(
        self,
        input_volume: Volume,
        kernel: Volume,
        stride: int = DEFAULT_STRIDE,
        padding: int = DEFAULT_PADDING) -> VolumeResult:
        """
        Strided, zero-padded cross-correlation.

        out[i,j,k] = sum_{l,m,n} input[i*s-p+l, j*s-p+m, k*s-p+n] * kernel[l,m,n]

        with out-of-range input coordinates contributing nothing. Per axis the
        output extent is (input - kernel + 2*padding) // stride + 1; a remainder
        is truncated.

        Args:
            input_volume (Volume): volume to sweep over
            kernel (Volume): weights, never flipped
            stride (int): step between output positions, >= 1
            padding (int): implicit zeros on each side of every axis, >= 0
        Returns:
            VolumeResult: the correlation, or the invalid volume with a
                          DegenerateGeometry / InvalidOperand
        """
        for name, vol in (("input_volume", input_volume), ("kernel", kernel)):
            error = check_operand(vol, name)
            if error is not None:
                return report_failure(error, self.debug)

        try:
            integral = int(stride) == stride and int(padding) == padding
        except (TypeError, ValueError, OverflowError):
            # NaN, Inf and non-numeric values
            integral = False
        if not integral:
            return report_failure(
                DegenerateGeometry(f"stride and padding must be integers, got {stride}, {padding}"),
                self.debug)
        stride, padding = int(stride), int(padding)
        if stride < 1:
            return report_failure(
                DegenerateGeometry(f"stride must be >= 1, got {stride}"),
                self.debug)
        if padding < 0:
            return report_failure(
                DegenerateGeometry(f"padding must be >= 0, got {padding}"),
                self.debug)

        out_shape = conv_output_shape_np_core(input_volume.shape, kernel.shape, stride, padding)
        if min(out_shape) <= 0:
            return report_failure(
                DegenerateGeometry(
                    f"kernel {kernel.shape} with stride={stride}, padding={padding} "
                    f"gives output extents {out_shape} for input {input_volume.shape}"),
                self.debug)

        x = ensure_precision(input_volume, self.float_dtype, "input_volume", self.debug)
        w = ensure_precision(kernel, self.float_dtype, "kernel", self.debug)
        out = make(*out_shape, zero=True, dtype=self.float_dtype)
        if self.use_numba:
            volume_conv_nb_core(x, w, out.data,
                                input_volume.shape, kernel.shape, out_shape,
                                stride, padding)
        else:
            volume_conv_np_core(x, w, out.data,
                                input_volume.shape, kernel.shape, out_shape,
                                stride, padding)
        return VolumeResult.success(out)
