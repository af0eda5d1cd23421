"""
    VOLtools: Arithmetic Operations

    Elementwise addition, negation, scalar scaling and the per-channel
    matrix product of rank-3 volumes, using Numba kernels with NumPy fallbacks.

    Every operation allocates a fresh output volume and returns a VolumeResult.
    Recoverable conditions (shape mismatch, invalid operand) come back inside
    the result; only an allocation failure is raised.

"""

from ..volume import (
    Volume,
    VolumeResult,
    ShapeMismatch,
    make,
    resolve_precision,
    ensure_precision,
    check_operand,
    report_failure
)
from ..volume.constants import DEFAULT_PRECISION
from .core_functions import *


class ArithmeticOperations():
    """
    Arithmetic on volumes using Numba kernels.
    No data objects. Only methods.
    """

    def __init__(
        self,
        use_numba: bool = True,
        precision: str = DEFAULT_PRECISION,
        debug: bool = False) -> None:
        """
        Initialize the ArithmeticOperations class.

        Args:
            use_numba (bool, optional): use Numba core functions. Defaults to True.
            precision (str, optional): working precision, 'float32' or 'float64'. Defaults to 'float32'.
            debug (bool, optional): print conversions and recoverable conditions. Defaults to False.
        """
        self.use_numba = use_numba
        self.precision = precision
        self.float_dtype = resolve_precision(precision)
        self.debug = debug


    def add(
        self,
        volume_a: Volume,
        volume_b: Volume) -> VolumeResult:
        """
        Elementwise sum of two volumes with identical extents.

        Args:
            volume_a (Volume): first operand
            volume_b (Volume): second operand
        Returns:
            VolumeResult: the sum, or the invalid volume with a ShapeMismatch
                          (no allocation happens in that case)
        """
        for name, vol in (("volume_a", volume_a), ("volume_b", volume_b)):
            error = check_operand(vol, name)
            if error is not None:
                return report_failure(error, self.debug)
        if volume_a.shape != volume_b.shape:
            return report_failure(
                ShapeMismatch(
                    f"cannot add volumes with different dimensions {volume_a.shape} and {volume_b.shape}"),
                self.debug)

        a = ensure_precision(volume_a, self.float_dtype, "volume_a", self.debug)
        b = ensure_precision(volume_b, self.float_dtype, "volume_b", self.debug)
        out = make(*volume_a.shape, zero=False, dtype=self.float_dtype)
        if self.use_numba:
            volume_add_nb_core(a, b, out.data, volume_a.shape)
        else:
            volume_add_np_core(a, b, out.data)
        return VolumeResult.success(out)


    def negate(
        self,
        volume: Volume) -> VolumeResult:
        """Additive inverse of every element"""
        error = check_operand(volume)
        if error is not None:
            return report_failure(error, self.debug)

        v = ensure_precision(volume, self.float_dtype, "volume", self.debug)
        out = make(*volume.shape, zero=False, dtype=self.float_dtype)
        if self.use_numba:
            volume_negate_nb_core(v, out.data, volume.shape)
        else:
            volume_negate_np_core(v, out.data)
        return VolumeResult.success(out)


    def scale(
        self,
        volume: Volume,
        scalar: float) -> VolumeResult:
        """
        Multiply every element by a scalar. NaN and Inf propagate as IEEE-754 says.
        """
        error = check_operand(volume)
        if error is not None:
            return report_failure(error, self.debug)

        v = ensure_precision(volume, self.float_dtype, "volume", self.debug)
        s = self.float_dtype(scalar)
        out = make(*volume.shape, zero=False, dtype=self.float_dtype)
        if self.use_numba:
            volume_scale_nb_core(v, s, out.data, volume.shape)
        else:
            volume_scale_np_core(v, s, out.data)
        return VolumeResult.success(out)


    def multiply(
        self,
        volume_a: Volume,
        volume_b: Volume) -> VolumeResult:
        """
        Per-channel matrix product, out[i,j,k] = sum_m a[i,j,m] * b[i,m,k].

        Each channel of a (D, N, M) volume is multiplied with the matching
        channel of a (D, M, K) volume, giving a (D, N, K) volume.

        Args:
            volume_a (Volume): left operand, (D, N, M)
            volume_b (Volume): right operand, (D, M, K)
        Returns:
            VolumeResult: the (D, N, K) product, or the invalid volume with a
                          ShapeMismatch when depths or inner extents differ
        """
        for name, vol in (("volume_a", volume_a), ("volume_b", volume_b)):
            error = check_operand(vol, name)
            if error is not None:
                return report_failure(error, self.debug)
        if volume_a.depth != volume_b.depth:
            return report_failure(
                ShapeMismatch(
                    f"channel counts differ: {volume_a.depth} and {volume_b.depth}"),
                self.debug)
        if volume_a.cols != volume_b.rows:
            return report_failure(
                ShapeMismatch(
                    f"inner extents differ: {volume_a.shape} cols={volume_a.cols}, "
                    f"{volume_b.shape} rows={volume_b.rows}"),
                self.debug)

        a = ensure_precision(volume_a, self.float_dtype, "volume_a", self.debug)
        b = ensure_precision(volume_b, self.float_dtype, "volume_b", self.debug)
        out = make(volume_a.depth, volume_a.rows, volume_b.cols,
                   zero=True, dtype=self.float_dtype)
        if self.use_numba:
            volume_multiply_nb_core(a, b, out.data, volume_a.shape, volume_b.shape)
        else:
            volume_multiply_np_core(a, b, out.data, volume_a.shape, volume_b.shape)
        return VolumeResult.success(out)
