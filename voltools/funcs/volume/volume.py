"""
    VOLtools: Volume

    A rank-3 dense array (depth, rows, cols) held as a flat, C-contiguous,
    row-major buffer, the designated invalid sentinel, and the VolumeResult
    returned by every arithmetic operation.

    Element (i, j, k) always lives at offset i*rows*cols + j*cols + k.

"""

import numpy as np
from typing import Optional, Sequence, Tuple
from .constants import *
from .core_functions import *
from .errors import VolumeError


class Volume:
    """
    Flat row-major buffer plus its three extents.
    No arithmetic of its own beyond addressing.
    """

    __slots__ = ('data', 'depth', 'rows', 'cols')

    def __init__(
        self,
        data: np.ndarray,
        depth: int,
        rows: int,
        cols: int,
        copy: bool = True) -> None:
        """
        Wrap a flat buffer as a (depth, rows, cols) volume.

        Args:
            data (np.ndarray)       : flat buffer of depth*rows*cols floats
            depth, rows, cols (int) : positive extents
            copy (bool)             : copy the buffer. If False and the buffer is already a
                                      C-contiguous float32/float64 1D array it is used as is.
        """
        depth, rows, cols = int(depth), int(rows), int(cols)
        if depth <= 0 or rows <= 0 or cols <= 0:
            raise ValueError(f"extents must be positive, got ({depth}, {rows}, {cols})")

        data = np.asarray(data)
        if data.dtype not in (np.float32, np.float64):
            data = data.astype(np.float32)
        data = data.reshape(-1)
        if data.size != depth * rows * cols:
            raise ValueError(
                f"buffer holds {data.size} values, ({depth}, {rows}, {cols}) needs {depth * rows * cols}")
        if copy:
            data = data.copy()
        else:
            data = np.ascontiguousarray(data)

        self.data = data
        self.depth = depth
        self.rows = rows
        self.cols = cols


    @classmethod
    def invalid(cls) -> "Volume":
        """
        The invalid sentinel: empty buffer, all extents 0.
        """
        sentinel = cls.__new__(cls)
        sentinel.data = np.empty(0, dtype=np.float32)
        sentinel.depth = 0
        sentinel.rows = 0
        sentinel.cols = 0
        return sentinel


    @classmethod
    def zeros(
        cls,
        depth: int,
        rows: int,
        cols: int,
        dtype: type = np.float32) -> "Volume":
        """Zero-filled volume"""
        return make(depth, rows, cols, zero=True, dtype=dtype)


    @classmethod
    def from_values(
        cls,
        values: Sequence[float],
        depth: int,
        rows: int,
        cols: int,
        dtype: type = np.float32) -> "Volume":
        """
        Build a volume from a flat sequence of values in row-major order.
        """
        return cls(np.asarray(values, dtype=dtype), depth, rows, cols)


    @classmethod
    def from_array(
        cls,
        array: np.ndarray) -> "Volume":
        """
        Build a volume from a (depth, rows, cols) array.
        """
        array = np.asarray(array)
        if array.ndim != 3:
            raise ValueError(f"expected a 3D (depth, rows, cols) array, got {array.ndim}D")
        depth, rows, cols = array.shape
        return cls(np.ravel(array, order='C'), depth, rows, cols)


    @property
    def shape(self) -> Tuple[int, int, int]:
        return (self.depth, self.rows, self.cols)


    @property
    def size(self) -> int:
        return self.data.size


    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype


    @property
    def is_valid(self) -> bool:
        """False only for the invalid sentinel."""
        return self.data.size > 0 and self.depth > 0 and self.rows > 0 and self.cols > 0


    def at(
        self,
        i: int,
        j: int,
        k: int) -> float:
        """
        Unchecked access. Coordinates must already be in range.
        """
        return volume_at_np_core(self.data, self.rows, self.cols, i, j, k)


    def get(
        self,
        i: int,
        j: int,
        k: int) -> float:
        """
        Range-checked access to element (i, j, k).

        Raises:
            IndexError : any coordinate outside [0, extent)
        """
        for axis, (idx, extent) in enumerate(zip((i, j, k), self.shape)):
            if not 0 <= idx < extent:
                raise IndexError(
                    f"index {idx} out of range for axis {axis} with extent {extent}")
        return self.at(i, j, k)


    def as_array(self) -> np.ndarray:
        """
        Read-only (depth, rows, cols) view of the buffer.
        """
        view = self.data.reshape(self.shape)
        view.flags.writeable = False
        return view


    def copy(self) -> "Volume":
        if not self.is_valid:
            return Volume.invalid()
        return Volume(self.data, self.depth, self.rows, self.cols, copy=True)


    def __repr__(self) -> str:
        if not self.is_valid:
            return "Volume(invalid)"
        return f"Volume(shape={self.shape}, dtype={self.data.dtype})"


def make(
    depth: int,
    rows: int,
    cols: int,
    zero: bool = True,
    dtype: type = np.float32) -> Volume:
    """
    Allocate a fresh (depth, rows, cols) volume.

    Args:
        depth, rows, cols (int) : positive extents
        zero (bool)             : zero-fill, otherwise contents are uninitialised
        dtype (type)            : np.float32 or np.float64
    Returns:
        Volume owning a new buffer
    Raises:
        ValueError              : non-positive extent
        AllocationFailure       : the buffer could not be allocated
    """
    depth, rows, cols = int(depth), int(rows), int(cols)
    if depth <= 0 or rows <= 0 or cols <= 0:
        raise ValueError(f"extents must be positive, got ({depth}, {rows}, {cols})")
    data = allocate_volume_np_core(depth, rows, cols, dtype=dtype, zero=zero)
    return Volume(data, depth, rows, cols, copy=False)


class VolumeResult:
    """
    Outcome of a volume operation: a fresh Volume, or the invalid
    sentinel together with the recoverable error that produced it.
    """

    __slots__ = ('volume', 'error')

    def __init__(
        self,
        volume: Volume,
        error: Optional[VolumeError] = None) -> None:
        self.volume = volume
        self.error = error


    @classmethod
    def success(
        cls,
        volume: Volume) -> "VolumeResult":
        return cls(volume, None)


    @classmethod
    def failure(
        cls,
        error: VolumeError) -> "VolumeResult":
        return cls(Volume.invalid(), error)


    @property
    def ok(self) -> bool:
        return self.error is None


    def unwrap(self) -> Volume:
        """
        Return the volume, or raise the stored error.
        """
        if self.error is not None:
            raise self.error
        return self.volume


    def __bool__(self) -> bool:
        return self.ok


    def __repr__(self) -> str:
        if self.ok:
            return f"VolumeResult(ok, {self.volume!r})"
        return f"VolumeResult({type(self.error).__name__}: {self.error})"
