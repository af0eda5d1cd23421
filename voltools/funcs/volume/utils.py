import numpy as np
from typing import Optional
from .constants import *
from .errors import InvalidOperand, VolumeError
from .volume import Volume, VolumeResult


def resolve_precision(precision: str) -> type:
    """Map a precision string onto its numpy dtype."""
    if precision not in PRECISION_DTYPES:
        raise ValueError("precision must be 'float32' or 'float64'")
    return PRECISION_DTYPES[precision]


def ensure_precision(volume, dtype, volume_name="volume", debug=False):
    """Flat buffer of a volume in the working dtype, converted only if needed."""
    if volume.data.dtype != dtype:
        if debug:
            print(f"Converting {volume.data.dtype} {volume_name} to {np.dtype(dtype).name}")
        return np.ascontiguousarray(volume.data, dtype=dtype)
    return volume.data


def check_operand(
    volume: Volume,
    volume_name: str = "volume") -> Optional[InvalidOperand]:
    """InvalidOperand if the volume is the invalid sentinel (or not a Volume at all)."""
    if not isinstance(volume, Volume):
        return InvalidOperand(f"{volume_name} must be a Volume, got {type(volume).__name__}")
    if not volume.is_valid:
        return InvalidOperand(f"{volume_name} is the invalid volume")
    return None


def report_failure(
    error: VolumeError,
    debug: bool = False) -> VolumeResult:
    """Wrap a recoverable error into a failed result, echoing it when debugging."""
    if debug:
        print(f"Warning: {type(error).__name__}: {error}")
    return VolumeResult.failure(error)
