"""
Error taxonomy for volume operations.

Recoverable conditions (bad shapes, bad geometry, invalid operands) are
returned inside a VolumeResult. AllocationFailure is the only one that is
raised by the operations themselves.
"""


class VolumeError(Exception):
    """Base class for every volume condition."""


class ShapeMismatch(VolumeError, ValueError):
    """Operand extents are incompatible with the requested operation."""


class InvalidOperand(VolumeError, ValueError):
    """An operand is the invalid sentinel volume."""


class DegenerateGeometry(VolumeError, ValueError):
    """Stride, padding or extents give an empty or negative output."""


class AllocationFailure(VolumeError, MemoryError):
    """The output buffer could not be allocated."""
