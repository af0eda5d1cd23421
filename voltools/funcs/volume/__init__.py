"""
VOLtools Volume Module

Provides the rank-3 Volume type (depth x rows x cols, flat row-major buffer),
its addressing and allocation helpers, the invalid sentinel, the VolumeResult
returned by every operation and the error taxonomy.
"""

# Import main classes
from .volume import Volume, VolumeResult, make
from .utils import resolve_precision, ensure_precision, check_operand, report_failure
from .errors import (
    VolumeError,
    ShapeMismatch,
    InvalidOperand,
    DegenerateGeometry,
    AllocationFailure
)

# Import core functions for advanced users
from .core_functions import (
    flat_index_nb_core,
    flat_index_np_core,
    volume_at_np_core,
    allocate_volume_np_core
)

# Version info
__version__ = "1.0.0"

# Define public API
__all__ = [
    'Volume',
    'VolumeResult',
    'make',
    'resolve_precision',
    'ensure_precision',
    'check_operand',
    'report_failure',
    'VolumeError',
    'ShapeMismatch',
    'InvalidOperand',
    'DegenerateGeometry',
    'AllocationFailure',
    # Core functions for advanced use
    'flat_index_nb_core',
    'flat_index_np_core',
    'volume_at_np_core',
    'allocate_volume_np_core'
]
