"""
VOLtools Arithmetic Module

Provides elementwise addition, negation, scalar scaling and the per-channel
matrix product of rank-3 volumes.
"""

# Import main classes
from .operations import ArithmeticOperations

# Import core functions for advanced users
from .core_functions import (
    volume_add_nb_core,
    volume_negate_nb_core,
    volume_scale_nb_core,
    volume_multiply_nb_core,
    volume_add_np_core,
    volume_negate_np_core,
    volume_scale_np_core,
    volume_multiply_np_core
)

# Version info
__version__ = "1.0.0"

# Define public API
__all__ = [
    'ArithmeticOperations',
    # Core functions for advanced use
    'volume_add_nb_core',
    'volume_negate_nb_core',
    'volume_scale_nb_core',
    'volume_multiply_nb_core',
    'volume_add_np_core',
    'volume_negate_np_core',
    'volume_scale_np_core',
    'volume_multiply_np_core'
]
