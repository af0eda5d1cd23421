"""
VOLtools

Dense arithmetic on rank-3 volumes (channels x rows x columns): elementwise
addition, negation, scalar scaling, the per-channel matrix product and a
strided, zero-padded cross-correlation, JIT compiled with Numba.
"""

from .funcs.volume import (
    Volume,
    VolumeResult,
    make,
    VolumeError,
    ShapeMismatch,
    InvalidOperand,
    DegenerateGeometry,
    AllocationFailure
)
from .funcs.arithmetic import ArithmeticOperations
from .funcs.convolution import ConvolutionOperations
from .funcs.engine import (
    VolumeEngine,
    add,
    negate,
    scale,
    multiply,
    convolve
)

# Version info
__version__ = "0.1.0"

# Define public API
__all__ = [
    'Volume',
    'VolumeResult',
    'make',
    'VolumeError',
    'ShapeMismatch',
    'InvalidOperand',
    'DegenerateGeometry',
    'AllocationFailure',
    'ArithmeticOperations',
    'ConvolutionOperations',
    'VolumeEngine',
    'add',
    'negate',
    'scale',
    'multiply',
    'convolve'
]
