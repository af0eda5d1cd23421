"""
VOLtools Engine Module

One object carrying every volume operation, and module level shortcuts bound
to a default float32 engine.
"""

from .operations import (
    VolumeEngine,
    add,
    negate,
    scale,
    multiply,
    convolve
)

__all__ = [
    'VolumeEngine',
    'add',
    'negate',
    'scale',
    'multiply',
    'convolve'
]
