"""
VOLtools I/O Module

Text adapters around the volume kernels: reading flat lists of floats and
rendering volumes for inspection.
"""

from .read_values import parse_values, read_values_from_file, load_volume
from .format_volume import format_shape, format_volume, print_shape, print_volume

__all__ = [
    'parse_values',
    'read_values_from_file',
    'load_volume',
    'format_shape',
    'format_volume',
    'print_shape',
    'print_volume'
]
