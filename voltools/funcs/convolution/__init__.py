"""
VOLtools Convolution Module

Provides the strided, zero-padded cross-correlation of rank-3 volumes with a
kernel volume, and its output-extent inference.
"""

# Import main classes
from .operations import ConvolutionOperations

# Import core functions for advanced users
from .core_functions import (
    conv_window_start_nb_core,
    volume_conv_nb_core,
    conv_output_shape_np_core,
    volume_conv_np_core
)

# Version info
__version__ = "1.0.0"

# Define public API
__all__ = [
    'ConvolutionOperations',
    # Core functions for advanced use
    'conv_window_start_nb_core',
    'volume_conv_nb_core',
    'conv_output_shape_np_core',
    'volume_conv_np_core'
]
