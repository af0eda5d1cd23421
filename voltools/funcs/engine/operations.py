"""
Title:          Volume Engine
Description:    All volume operations behind one object, plus module level
                add / negate / scale / multiply / convolve on a default engine

"""

## ###############################################################
## IMPORTS
## ###############################################################

from ..volume import Volume, VolumeResult
from ..volume.constants import DEFAULT_PRECISION
from ..arithmetic.operations import ArithmeticOperations
from ..convolution.operations import ConvolutionOperations
from ..convolution.constants import DEFAULT_STRIDE, DEFAULT_PADDING

# Keep consistent throughout library:
# volumes : D,R,C   (channel, row, column), flat row-major buffer

## ###############################################################
## Volume Engine
## ###############################################################

class VolumeEngine(ArithmeticOperations,
                   ConvolutionOperations):
    """
    Class exposing every operation on volumes: add, negate, scale, multiply, convolve.
    """

    def __init__(
        self,
        use_numba   : bool  = True,
        precision   : str   = DEFAULT_PRECISION,
        debug       : bool  = False):
        """
        Initialize the volume engine

        Args:
            use_numba (bool)    : use the Numba kernels, otherwise the NumPy / SciPy cores. Default is True.
            precision (str)     : 'float32' or 'float64'. Operands of another dtype are converted.
                                    Default is 'float32'.
            debug (bool)        : print configuration, conversions and recoverable conditions. Default is False.

        """
        ArithmeticOperations.__init__(
            self,
            use_numba=use_numba,
            precision=precision,
            debug=debug)
        ConvolutionOperations.__init__(
            self,
            use_numba=use_numba,
            precision=precision,
            debug=debug)

        if self.debug:
            print(f"VolumeEngine: use_numba={use_numba}, precision={precision}, debug={debug}")


_default_engine = VolumeEngine()


def add(
    volume_a : Volume,
    volume_b : Volume) -> VolumeResult:
    return _default_engine.add(volume_a, volume_b)


def negate(
    volume : Volume) -> VolumeResult:
    return _default_engine.negate(volume)


def scale(
    volume : Volume,
    scalar : float) -> VolumeResult:
    return _default_engine.scale(volume, scalar)


def multiply(
    volume_a : Volume,
    volume_b : Volume) -> VolumeResult:
    return _default_engine.multiply(volume_a, volume_b)


def convolve(
    input_volume : Volume,
    kernel : Volume,
    stride : int = DEFAULT_STRIDE,
    padding : int = DEFAULT_PADDING) -> VolumeResult:
    return _default_engine.convolve(input_volume, kernel, stride, padding)
