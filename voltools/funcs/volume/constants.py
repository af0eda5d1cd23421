from numba import types
import numpy as np

##############################################################################
# Global constants
##############################################################################

DEFAULT_PRECISION = 'float32'
PRECISION_DTYPES = {
    'float32' : np.float32,
    'float64' : np.float64,
}


##############################################################################
# Type signatures for Numba functions
##############################################################################

# Row-major flat offset of (i, j, k) in a (depth, rows, cols) buffer
sig_flat_index = types.int64(
    types.int64, types.int64, types.int64,  # i, j, k
    types.int64, types.int64                # rows, cols
    )
