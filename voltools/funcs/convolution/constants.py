from numba import types

##############################################################################
# Global constants
##############################################################################

DEFAULT_STRIDE = 1
DEFAULT_PADDING = 0


##############################################################################
# Type signatures for Numba functions
##############################################################################

# extents are always (depth, rows, cols)
extents_t = types.UniTuple(types.int64, 3)

# First input coordinate covered by output coordinate o
sig_window_start = types.int64(
    types.int64,            # output coordinate
    types.int64,            # stride
    types.int64             # padding
    )

# Strided, zero-padded cross-correlation
sig_conv_32 = types.void(
    types.float32[::1],     # input: (in_d*in_r*in_c,)
    types.float32[::1],     # kernel: (k_d*k_r*k_c,)
    types.float32[::1],     # out: (o_d*o_r*o_c,)
    extents_t,              # input extents
    extents_t,              # kernel extents
    extents_t,              # output extents
    types.int64,            # stride
    types.int64             # padding
    )
sig_conv_64 = types.void(
    types.float64[::1],
    types.float64[::1],
    types.float64[::1],
    extents_t,
    extents_t,
    extents_t,
    types.int64,
    types.int64
    )
