from numba import types

##############################################################################
# Type signatures for Numba functions
##############################################################################

# extents are always (depth, rows, cols)
extents_t = types.UniTuple(types.int64, 3)

# Elementwise addition: out = a + b
sig_add_32 = types.void(
    types.float32[::1],     # volume_a: (depth*rows*cols,)
    types.float32[::1],     # volume_b: (depth*rows*cols,)
    types.float32[::1],     # out: (depth*rows*cols,)
    extents_t               # extents: (depth, rows, cols)
    )
sig_add_64 = types.void(
    types.float64[::1],
    types.float64[::1],
    types.float64[::1],
    extents_t
    )

# Negation: out = -a
sig_negate_32 = types.void(
    types.float32[::1],     # volume: (depth*rows*cols,)
    types.float32[::1],     # out: (depth*rows*cols,)
    extents_t
    )
sig_negate_64 = types.void(
    types.float64[::1],
    types.float64[::1],
    extents_t
    )

# Scalar multiply: out = s * a
sig_scale_32 = types.void(
    types.float32[::1],     # volume: (depth*rows*cols,)
    types.float32,          # scalar
    types.float32[::1],     # out: (depth*rows*cols,)
    extents_t
    )
sig_scale_64 = types.void(
    types.float64[::1],
    types.float64,
    types.float64[::1],
    extents_t
    )

# Per-channel matrix product: out[i] = a[i] @ b[i]
sig_multiply_32 = types.void(
    types.float32[::1],     # volume_a: (depth*a_rows*a_cols,)
    types.float32[::1],     # volume_b: (depth*a_cols*b_cols,)
    types.float32[::1],     # out: (depth*a_rows*b_cols,)
    extents_t,              # extents of a: (depth, a_rows, a_cols)
    extents_t               # extents of b: (depth, a_cols, b_cols)
    )
sig_multiply_64 = types.void(
    types.float64[::1],
    types.float64[::1],
    types.float64[::1],
    extents_t,
    extents_t
    )
