import numpy as np
import numba


# rotate (positive = left)
@numba.jit
def rot64(a, n):
    a = np.uint64(a)
    n = np.uint64(n) % np.uint64(64)
    # (64 - 0) % 64 keeps the right shift in range for n == 0
    return np.uint64((a << n) | (a >> ((np.uint64(64) - n) % np.uint64(64))))
