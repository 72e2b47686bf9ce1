"""Keccak-f[1600]: the five step mappings and the 24-round permutation."""

import numpy as np
import numba

from .lanes import rot64

L = 6  # log2(w) for w = 64
NR = 12 + 2 * L


def rc(t: int) -> int:
    # FIPS 202 Algorithm 5, LFSR x^8 + x^6 + x^5 + x^4 + 1
    if t % 255 == 0:
        return 1
    r = [1] + [0] * 7
    for _ in range(1, t % 255 + 1):
        r = [0] + r
        r[0] ^= r[8]
        r[4] ^= r[8]
        r[5] ^= r[8]
        r[6] ^= r[8]
        r = r[:8]
    return r[0]


def _round_constants():
    table = np.zeros(NR, dtype=np.uint64)
    for i in range(NR):
        value = 0
        for j in range(L + 1):
            value |= rc(j + 7 * i) << (2 ** j - 1)
        table[i] = value
    table.flags.writeable = False
    return table


def _rotation_offsets():
    table = np.zeros((5, 5), dtype=np.uint64)
    x, y = 1, 0
    for t in range(24):
        table[x, y] = ((t + 1) * (t + 2) // 2) % 64
        x, y = y, (2 * x + 3 * y) % 5
    table.flags.writeable = False
    return table


ROUND_CONSTANTS = _round_constants()
ROTATION_OFFSETS = _rotation_offsets()


@numba.jit
def theta(A):
    C = np.zeros(5, dtype=np.uint64)
    for x in range(5):
        C[x] = A[x, 0] ^ A[x, 1] ^ A[x, 2] ^ A[x, 3] ^ A[x, 4]
    for x in range(5):
        D = C[(x + 4) % 5] ^ rot64(C[(x + 1) % 5], 1)
        for y in range(5):
            A[x, y] = A[x, y] ^ D
    return A


@numba.jit
def rho(A):
    ret = np.zeros((5, 5), dtype=np.uint64)
    for x in range(5):
        for y in range(5):
            ret[x, y] = rot64(A[x, y], ROTATION_OFFSETS[x, y])
    return ret


@numba.jit
def pi(A):
    ret = np.zeros((5, 5), dtype=np.uint64)
    for x in range(5):
        for y in range(5):
            ret[x, y] = A[(x + 3 * y) % 5, x]
    return ret


@numba.jit
def chi(A):
    # every output lane reads the untouched input
    ret = np.zeros((5, 5), dtype=np.uint64)
    for x in range(5):
        for y in range(5):
            ret[x, y] = A[x, y] ^ ((~A[(x + 1) % 5, y]) & A[(x + 2) % 5, y])
    return ret


@numba.jit
def iota(A, i):
    A[0, 0] = A[0, 0] ^ ROUND_CONSTANTS[i]
    return A


@numba.jit
def keccak_round(A, i):
    return iota(chi(pi(rho(theta(A)))), i)


@numba.jit
def keccak_f(A):
    """Apply all 24 rounds to a copy of ``A`` and return it."""
    A = A.copy()
    for i in range(NR):
        A = keccak_round(A, i)
    return A


permute = keccak_f
