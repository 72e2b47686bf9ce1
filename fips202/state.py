"""Mapping between the 200-byte string and the 5x5 lane matrix (FIPS 202 3.5).

Lane A[x, y] holds bytes 8*(5*y + x) .. 8*(5*y + x) + 7, least significant
byte first.
"""

import numpy as np
import numba

from .errors import InvalidParameterError

STATE_BYTES = 200
LANE_BYTES = 8


def new_state():
    return np.zeros((5, 5), dtype=np.uint64)


@numba.jit
def _bytes_to_state(buf):
    A = np.zeros((5, 5), dtype=np.uint64)
    for x in range(5):
        for y in range(5):
            base = 8 * (5 * y + x)
            lane = np.uint64(0)
            for i in range(8):
                lane |= np.uint64(buf[base + i]) << np.uint64(8 * i)
            A[x, y] = lane
    return A


@numba.jit
def _state_to_bytes(A):
    S = np.zeros(200, dtype=np.uint8)
    for x in range(5):
        for y in range(5):
            base = 8 * (5 * y + x)
            lane = A[x, y]
            for i in range(8):
                S[base + i] = (lane >> np.uint64(8 * i)) & np.uint64(0xFF)
    return S


def bytes_to_state(buf) -> np.ndarray:
    if len(buf) != STATE_BYTES:
        raise InvalidParameterError(
            "state buffer", f"expected {STATE_BYTES} bytes, got {len(buf)}"
        )
    return _bytes_to_state(np.frombuffer(bytes(buf), dtype=np.uint8))


def state_to_bytes(A: np.ndarray) -> bytes:
    if A.shape != (5, 5):
        raise InvalidParameterError("state", f"expected a 5x5 lane matrix, got {A.shape}")
    return _state_to_bytes(A.astype(np.uint64, copy=False)).tobytes()
