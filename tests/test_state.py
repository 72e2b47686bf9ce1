import os

import numpy as np
import pytest

from fips202.errors import InvalidParameterError
from fips202.state import bytes_to_state, new_state, state_to_bytes


def _lanes_of_letters():
    # lane k filled with the byte 0x41 + k
    return b"".join(bytes([0x41 + k]) * 8 for k in range(25))


def test_new_state_is_zero():
    A = new_state()
    assert A.shape == (5, 5)
    assert A.dtype == np.uint64
    assert not A.any()


def test_lane_placement():
    A = bytes_to_state(_lanes_of_letters())
    assert A[0, 0] == np.uint64(0x4141414141414141)
    assert A[1, 0] == np.uint64(0x4242424242424242)
    assert A[0, 1] == np.uint64(0x4646464646464646)
    assert A[4, 1] == np.uint64(0x4A4A4A4A4A4A4A4A)
    assert A[4, 4] == np.uint64(0x5959595959595959)


def test_lanes_are_little_endian():
    buf = bytes(range(8)) + bytes(192)
    A = bytes_to_state(buf)
    assert A[0, 0] == np.uint64(0x0706050403020100)
    assert not A.ravel()[1:].any()


@pytest.mark.parametrize(
    "buf",
    [bytes(200), b"\xff" * 200, bytes(range(200)), os.urandom(200)],
)
def test_round_trip(buf):
    assert state_to_bytes(bytes_to_state(buf)) == buf


def test_round_trip_from_state():
    A = bytes_to_state(os.urandom(200))
    assert np.array_equal(bytes_to_state(state_to_bytes(A)), A)


@pytest.mark.parametrize("size", [0, 199, 201, 136])
def test_wrong_buffer_length(size):
    with pytest.raises(InvalidParameterError):
        bytes_to_state(bytes(size))


def test_wrong_state_shape():
    with pytest.raises(InvalidParameterError):
        state_to_bytes(np.zeros(25, dtype=np.uint64))
