"""Sponge construction over Keccak-f[1600] with pad10*1 padding."""

import enum
import logging
from typing import Optional

import numpy as np
import numba

from .errors import InvalidParameterError
from .permutation import keccak_f
from .state import new_state, state_to_bytes

logger = logging.getLogger(__name__)

WIDTH = 1600


class Phase(enum.Enum):
    EMPTY = "empty"
    ABSORBING = "absorbing"
    SQUEEZING = "squeezing"
    DONE = "done"


def check_rate(rate: int) -> None:
    if rate % 8 != 0:
        raise InvalidParameterError("rate", f"{rate} is not a multiple of 8")
    if not 0 < rate <= WIDTH:
        raise InvalidParameterError("rate", f"{rate} is outside (0, {WIDTH}]")


def check_output_length(output_length: Optional[int]) -> None:
    if output_length is None:
        return
    if isinstance(output_length, bool) or not isinstance(output_length, int):
        raise InvalidParameterError(
            "output length", f"expected an integer byte count, got {output_length!r}"
        )
    if output_length <= 0:
        raise InvalidParameterError(
            "output length", f"fixed output length must be positive, got {output_length}"
        )


def pad_byte(suffix: str) -> int:
    """Fold the domain suffix and the first pad bit into one byte.

    Bits are appended least significant first, so SHA3's ``"01"`` gives 0x06,
    SHAKE's ``"1111"`` gives 0x1F and plain Keccak (``""``) gives 0x01.
    """
    if any(bit not in "01" for bit in suffix):
        raise InvalidParameterError("domain suffix", f"{suffix!r} is not a bit string")
    if len(suffix) > 6:
        raise InvalidParameterError("domain suffix", f"{suffix!r} is longer than 6 bits")
    value = 0
    for i, bit in enumerate(suffix):
        value |= int(bit) << i
    return value | (1 << len(suffix))


def check_pad(pad: int) -> None:
    # bit 7 is reserved for the final pad10*1 bit
    if isinstance(pad, bool) or not isinstance(pad, int) or not 0 < pad < 0x80:
        raise InvalidParameterError("pad byte", f"{pad!r} is not in 0x01..0x7f")


@numba.jit
def pad101(rate, used, first):
    # always at least one byte; a full block when used is a multiple of rate
    j = rate - used % rate
    P = np.zeros(j, dtype=np.uint8)
    P[0] = first
    P[j - 1] = P[j - 1] | 0x80
    return P


@numba.jit
def absorb_blocks(A, P, rate):
    for start in range(0, P.size, rate):
        for j in range(rate):
            k = j // 8
            A[k % 5, k // 5] = A[k % 5, k // 5] ^ (
                np.uint64(P[start + j]) << np.uint64(8 * (j % 8))
            )
        A = keccak_f(A)
    return A


class Sponge:
    """One absorb-then-squeeze computation.

    ``rate`` is in bits. ``pad`` is the first padding byte with the domain
    suffix already folded in (see :func:`pad_byte`). With ``output_length``
    set the sponge ends in ``Phase.DONE`` after that many bytes; without it
    squeezing can continue indefinitely (XOF).
    """

    def __init__(
        self, rate: int, pad: int = 0x06, output_length: Optional[int] = None
    ) -> None:
        check_rate(rate)
        check_pad(pad)
        check_output_length(output_length)
        self.rate = rate
        self.rate_bytes = rate // 8
        self.output_length = output_length
        self.phase = Phase.EMPTY
        self.state = new_state()
        self._first = pad
        self._buffer = b""
        self._offset = 0
        self._emitted = 0
        self._absorbed_blocks = 0
        self._squeezed_blocks = 0

    def absorb(self, data) -> "Sponge":
        if self.phase not in (Phase.EMPTY, Phase.ABSORBING):
            raise InvalidParameterError(
                "sponge phase", f"cannot absorb while {self.phase.value}"
            )
        buf = self._buffer + memoryview(data).tobytes()
        self.phase = Phase.ABSORBING
        n = len(buf) - len(buf) % self.rate_bytes
        if n:
            self.state = absorb_blocks(
                self.state, np.frombuffer(buf[:n], dtype=np.uint8), self.rate_bytes
            )
            self._absorbed_blocks += n // self.rate_bytes
        self._buffer = buf[n:]
        return self

    def _finish_absorbing(self) -> None:
        tail = np.frombuffer(self._buffer, dtype=np.uint8)
        P = np.concatenate(
            (tail, pad101(self.rate_bytes, len(self._buffer), self._first))
        )
        self.state = absorb_blocks(self.state, P, self.rate_bytes)
        self._absorbed_blocks += P.size // self.rate_bytes
        self._buffer = b""
        self.phase = Phase.SQUEEZING
        self._squeezed_blocks = 1
        logger.debug(
            "absorbed %d block(s) of %d bytes", self._absorbed_blocks, self.rate_bytes
        )

    def squeeze(self, n: int) -> bytes:
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise InvalidParameterError("output length", f"cannot squeeze {n!r} bytes")
        if self.phase is Phase.DONE:
            raise InvalidParameterError(
                "sponge phase", f"all {self.output_length} output bytes already emitted"
            )
        if self.output_length is not None and self._emitted + n > self.output_length:
            raise InvalidParameterError(
                "output length",
                f"{n} bytes requested, {self.output_length - self._emitted} remaining",
            )
        if self.phase is not Phase.SQUEEZING:
            self._finish_absorbing()

        out = bytearray()
        while len(out) < n:
            if self._offset == self.rate_bytes:
                self.state = keccak_f(self.state)
                self._offset = 0
                self._squeezed_blocks += 1
            take = min(self.rate_bytes - self._offset, n - len(out))
            out += state_to_bytes(self.state)[self._offset : self._offset + take]
            self._offset += take
        self._emitted += n

        if self.output_length is not None and self._emitted == self.output_length:
            self.phase = Phase.DONE
            logger.debug(
                "squeezed %d byte(s) from %d block(s)", self._emitted, self._squeezed_blocks
            )
        return bytes(out)
