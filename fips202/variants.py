"""Standard parameter sets over the sponge: SHA3-n, SHAKE and legacy Keccak."""

from dataclasses import dataclass, field
from typing import Optional

from .errors import InvalidParameterError
from .sponge import WIDTH, Sponge, check_output_length, check_rate, pad_byte


@dataclass(frozen=True)
class HashVariant:
    name: str
    rate: int
    suffix: str
    output_length: Optional[int] = None  # bytes; None for an XOF
    padding_byte: int = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        check_rate(self.rate)
        check_output_length(self.output_length)
        object.__setattr__(self, "padding_byte", pad_byte(self.suffix))

    @property
    def capacity(self) -> int:
        return WIDTH - self.rate

    @property
    def rate_bytes(self) -> int:
        return self.rate // 8

    @property
    def is_xof(self) -> bool:
        return self.output_length is None

    def sponge(self) -> Sponge:
        return Sponge(self.rate, self.padding_byte, self.output_length)


SHA3_224 = HashVariant("sha3_224", 1152, "01", 28)
SHA3_256 = HashVariant("sha3_256", 1088, "01", 32)
SHA3_384 = HashVariant("sha3_384", 832, "01", 48)
SHA3_512 = HashVariant("sha3_512", 576, "01", 64)
SHAKE128 = HashVariant("shake_128", 1344, "1111")
SHAKE256 = HashVariant("shake_256", 1088, "1111")
# pre-standard Keccak padding, as used by Ethereum
KECCAK_256 = HashVariant("keccak_256", 1088, "", 32)

VARIANTS = {
    v.name: v
    for v in (SHA3_224, SHA3_256, SHA3_384, SHA3_512, SHAKE128, SHAKE256, KECCAK_256)
}


def digest(variant: HashVariant, data: bytes, length: Optional[int] = None) -> bytes:
    if variant.is_xof:
        if length is None:
            raise InvalidParameterError(
                "output length", f"{variant.name} needs an explicit output length"
            )
    elif length is None:
        length = variant.output_length
    elif length != variant.output_length:
        raise InvalidParameterError(
            "output length",
            f"{variant.name} produces {variant.output_length} bytes, not {length}",
        )
    return variant.sponge().absorb(data).squeeze(length)


def sha3_224(data: bytes) -> bytes:
    return digest(SHA3_224, data)


def sha3_256(data: bytes) -> bytes:
    return digest(SHA3_256, data)


def sha3_384(data: bytes) -> bytes:
    return digest(SHA3_384, data)


def sha3_512(data: bytes) -> bytes:
    return digest(SHA3_512, data)


def shake128(data: bytes, n: int) -> bytes:
    return digest(SHAKE128, data, n)


def shake256(data: bytes, n: int) -> bytes:
    return digest(SHAKE256, data, n)


def keccak256(data: bytes) -> bytes:
    return digest(KECCAK_256, data)
