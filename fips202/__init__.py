"""Keccak-f[1600] permutation and the FIPS 202 SHA-3 / SHAKE functions."""

from .errors import Fips202Error, InvalidParameterError
from .lanes import rot64
from .permutation import ROTATION_OFFSETS, ROUND_CONSTANTS, keccak_f, permute
from .sponge import Phase, Sponge
from .state import bytes_to_state, new_state, state_to_bytes
from .variants import (
    KECCAK_256,
    SHA3_224,
    SHA3_256,
    SHA3_384,
    SHA3_512,
    SHAKE128,
    SHAKE256,
    VARIANTS,
    HashVariant,
    digest,
    keccak256,
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
    shake128,
    shake256,
)

__all__ = [
    "Fips202Error",
    "InvalidParameterError",
    "rot64",
    "ROTATION_OFFSETS",
    "ROUND_CONSTANTS",
    "keccak_f",
    "permute",
    "Phase",
    "Sponge",
    "bytes_to_state",
    "new_state",
    "state_to_bytes",
    "HashVariant",
    "VARIANTS",
    "SHA3_224",
    "SHA3_256",
    "SHA3_384",
    "SHA3_512",
    "SHAKE128",
    "SHAKE256",
    "KECCAK_256",
    "digest",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
    "shake128",
    "shake256",
    "keccak256",
]
