"""Fixed-geometry limb encoding for circom big integers."""

from __future__ import annotations

from typing import Iterable, List


class LimbRangeError(ValueError):
    """Raised when a value does not fit the configured limb geometry."""


def int_to_limbs(value: int, limb_bits: int, limb_count: int) -> List[int]:
    if limb_bits <= 0 or limb_count <= 0:
        raise ValueError("limb_bits and limb_count must be positive")
    if value < 0:
        raise LimbRangeError("Cannot encode a negative value into limbs")
    if value.bit_length() > limb_bits * limb_count:
        raise LimbRangeError(
            f"Value of {value.bit_length()} bits exceeds {limb_count} limbs of {limb_bits} bits"
        )
    mask = (1 << limb_bits) - 1
    return [(value >> (i * limb_bits)) & mask for i in range(limb_count)]


def to_circom_bigint(value: int, limb_bits: int, limb_count: int) -> List[str]:
    return [str(limb) for limb in int_to_limbs(value, limb_bits, limb_count)]


def limbs_to_int(limbs: Iterable[int | str], limb_bits: int) -> int:
    value = 0
    for i, limb in enumerate(limbs):
        value += int(limb) << (i * limb_bits)
    return value


def hash_to_field(digest: bytes, field_modulus: int) -> int:
    """Fold a big-endian digest into a single field element.

    This is a lossy reduction: a 256-bit digest is larger than the BN254
    scalar field, so distinct digests may share a field element.
    """
    if field_modulus <= 1:
        raise ValueError("field_modulus must be greater than 1")
    return int.from_bytes(digest, "big") % field_modulus
