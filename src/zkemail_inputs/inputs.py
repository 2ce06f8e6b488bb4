"""Assemble circuit input bundles for the RSA, SHA and email circuits."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Dict, List, Tuple, Union

from .config import CircuitConfig
from .limbs import hash_to_field, to_circom_bigint
from .packing import pack_bytes_into_n_bytes
from .sha_padding import sha256_pad

HashFunction = Callable[[bytes], bytes]


class InvalidVariantError(ValueError):
    """Raised for a circuit variant outside rsa/sha/email."""


class CircuitVariant(str, Enum):
    RSA = "rsa"
    SHA = "sha"
    EMAIL = "email"


def parse_variant(value: "CircuitVariant | str") -> CircuitVariant:
    if isinstance(value, CircuitVariant):
        return value
    try:
        return CircuitVariant(str(value).lower())
    except ValueError as exc:
        valid = ", ".join(v.value for v in CircuitVariant)
        raise InvalidVariantError(f"Unknown circuit variant {value!r}; expected one of {valid}") from exc


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


@dataclass(frozen=True, slots=True)
class RsaInputs:
    modulus: Tuple[str, ...]
    signature: Tuple[str, ...]
    base_message: Tuple[str, ...]
    variant: ClassVar[CircuitVariant] = CircuitVariant.RSA

    def to_dict(self) -> Dict[str, List[str] | str]:
        return {
            "modulus": list(self.modulus),
            "signature": list(self.signature),
            "base_message": list(self.base_message),
        }


@dataclass(frozen=True, slots=True)
class ShaInputs:
    in_padded_n_bytes: Tuple[str, ...]
    in_len_padded_bytes: str
    variant: ClassVar[CircuitVariant] = CircuitVariant.SHA

    def to_dict(self) -> Dict[str, List[str] | str]:
        return {
            "in_padded_n_bytes": list(self.in_padded_n_bytes),
            "in_len_padded_bytes": self.in_len_padded_bytes,
        }


@dataclass(frozen=True, slots=True)
class EmailInputs:
    modulus: Tuple[str, ...]
    signature: Tuple[str, ...]
    in_padded_n_bytes: Tuple[str, ...]
    in_len_padded_bytes: str
    variant: ClassVar[CircuitVariant] = CircuitVariant.EMAIL

    def to_dict(self) -> Dict[str, List[str] | str]:
        return {
            "modulus": list(self.modulus),
            "signature": list(self.signature),
            "in_padded_n_bytes": list(self.in_padded_n_bytes),
            "in_len_padded_bytes": self.in_len_padded_bytes,
        }


CircuitInputBundle = Union[RsaInputs, ShaInputs, EmailInputs]


def _bigint(value: int, config: CircuitConfig) -> Tuple[str, ...]:
    return tuple(to_circom_bigint(value, config.limb_bits, config.limb_count))


def _padded_message(message: bytes, config: CircuitConfig) -> Tuple[Tuple[str, ...], str]:
    padded, padded_len = sha256_pad(message, config.max_sha_bytes)
    packed = pack_bytes_into_n_bytes(padded, config.pack_width)
    return tuple(str(limb) for limb in packed), str(padded_len)


def get_circuit_inputs(
    signature: int,
    modulus: int,
    message: bytes,
    variant: CircuitVariant | str,
    config: CircuitConfig | None = None,
    hash_fn: HashFunction = sha256_digest,
) -> CircuitInputBundle:
    """Build the input bundle for one circuit variant.

    Only the encoders a variant needs are run. Any encoder failure
    propagates before a bundle is constructed.
    """
    circuit = parse_variant(variant)
    cfg = config or CircuitConfig()

    if circuit is CircuitVariant.RSA:
        base_message = hash_to_field(hash_fn(bytes(message)), cfg.field_modulus)
        return RsaInputs(
            modulus=_bigint(modulus, cfg),
            signature=_bigint(signature, cfg),
            base_message=_bigint(base_message, cfg),
        )
    if circuit is CircuitVariant.EMAIL:
        modulus_limbs = _bigint(modulus, cfg)
        signature_limbs = _bigint(signature, cfg)
        packed, padded_len = _padded_message(message, cfg)
        return EmailInputs(
            modulus=modulus_limbs,
            signature=signature_limbs,
            in_padded_n_bytes=packed,
            in_len_padded_bytes=padded_len,
        )
    packed, padded_len = _padded_message(message, cfg)
    return ShaInputs(in_padded_n_bytes=packed, in_len_padded_bytes=padded_len)
