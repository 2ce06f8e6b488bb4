"""Circuit input encoding for DKIM email signature proofs."""

from .config import BN254_FIELD_MODULUS, CircuitConfig
from .dkim import DkimResult, DkimVerifier, generate_inputs, inputs_from_dkim
from .inputs import (
    CircuitInputBundle,
    CircuitVariant,
    EmailInputs,
    InvalidVariantError,
    RsaInputs,
    ShaInputs,
    get_circuit_inputs,
    parse_variant,
    sha256_digest,
)
from .keys import KeyFormatError, modulus_from_pem, signature_from_base64
from .limbs import LimbRangeError, hash_to_field, int_to_limbs, limbs_to_int, to_circom_bigint
from .packing import PackingInvariantError, pack_bytes_into_n_bytes
from .sha_padding import CapacityExceededError, PaddingInvariantError, int32_to_bytes, sha256_pad

__all__ = [
    "BN254_FIELD_MODULUS",
    "CircuitConfig",
    "DkimResult",
    "DkimVerifier",
    "generate_inputs",
    "inputs_from_dkim",
    "CircuitInputBundle",
    "CircuitVariant",
    "EmailInputs",
    "InvalidVariantError",
    "RsaInputs",
    "ShaInputs",
    "get_circuit_inputs",
    "parse_variant",
    "sha256_digest",
    "KeyFormatError",
    "modulus_from_pem",
    "signature_from_base64",
    "LimbRangeError",
    "hash_to_field",
    "int_to_limbs",
    "limbs_to_int",
    "to_circom_bigint",
    "PackingInvariantError",
    "pack_bytes_into_n_bytes",
    "CapacityExceededError",
    "PaddingInvariantError",
    "int32_to_bytes",
    "sha256_pad",
]
