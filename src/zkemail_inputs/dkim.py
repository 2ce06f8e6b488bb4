"""Bridge from a verified DKIM signature to circuit inputs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Protocol

from .config import CircuitConfig
from .inputs import CircuitInputBundle, CircuitVariant, get_circuit_inputs, parse_variant
from .keys import modulus_from_pem, signature_from_base64


@dataclass(frozen=True, slots=True)
class DkimResult:
    signature: str
    signed_header: bytes
    public_key_pem: str

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "DkimResult":
        missing = [key for key in ("signature", "signed_header", "public_key") if key not in raw]
        if missing:
            raise ValueError(f"DKIM result missing fields: {', '.join(missing)}")
        for key in ("signature", "public_key"):
            if not isinstance(raw[key], str):
                raise ValueError(f"DKIM field {key} must be a string")
        header = raw["signed_header"]
        if not isinstance(header, (str, bytes)):
            raise ValueError("DKIM field signed_header must be text or bytes")
        if isinstance(header, str):
            header = header.encode("utf-8")
        return cls(signature=raw["signature"], signed_header=bytes(header), public_key_pem=raw["public_key"])


class DkimVerifier(Protocol):
    def verify(self, email: bytes) -> DkimResult: ...


def inputs_from_dkim(
    result: DkimResult,
    variant: CircuitVariant | str = CircuitVariant.SHA,
    config: CircuitConfig | None = None,
) -> CircuitInputBundle:
    circuit = parse_variant(variant)
    signature = signature_from_base64(result.signature)
    modulus = modulus_from_pem(result.public_key_pem)
    return get_circuit_inputs(signature, modulus, result.signed_header, circuit, config)


def generate_inputs(
    email: bytes,
    verifier: DkimVerifier,
    variant: CircuitVariant | str = CircuitVariant.SHA,
    config: CircuitConfig | None = None,
) -> CircuitInputBundle:
    """Verify ``email`` with ``verifier`` and encode its first DKIM signature."""
    result = verifier.verify(email)
    return inputs_from_dkim(result, variant, config)
