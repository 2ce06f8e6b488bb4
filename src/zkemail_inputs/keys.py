"""RSA key and signature decoding helpers."""

from __future__ import annotations

import base64
import binascii

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa


class KeyFormatError(ValueError):
    """Raised when a public key or signature cannot be decoded."""


def modulus_from_pem(pem: str | bytes) -> int:
    data = pem.encode("ascii") if isinstance(pem, str) else pem
    try:
        public_key = serialization.load_pem_public_key(data)
    except ValueError as exc:
        raise KeyFormatError("Public key is not valid PEM") from exc
    if not isinstance(public_key, rsa.RSAPublicKey):
        raise KeyFormatError(f"Expected an RSA public key, got {type(public_key).__name__}")
    return public_key.public_numbers().n


def signature_from_base64(signature_b64: str) -> int:
    # DKIM b= tags are folded across lines.
    compact = "".join(signature_b64.split())
    try:
        raw = base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise KeyFormatError("Signature is not valid base64") from exc
    if not raw:
        raise KeyFormatError("Signature is empty")
    return int.from_bytes(raw, "big")
