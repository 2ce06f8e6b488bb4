"""SHA-256 message padding to a fixed circuit capacity."""

from __future__ import annotations

from typing import Tuple

MAX_LENGTH_BITS = (1 << 32) - 1


class CapacityExceededError(ValueError):
    """Raised when a message does not fit the circuit's fixed SHA capacity."""


class PaddingInvariantError(RuntimeError):
    """Raised when the padded buffer violates a block or capacity invariant."""


def int32_to_bytes(value: int) -> bytes:
    if not (0 <= value <= MAX_LENGTH_BITS):
        raise CapacityExceededError(f"Length field {value} does not fit in 32 bits")
    return value.to_bytes(4, "big")


def sha256_pad(message: bytes, max_sha_bytes: int) -> Tuple[bytes, int]:
    """Apply SHA-256 padding, then zero-extend to ``max_sha_bytes``.

    The length field is 32 bits wide, so messages must be shorter than
    2**32 bits. Returns the extended buffer and the length of the padded
    message before zero extension.
    """
    length_bits = len(message) * 8
    length_field = int32_to_bytes(length_bits)

    padded = bytearray(message)
    padded.append(0x80)
    while (len(padded) * 8 + len(length_field) * 8) % 512 != 0:
        padded.append(0)
    padded.extend(length_field)
    if (len(padded) * 8) % 512 != 0:
        raise PaddingInvariantError("Padding did not complete properly")

    message_len = len(padded)
    if message_len > max_sha_bytes:
        raise CapacityExceededError(
            f"Padded message is {message_len} bytes; circuit capacity is {max_sha_bytes}"
        )
    while len(padded) < max_sha_bytes:
        padded.extend(int32_to_bytes(0))
    if len(padded) != max_sha_bytes:
        raise PaddingInvariantError(
            f"Padding to max length produced {len(padded)} bytes, expected {max_sha_bytes}"
        )
    return bytes(padded), message_len
