"""Repack padded message bytes into circuit input limbs."""

from __future__ import annotations

from typing import List

import numpy as np


MAX_PACK_WIDTH = 255


class PackingInvariantError(RuntimeError):
    """Raised when the packed limb count disagrees with the byte count."""


def pack_bytes_into_n_bytes(padded: bytes, n: int = 7) -> List[int]:
    """Group bytes by ``n`` and keep ``byte[i] >> (i % n)`` of each group's last byte.

    Every byte of a group overwrites the group's limb, so the limb holds the
    shifted value of the final byte in that group. Circuit constraints decode
    exactly this layout.
    """
    if not (1 <= n <= MAX_PACK_WIDTH):
        raise ValueError(f"n must be in [1, {MAX_PACK_WIDTH}]; received {n}")
    arr = np.frombuffer(bytes(padded), dtype=np.uint8)
    shifts = (np.arange(arr.size) % n).astype(np.uint8)
    shifted = np.right_shift(arr, shifts)
    last_in_group = np.minimum(np.arange(n - 1, arr.size + n - 1, n), arr.size - 1)
    limbs = shifted[last_in_group]
    expected = -(-arr.size // n)
    if limbs.size != expected:
        raise PackingInvariantError(f"Packed {limbs.size} limbs from {arr.size} bytes; expected {expected}")
    return [int(limb) for limb in limbs]
