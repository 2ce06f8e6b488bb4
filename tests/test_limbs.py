import hashlib

import pytest

from zkemail_inputs.config import BN254_FIELD_MODULUS
from zkemail_inputs.limbs import LimbRangeError, hash_to_field, int_to_limbs, limbs_to_int, to_circom_bigint


def test_small_value():
    assert int_to_limbs(65537, 8, 3) == [1, 0, 1]
    assert to_circom_bigint(65537, 8, 3) == ["1", "0", "1"]


def test_reconstructs_2048_bit_value():
    value = (1 << 2047) | 0xDEADBEEF
    limbs = to_circom_bigint(value, 121, 17)
    assert len(limbs) == 17
    assert all(int(limb) < (1 << 121) for limb in limbs)
    assert limbs_to_int(limbs, 121) == value


def test_range_limits():
    assert int_to_limbs(255, 8, 1) == [255]
    assert int_to_limbs(0, 8, 2) == [0, 0]
    with pytest.raises(LimbRangeError):
        int_to_limbs(256, 8, 1)
    with pytest.raises(LimbRangeError):
        int_to_limbs(-1, 8, 1)


def test_hash_to_field():
    digest = hashlib.sha256(b"abc").digest()
    folded = hash_to_field(digest, BN254_FIELD_MODULUS)
    assert folded == int.from_bytes(digest, "big") % BN254_FIELD_MODULUS
    assert folded < BN254_FIELD_MODULUS
    assert hash_to_field(b"\x01\x00", 7) == 256 % 7
