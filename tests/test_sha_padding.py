import pytest

from zkemail_inputs.sha_padding import CapacityExceededError, PaddingInvariantError, int32_to_bytes, sha256_pad


def test_abc_matches_standard_padding():
    padded, message_len = sha256_pad(b"abc", 64)
    expected = b"abc" + b"\x80" + b"\x00" * 56 + b"\x00\x00\x00\x18"
    assert padded == expected
    assert message_len == 64
    # The 32-bit length field agrees with the standard 64-bit one for short messages.
    assert padded == b"abc\x80" + b"\x00" * 52 + (24).to_bytes(8, "big")


def test_zero_extends_to_capacity():
    padded, message_len = sha256_pad(b"abc", 256)
    assert len(padded) == 256
    assert message_len == 64
    assert padded[64:] == b"\x00" * 192


@pytest.mark.parametrize("size", [1, 55, 56, 63, 64, 119, 120, 300])
def test_padded_length_is_smallest_block_multiple(size):
    message = bytes((i * 7) % 256 for i in range(size))
    padded, message_len = sha256_pad(message, 1024)
    expected_len = -(-(size + 5) // 64) * 64
    assert message_len == expected_len
    assert padded[:size] == message
    assert padded[size] == 0x80
    assert int.from_bytes(padded[message_len - 4 : message_len], "big") == size * 8


def test_empty_message():
    padded, message_len = sha256_pad(b"", 64)
    assert message_len == 64
    assert padded[0] == 0x80
    assert padded[1:] == b"\x00" * 63


def test_capacity_exceeded():
    with pytest.raises(CapacityExceededError):
        sha256_pad(b"a" * 60, 64)


def test_capacity_not_reachable_in_words():
    with pytest.raises(PaddingInvariantError):
        sha256_pad(b"abc", 66)


def test_length_field_limited_to_32_bits():
    assert int32_to_bytes(24) == b"\x00\x00\x00\x18"
    with pytest.raises(CapacityExceededError):
        int32_to_bytes(1 << 32)


class _HugeMessage:
    def __len__(self) -> int:
        return 1 << 29


def test_pad_rejects_message_past_32_bit_length():
    with pytest.raises(CapacityExceededError):
        sha256_pad(_HugeMessage(), 1024)  # type: ignore[arg-type]
