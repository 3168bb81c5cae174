import hashlib
import struct

import pytest

from hashkit.sha256 import sha256_33, sha256_65
from hashkit.sha256_x4 import sha256_x4_1b, sha256_x4_2b


def _pad(message: bytes) -> bytes:
    length = len(message)
    zeros = (55 - length) % 64
    return message + b"\x80" + bytes(zeros) + struct.pack(">Q", length * 8)


def _words(block: bytes) -> list[int]:
    return list(struct.unpack(f">{len(block) // 4}I", block))


MESSAGES_33 = [bytes([0x02]) + bytes([i]) * 32 for i in range(4)]
MESSAGES_65 = [bytes([0x04]) + bytes([i + 7]) * 64 for i in range(4)]


def test_empty_message_digest():
    block = _pad(b"")
    digests = sha256_x4_1b(block, block, block, block)
    expected = bytes.fromhex("e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855")
    assert digests == (expected,) * 4


def test_one_block_matches_hashlib_in_lane_order():
    blocks = [_pad(m) for m in MESSAGES_33]
    digests = sha256_x4_1b(*blocks)
    assert list(digests) == [hashlib.sha256(m).digest() for m in MESSAGES_33]


def test_one_block_matches_sha256_33():
    blocks = [_pad(m) for m in MESSAGES_33]
    digests = sha256_x4_1b(*blocks)
    assert list(digests) == [sha256_33(m) for m in MESSAGES_33]


def test_two_blocks_match_sha256_65():
    blocks = [_pad(m) for m in MESSAGES_65]
    assert all(len(b) == 128 for b in blocks)
    digests = sha256_x4_2b(*blocks)
    assert list(digests) == [sha256_65(m) for m in MESSAGES_65]
    assert list(digests) == [hashlib.sha256(m).digest() for m in MESSAGES_65]


def test_word_input_equals_byte_input():
    blocks = [_pad(m) for m in MESSAGES_33]
    assert sha256_x4_1b(*[_words(b) for b in blocks]) == sha256_x4_1b(*blocks)
    blocks2 = [_pad(m) for m in MESSAGES_65]
    assert sha256_x4_2b(*[_words(b) for b in blocks2]) == sha256_x4_2b(*blocks2)


def test_mixed_lane_kinds():
    blocks = [_pad(m) for m in MESSAGES_33]
    mixed = (blocks[0], _words(blocks[1]), bytearray(blocks[2]), memoryview(blocks[3]))
    assert sha256_x4_1b(*mixed) == sha256_x4_1b(*blocks)


def test_lanes_are_independent():
    blocks = [_pad(m) for m in MESSAGES_33]
    first = sha256_x4_1b(*blocks)
    swapped = sha256_x4_1b(blocks[3], blocks[1], blocks[2], blocks[0])
    assert swapped[0] == first[3]
    assert swapped[3] == first[0]
    assert swapped[1:3] == first[1:3]


def test_one_block_rejects_wrong_size():
    good = _pad(b"abc")
    with pytest.raises(ValueError):
        sha256_x4_1b(good[:63], good, good, good)
    with pytest.raises(ValueError):
        sha256_x4_1b(good, good, good, _words(good)[:15])


def test_two_blocks_rejects_single_block():
    block = _pad(b"abc")
    with pytest.raises(ValueError):
        sha256_x4_2b(block, block, block, block)


def test_rejects_str_lane():
    block = _pad(b"abc")
    with pytest.raises(TypeError):
        sha256_x4_1b("a" * 64, block, block, block)


def test_rejects_out_of_range_word():
    block = _pad(b"abc")
    words = _words(block)
    words[0] = 1 << 32
    with pytest.raises(ValueError):
        sha256_x4_1b(block, words, block, block)
    words[0] = -1
    with pytest.raises(ValueError):
        sha256_x4_1b(block, block, words, block)


def test_rejects_non_integer_word():
    block = _pad(b"abc")
    words = _words(block)
    words[2] = 1.5
    with pytest.raises(TypeError):
        sha256_x4_1b(block, block, block, words)