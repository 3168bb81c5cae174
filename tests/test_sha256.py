import hashlib

import pytest

from hashkit.sha256 import (
    INITIAL_STATE,
    SHA256,
    compress,
    sha256,
    sha256_33,
    sha256_65,
    sha256_checksum,
    sha256_file,
    sha256_hex,
)


def test_known_vector_abc():
    assert sha256(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_known_vector_empty():
    assert SHA256().hexdigest() == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


@pytest.mark.parametrize("size", [0, 1, 55, 56, 63, 64, 65, 119, 120, 128, 1000])
def test_matches_hashlib_across_padding_boundaries(size):
    data = bytes((i * 7 + 3) & 0xFF for i in range(size))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_incremental_equals_one_shot():
    data = bytes(range(256)) * 3
    hasher = SHA256()
    for start in range(0, len(data), 37):
        hasher.update(data[start:start + 37])
    assert hasher.digest() == sha256(data)


def test_digest_does_not_finalise_state():
    hasher = SHA256(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == hashlib.sha256(b"hello world").digest()


def test_copy_is_independent():
    hasher = SHA256(b"prefix")
    clone = hasher.copy()
    clone.update(b"-more")
    assert hasher.digest() == hashlib.sha256(b"prefix").digest()
    assert clone.digest() == hashlib.sha256(b"prefix-more").digest()


def test_update_rejects_str():
    with pytest.raises(TypeError):
        SHA256().update("text")


def test_compress_rejects_bad_sizes():
    with pytest.raises(ValueError):
        compress(INITIAL_STATE, bytes(63))
    with pytest.raises(ValueError):
        compress(INITIAL_STATE[:7], bytes(64))


def test_compress_single_block_matches_digest():
    block = b"\x80" + bytes(63)
    state = compress(INITIAL_STATE, block)
    assert b"".join(word.to_bytes(4, "big") for word in state) == hashlib.sha256(b"").digest()


def test_sha256_33_matches_reference():
    data = bytes([0x02]) + bytes(range(32))
    assert sha256_33(data) == hashlib.sha256(data).digest()


def test_sha256_65_matches_reference():
    data = bytes([0x04]) + bytes(range(64))
    assert sha256_65(data) == hashlib.sha256(data).digest()


@pytest.mark.parametrize("func,size", [(sha256_33, 32), (sha256_33, 34), (sha256_65, 64)])
def test_fixed_size_helpers_reject_wrong_length(func, size):
    with pytest.raises(ValueError):
        func(bytes(size))


@pytest.mark.parametrize("size", [0, 21, 25, 55])
def test_checksum_is_double_sha_prefix(size):
    data = bytes(range(size))
    expected = hashlib.sha256(hashlib.sha256(data).digest()).digest()[:4]
    assert sha256_checksum(data) == expected


def test_checksum_rejects_long_input():
    with pytest.raises(ValueError):
        sha256_checksum(bytes(56))


def test_hex_formats_first_32_bytes():
    digest = sha256(b"abc")
    assert sha256_hex(digest + b"\xff\xff") == digest.hex()
    assert len(sha256_hex(digest)) == 64


def test_hex_rejects_short_digest():
    with pytest.raises(ValueError):
        sha256_hex(bytes(31))


def test_file_digest(tmp_path):
    content = bytes(range(256)) * 100
    path = tmp_path / "data.bin"
    path.write_bytes(content)
    assert sha256_file(path) == hashlib.sha256(content).digest()


def test_file_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        sha256_file(tmp_path / "absent.bin")