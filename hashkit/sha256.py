"""SHA-256 message digest with a streaming hasher and fixed-size helpers."""

from __future__ import annotations

import os
import struct
from collections.abc import Sequence

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_READ_SIZE = 8192
DIGEST_SIZE = 32

INITIAL_STATE: tuple[int, ...] = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def compress(state: Sequence[int], block: bytes) -> tuple[int, ...]:
    """Run the compression function on one 64-byte block and return the new state."""
    if len(state) != 8:
        raise ValueError("SHA-256 state must hold 8 words")
    if len(block) != _BLOCK_SIZE:
        raise ValueError("SHA-256 block must be 64 bytes")
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        x, y = w[i - 15], w[i - 2]
        s0 = _ror(x, 7) ^ _ror(x, 18) ^ (x >> 3)
        s1 = _ror(y, 17) ^ _ror(y, 19) ^ (y >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        big_s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (h + big_s1 + ch + k + wi) & _MASK
        big_s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & _MASK
        a, b, c, d, e, f, g, h = (t1 + t2) & _MASK, a, b, c, (d + t1) & _MASK, e, f, g

    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d, e, f, g, h)))


def _pack_state(state: Sequence[int]) -> bytes:
    return struct.pack(">8I", *state)


def _padded(data: bytes) -> bytes:
    length = len(data)
    pad_len = 1 + (119 - length % _BLOCK_SIZE) % _BLOCK_SIZE
    return data + b"\x80" + bytes(pad_len - 1) + struct.pack(">Q", (length << 3) & 0xFFFFFFFFFFFFFFFF)


def _hash_blocks(message: bytes) -> bytes:
    state = INITIAL_STATE
    for offset in range(0, len(message), _BLOCK_SIZE):
        state = compress(state, message[offset:offset + _BLOCK_SIZE])
    return _pack_state(state)


class SHA256:
    """Streaming SHA-256 hasher in the style of :mod:`hashlib` objects."""

    name = "sha256"
    digest_size = DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, ...] = INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("SHA-256 input must be bytes-like, not str")
        data = bytes(data)
        self._length += len(data)
        pending = self._buffer + data
        full = len(pending) - len(pending) % _BLOCK_SIZE
        state = self._state
        for offset in range(0, full, _BLOCK_SIZE):
            state = compress(state, pending[offset:offset + _BLOCK_SIZE])
        self._state = state
        self._buffer = pending[full:]

    def copy(self) -> SHA256:
        """Return an independent hasher with the same state."""
        other = SHA256()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other

    def digest(self) -> bytes:
        """Return the 32-byte digest of everything fed so far."""
        pad_len = 1 + (119 - self._length % _BLOCK_SIZE) % _BLOCK_SIZE
        tail = (
            self._buffer
            + b"\x80"
            + bytes(pad_len - 1)
            + struct.pack(">Q", (self._length << 3) & 0xFFFFFFFFFFFFFFFF)
        )
        state = self._state
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = compress(state, tail[offset:offset + _BLOCK_SIZE])
        return _pack_state(state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return SHA256(data).digest()


def _exact(data: bytes, size: int, name: str) -> bytes:
    if isinstance(data, str):
        raise TypeError("SHA-256 input must be bytes-like, not str")
    data = bytes(data)
    if len(data) != size:
        raise ValueError(f"{name} expects exactly {size} bytes")
    return data


def sha256_33(data: bytes) -> bytes:
    """Hash exactly 33 bytes (a compressed public key) in a single block."""
    return _hash_blocks(_padded(_exact(data, 33, "sha256_33")))


def sha256_65(data: bytes) -> bytes:
    """Hash exactly 65 bytes (an uncompressed public key) in two blocks."""
    return _hash_blocks(_padded(_exact(data, 65, "sha256_65")))


def sha256_checksum(data: bytes) -> bytes:
    """Return the first 4 bytes of SHA-256(SHA-256(data)) for inputs of at most 55 bytes."""
    if isinstance(data, str):
        raise TypeError("SHA-256 input must be bytes-like, not str")
    data = bytes(data)
    if len(data) > 55:
        raise ValueError("sha256_checksum expects at most 55 bytes")
    inner = _hash_blocks(_padded(data))
    return _hash_blocks(_padded(inner))[:4]


def sha256_hex(digest: bytes) -> str:
    """Format the first 32 bytes of a digest as lower-case hex."""
    if len(digest) < DIGEST_SIZE:
        raise ValueError("digest must hold at least 32 bytes")
    return bytes(digest[:DIGEST_SIZE]).hex()


def sha256_file(path: str | os.PathLike[str]) -> bytes:
    """Return the SHA-256 digest of a file's contents."""
    hasher = SHA256()
    with open(path, "rb") as handle:
        while chunk := handle.read(_READ_SIZE):
            hasher.update(chunk)
    return hasher.digest()