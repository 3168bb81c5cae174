"""RIPEMD-160 message digest with a streaming hasher and fixed-size helpers."""

from __future__ import annotations

import struct
from collections.abc import Sequence

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
DIGEST_SIZE = 20

INITIAL_STATE: tuple[int, int, int, int, int] = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

_LEFT_WORDS = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
_RIGHT_WORDS = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)
_LEFT_ROTATIONS = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
_RIGHT_ROTATIONS = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)
_LEFT_CONSTANTS = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_RIGHT_CONSTANTS = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)


def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f(group: int, x: int, y: int, z: int) -> int:
    if group == 0:
        return x ^ y ^ z
    if group == 1:
        return (x & y) | (~x & z & _MASK)
    if group == 2:
        return ((x | (~y & _MASK)) ^ z) & _MASK
    if group == 3:
        return (x & z) | (y & ~z & _MASK)
    return (x ^ (y | (~z & _MASK))) & _MASK


def compress(state: Sequence[int], block: bytes) -> tuple[int, int, int, int, int]:
    """Run the compression function on one 64-byte block and return the new state."""
    if len(state) != 5:
        raise ValueError("RIPEMD-160 state must hold 5 words")
    if len(block) != _BLOCK_SIZE:
        raise ValueError("RIPEMD-160 block must be 64 bytes")
    words = struct.unpack("<16I", block)
    h0, h1, h2, h3, h4 = state

    al, bl, cl, dl, el = h0, h1, h2, h3, h4
    ar, br, cr, dr, er = h0, h1, h2, h3, h4
    for step in range(80):
        group = step >> 4
        t = (al + _f(group, bl, cl, dl) + words[_LEFT_WORDS[step]] + _LEFT_CONSTANTS[group]) & _MASK
        t = (_rol(t, _LEFT_ROTATIONS[step]) + el) & _MASK
        al, el, dl, cl, bl = el, dl, _rol(cl, 10), bl, t

        t = (ar + _f(4 - group, br, cr, dr) + words[_RIGHT_WORDS[step]] + _RIGHT_CONSTANTS[group]) & _MASK
        t = (_rol(t, _RIGHT_ROTATIONS[step]) + er) & _MASK
        ar, er, dr, cr, br = er, dr, _rol(cr, 10), br, t

    return (
        (h1 + cl + dr) & _MASK,
        (h2 + dl + er) & _MASK,
        (h3 + el + ar) & _MASK,
        (h4 + al + br) & _MASK,
        (h0 + bl + cr) & _MASK,
    )


def _pack_state(state: Sequence[int]) -> bytes:
    return struct.pack("<5I", *state)


class RIPEMD160:
    """Streaming RIPEMD-160 hasher in the style of :mod:`hashlib` objects."""

    name = "ripemd160"
    digest_size = DIGEST_SIZE
    block_size = _BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state: tuple[int, int, int, int, int] = INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._length += len(data)
        pending = self._buffer + data
        full = len(pending) - len(pending) % _BLOCK_SIZE
        for offset in range(0, full, _BLOCK_SIZE):
            self._state = compress(self._state, pending[offset:offset + _BLOCK_SIZE])
        self._buffer = pending[full:]

    def copy(self) -> RIPEMD160:
        """Return an independent hasher with the same state."""
        other = RIPEMD160()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        pad_len = 1 + (119 - self._length % _BLOCK_SIZE) % _BLOCK_SIZE
        tail = (
            self._buffer
            + b"\x80"
            + bytes(pad_len - 1)
            + struct.pack("<Q", (self._length << 3) & 0xFFFFFFFFFFFFFFFF)
        )
        state = self._state
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = compress(state, tail[offset:offset + _BLOCK_SIZE])
        return _pack_state(state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


def ripemd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return RIPEMD160(data).digest()


def ripemd160_32(data: bytes) -> bytes:
    """Hash exactly 32 bytes in a single padded block."""
    if len(data) != 32:
        raise ValueError("ripemd160_32 expects exactly 32 bytes")
    block = bytes(data) + b"\x80" + bytes(23) + struct.pack("<Q", 32 << 3)
    return _pack_state(compress(INITIAL_STATE, block))


def ripemd160_hex(digest: bytes) -> str:
    """Format the first 20 bytes of a digest as lower-case hex."""
    if len(digest) < DIGEST_SIZE:
        raise ValueError("digest must hold at least 20 bytes")
    return bytes(digest[:DIGEST_SIZE]).hex()


def ripemd160_comp_hash(h0: bytes, h1: bytes) -> bool:
    """Tell whether two digests agree on their first 20 bytes."""
    if len(h0) < DIGEST_SIZE or len(h1) < DIGEST_SIZE:
        raise ValueError("digests must hold at least 20 bytes")
    return bytes(h0[:DIGEST_SIZE]) == bytes(h1[:DIGEST_SIZE])