"""RIPEMD-160 context with split 32-bit byte counters and MD4-style final padding."""

from __future__ import annotations

import struct

from .ripemd160 import INITIAL_STATE, compress

_MASK = 0xFFFFFFFF
BLOCK_BYTES = 64
BLOCK_WORDS = 16
HASH_BYTES = 20
HASH_WORDS = 5


class RMD160Context:
    """Streaming RIPEMD-160 hasher keeping the byte count as low and high words."""

    name = "ripemd160"
    digest_size = HASH_BYTES
    block_size = BLOCK_BYTES

    def __init__(self, data: bytes = b"") -> None:
        self._iv: tuple[int, int, int, int, int] = INITIAL_STATE
        self._pending = b""
        self._bytes_lo = 0
        self._bytes_hi = 0
        if data:
            self.update(data)

    @property
    def byte_count(self) -> int:
        """Total number of bytes fed so far."""
        return (self._bytes_hi << 32) | self._bytes_lo

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        if isinstance(data, str):
            raise TypeError("RIPEMD-160 input must be bytes-like, not str")
        data = bytes(data)
        total = self._bytes_lo + len(data)
        self._bytes_hi = (self._bytes_hi + (total >> 32)) & _MASK
        self._bytes_lo = total & _MASK

        pending = self._pending + data
        full = len(pending) - len(pending) % BLOCK_BYTES
        iv = self._iv
        for offset in range(0, full, BLOCK_BYTES):
            iv = compress(iv, pending[offset:offset + BLOCK_BYTES])
        self._iv = iv
        self._pending = pending[full:]

    def copy(self) -> RMD160Context:
        """Return an independent context with the same state."""
        other = RMD160Context()
        other._iv = self._iv
        other._pending = self._pending
        other._bytes_lo = self._bytes_lo
        other._bytes_hi = self._bytes_hi
        return other

    def _finish(self) -> tuple[int, int, int, int, int]:
        lswlen = self._bytes_lo
        mswlen = self._bytes_hi
        words = [0] * BLOCK_WORDS
        for index, byte in enumerate(self._pending[: lswlen & 63]):
            words[index >> 2] ^= byte << (8 * (index & 3))
        words[(lswlen >> 2) & 15] ^= 1 << (8 * (lswlen & 3) + 7)

        iv = self._iv
        if (lswlen & 63) > 55:
            iv = compress(iv, struct.pack("<16I", *words))
            words = [0] * BLOCK_WORDS

        words[14] = (lswlen << 3) & _MASK
        words[15] = ((lswlen >> 29) | (mswlen << 3)) & _MASK
        return compress(iv, struct.pack("<16I", *words))

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        return struct.pack("<5I", *self._finish())

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


def rmd160_data(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of ``data`` in one call."""
    return RMD160Context(data).digest()