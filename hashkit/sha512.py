"""SHA-512 message digest with HMAC and PBKDF2 built on it."""

from __future__ import annotations

import struct
from collections.abc import Sequence

_MASK = 0xFFFFFFFFFFFFFFFF
_BLOCK_SIZE = 128
DIGEST_SIZE = 64

_IPAD = 0x36
_OPAD = 0x5C

INITIAL_STATE: tuple[int, ...] = (
    0x6A09E667F3BCC908,
    0xBB67AE8584CAA73B,
    0x3C6EF372FE94F82B,
    0xA54FF53A5F1D36F1,
    0x510E527FADE682D1,
    0x9B05688C2B3E6C1F,
    0x1F83D9ABFB41BD6B,
    0x5BE0CD19137E2179,
)

_K = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F,
    0xE9B5DBA58189DBBC, 0x3956C25BF348B538, 0x59F111F1B605D019,
    0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118, 0xD807AA98A3030242,
    0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235,
    0xC19BF174CF692694, 0xE49B69C19EF14AD2, 0xEFBE4786384F25E3,
    0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65, 0x2DE92C6F592B0275,
    0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F,
    0xBF597FC7BEEF0EE4, 0xC6E00BF33DA88FC2, 0xD5A79147930AA725,
    0x06CA6351E003826F, 0x142929670A0E6E70, 0x27B70A8546D22FFC,
    0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6,
    0x92722C851482353B, 0xA2BFE8A14CF10364, 0xA81A664BBC423001,
    0xC24B8B70D0F89791, 0xC76C51A30654BE30, 0xD192E819D6EF5218,
    0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99,
    0x34B0BCB5E19B48A8, 0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB,
    0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3, 0x748F82EE5DEFB2FC,
    0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915,
    0xC67178F2E372532B, 0xCA273ECEEA26619C, 0xD186B8C721C0C207,
    0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178, 0x06F067AA72176FBA,
    0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC,
    0x431D67C49C100D4C, 0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A,
    0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (64 - n))) & _MASK


def _compress(state: Sequence[int], block: bytes) -> tuple[int, ...]:
    w = list(struct.unpack(">16Q", block))
    for i in range(16, 80):
        x, y = w[i - 15], w[i - 2]
        g0 = _ror(x, 1) ^ _ror(x, 8) ^ (x >> 7)
        g1 = _ror(y, 19) ^ _ror(y, 61) ^ (y >> 6)
        w.append((w[i - 16] + g0 + w[i - 7] + g1) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k, wi in zip(_K, w):
        s1 = _ror(e, 14) ^ _ror(e, 18) ^ _ror(e, 41)
        t = (h + s1 + (g ^ (e & (f ^ g))) + k + wi) & _MASK
        s0 = _ror(a, 28) ^ _ror(a, 34) ^ _ror(a, 39)
        maj = ((a | b) & c) | (a & b)
        a, b, c, d, e, f, g, h = (t + s0 + maj) & _MASK, a, b, c, (d + t) & _MASK, e, f, g

    return tuple((s + v) & _MASK for s, v in zip(state, (a, b, c, d, e, f, g, h)))


def _as_bytes(data: bytes) -> bytes:
    if isinstance(data, str):
        raise TypeError("SHA-512 input must be bytes-like, not str")
    return bytes(data)


class SHA512:
    """Streaming SHA-512 hasher in the style of :mod:`hashlib` objects."""

    name = "sha512"
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
        data = _as_bytes(data)
        self._length += len(data)
        pending = self._buffer + data
        full = len(pending) - len(pending) % _BLOCK_SIZE
        state = self._state
        for offset in range(0, full, _BLOCK_SIZE):
            state = _compress(state, pending[offset:offset + _BLOCK_SIZE])
        self._state = state
        self._buffer = pending[full:]

    def copy(self) -> SHA512:
        """Return an independent hasher with the same state."""
        other = SHA512()
        other._state = self._state
        other._buffer = self._buffer
        other._length = self._length
        return other

    def digest(self) -> bytes:
        """Return the 64-byte digest of everything fed so far."""
        tail = self._buffer + b"\x80"
        if len(tail) > 112:
            tail += bytes(_BLOCK_SIZE - len(tail))
        tail += bytes(112 - len(tail) % _BLOCK_SIZE)
        bits = (self._length << 3) & ((1 << 128) - 1)
        tail += bits.to_bytes(16, "big")
        state = self._state
        for offset in range(0, len(tail), _BLOCK_SIZE):
            state = _compress(state, tail[offset:offset + _BLOCK_SIZE])
        return struct.pack(">8Q", *state)

    def hexdigest(self) -> str:
        """Return the digest as lower-case hex."""
        return self.digest().hex()


def sha512(data: bytes) -> bytes:
    """Return the SHA-512 digest of ``data``."""
    return SHA512(data).digest()


def sha512_hex(digest: bytes) -> str:
    """Format the first 64 bytes of a digest as lower-case hex."""
    if len(digest) < DIGEST_SIZE:
        raise ValueError("digest must hold at least 64 bytes")
    return bytes(digest[:DIGEST_SIZE]).hex()


def _keyed_hashers(block_key: bytes) -> tuple[SHA512, SHA512]:
    """Return hashers already fed with the inner and outer padded key."""
    inner = SHA512(bytes(b ^ _IPAD for b in block_key))
    outer = SHA512(bytes(b ^ _OPAD for b in block_key))
    return inner, outer


def _hmac(inner: SHA512, outer: SHA512, message: bytes) -> bytes:
    ih = inner.copy()
    ih.update(message)
    oh = outer.copy()
    oh.update(ih.digest())
    return oh.digest()


def hmac_sha512(key: bytes, message: bytes) -> bytes:
    """Return HMAC-SHA-512 of ``message``.

    Only the first 128 bytes of ``key`` are used; longer keys are truncated
    rather than hashed.
    """
    key = _as_bytes(key)[:_BLOCK_SIZE]
    message = _as_bytes(message)
    block_key = key + bytes(_BLOCK_SIZE - len(key))
    inner, outer = _keyed_hashers(block_key)
    return _hmac(inner, outer, message)


def pbkdf2_hmac_sha512(password: bytes, salt: bytes, iterations: int, length: int) -> bytes:
    """Derive ``length`` bytes from ``password`` and ``salt`` with PBKDF2-HMAC-SHA-512.

    A password of 128 bytes or more is first replaced by its SHA-512 digest.
    An iteration count of 0 behaves like 1.
    """
    password = _as_bytes(password)
    salt = _as_bytes(salt)
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    if length < 0:
        raise ValueError("length must not be negative")

    key = password if len(password) < _BLOCK_SIZE else sha512(password)
    block_key = key + bytes(_BLOCK_SIZE - len(key))
    inner, outer = _keyed_hashers(block_key)

    salted = inner.copy()
    salted.update(salt)

    output = bytearray()
    index = 1
    while len(output) < length:
        first = salted.copy()
        first.update(struct.pack(">I", index))
        oh = outer.copy()
        oh.update(first.digest())
        u = oh.digest()
        acc = int.from_bytes(u, "big")
        for _ in range(2, iterations + 1):
            u = _hmac(inner, outer, u)
            acc ^= int.from_bytes(u, "big")
        output += acc.to_bytes(DIGEST_SIZE, "big")
        index += 1
    return bytes(output[:length])