"""One-shot and four-way digest helpers: SHA-256, RIPEMD-160 and Keccak-256."""

from __future__ import annotations

import hashlib
import os

from Crypto.Hash import keccak as _keccak

from .ripemd160 import ripemd160 as _ripemd160

_READ_SIZE = 8192


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of ``data``."""
    return hashlib.sha256(data).digest()


def rmd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of ``data``."""
    return _ripemd160(data)


def keccak(data: bytes) -> bytes:
    """Return the Keccak-256 digest (original padding, not SHA3-256) of ``data``."""
    return _keccak.new(data=bytes(data), digest_bits=256).digest()


def _same_length(*items: bytes) -> None:
    if len({len(item) for item in items}) != 1:
        raise ValueError("all four inputs must have the same length")


def sha256_4(
    data0: bytes, data1: bytes, data2: bytes, data3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Hash four equally long inputs with SHA-256."""
    _same_length(data0, data1, data2, data3)
    return sha256(data0), sha256(data1), sha256(data2), sha256(data3)


def rmd160_4(
    data0: bytes, data1: bytes, data2: bytes, data3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Hash four equally long inputs with RIPEMD-160."""
    _same_length(data0, data1, data2, data3)
    return rmd160(data0), rmd160(data1), rmd160(data2), rmd160(data3)


def sha256_file(path: str | os.PathLike[str]) -> bytes:
    """Return the SHA-256 digest of a file's contents."""
    hasher = hashlib.sha256()
    with open(path, "rb") as handle:
        while chunk := handle.read(_READ_SIZE):
            hasher.update(chunk)
    return hasher.digest()