"""Four-lane SHA-256 over pre-padded one- or two-block messages."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from typing import Union

from .sha256 import INITIAL_STATE, compress

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64
_BLOCK_WORDS = 16

Lane = Union[bytes, bytearray, memoryview, Sequence[int]]


def _lane_bytes(lane: Lane, blocks: int) -> bytes:
    """Turn one lane into the raw big-endian bytes of ``blocks`` padded blocks.

    A lane is either the padded message as bytes, or the message words as
    32-bit integers (word ``i`` holding bytes ``4*i .. 4*i+3`` big-endian).
    """
    size = blocks * _BLOCK_SIZE
    if isinstance(lane, str):
        raise TypeError("SHA-256 lane must be bytes-like or a sequence of words, not str")
    if isinstance(lane, (bytes, bytearray, memoryview)):
        data = bytes(lane)
        if len(data) != size:
            raise ValueError(f"each lane must hold exactly {size} bytes")
        return data
    words = list(lane)
    if len(words) != blocks * _BLOCK_WORDS:
        raise ValueError(f"each lane must hold exactly {blocks * _BLOCK_WORDS} words")
    for word in words:
        if not isinstance(word, int) or isinstance(word, bool):
            raise TypeError("message words must be integers")
        if not 0 <= word <= _MASK:
            raise ValueError("message words must fit in 32 bits")
    return struct.pack(f">{len(words)}I", *words)


def _digest_lane(data: bytes) -> bytes:
    state = INITIAL_STATE
    for offset in range(0, len(data), _BLOCK_SIZE):
        state = compress(state, data[offset:offset + _BLOCK_SIZE])
    return struct.pack(">8I", *state)


def _run(lanes: tuple[Lane, Lane, Lane, Lane], blocks: int) -> tuple[bytes, bytes, bytes, bytes]:
    prepared = [_lane_bytes(lane, blocks) for lane in lanes]
    d0, d1, d2, d3 = (_digest_lane(data) for data in prepared)
    return d0, d1, d2, d3


def sha256_x4_1b(
    b0: Lane, b1: Lane, b2: Lane, b3: Lane
) -> tuple[bytes, bytes, bytes, bytes]:
    """Compress one already padded 64-byte block per lane from the initial state.

    Each lane is the padded block as 64 bytes or as 16 message words.
    Returns the four 32-byte digests in input order.
    """
    return _run((b0, b1, b2, b3), 1)


def sha256_x4_2b(
    b0: Lane, b1: Lane, b2: Lane, b3: Lane
) -> tuple[bytes, bytes, bytes, bytes]:
    """Compress two already padded blocks (128 bytes) per lane from the initial state.

    Each lane is the padded message as 128 bytes or as 32 message words.
    Returns the four 32-byte digests in input order.
    """
    return _run((b0, b1, b2, b3), 2)