"""Four-lane double SHA-256 checksums over pre-padded single-block messages."""

from __future__ import annotations

from .sha256 import sha256 as _sha256
from .sha256_x4 import Lane, _digest_lane, _lane_bytes

_CHECKSUM_SIZE = 4


def _checksum(block: bytes) -> bytes:
    inner = _digest_lane(block)
    return _sha256(inner)[:_CHECKSUM_SIZE]


def sha256_x4_checksum(
    b0: Lane, b1: Lane, b2: Lane, b3: Lane
) -> tuple[bytes, bytes, bytes, bytes]:
    """Return the 4-byte checksum SHA-256(SHA-256(block))[:4] for each of four lanes.

    Each lane is one already padded 64-byte block, given as bytes or as
    16 big-endian message words. The inner hash is the compression of that
    block from the initial state; the outer hash covers its 32-byte result.
    Checksums come back in input order.
    """
    blocks = [_lane_bytes(lane, 1) for lane in (b0, b1, b2, b3)]
    c0, c1, c2, c3 = (_checksum(block) for block in blocks)
    return c0, c1, c2, c3