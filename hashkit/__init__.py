"""Pure-Python SHA-256, SHA-512, RIPEMD-160 and Keccak-256 hashing helpers."""

__version__ = "0.1.0"