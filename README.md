# hashkit

This package implements SHA-256, SHA-512 (with HMAC and PBKDF2) and RIPEMD-160 in
plain Python. RIPEMD-160 comes in two variants. Keccak-256 is also available,
through pycryptodome. There are shortcuts for inputs of fixed size, and helpers
that take four inputs and return four results.

## Installation

```
pip install hashkit
```

To install and run the test suite:

```
pip install "hashkit[test]"
pytest
```

## Streaming hashers

`SHA256` (in `hashkit.sha256`), `SHA512` (in `hashkit.sha512`), `RIPEMD160`
(in `hashkit.ripemd160`) and `RMD160Context` (in `hashkit.rmd160`) work like
the objects in `hashlib`. You can give data to the constructor or to `update`.
Then call `digest`, `hexdigest` or `copy`. `RMD160Context` also has a
`byte_count` property. Passing a `str` instead of bytes raises `TypeError`.

```python
from hashkit.sha256 import SHA256
from hashkit.ripemd160 import RIPEMD160

h = SHA256(b"hello ")
h.update(b"world")
print(h.hexdigest())

r = RIPEMD160(b"abc")
print(r.hexdigest())
```

## One-shot functions

```python
from hashkit.sha256 import sha256, sha256_hex, sha256_checksum, sha256_file
from hashkit.sha512 import sha512, sha512_hex, hmac_sha512, pbkdf2_hmac_sha512
from hashkit.ripemd160 import ripemd160, ripemd160_hex, ripemd160_comp_hash
from hashkit.rmd160 import rmd160_data
from hashkit.hashing import keccak

digest = sha256(b"data")
print(sha256_hex(digest))

# First four bytes of SHA256(SHA256(data)); the input may be at most 55 bytes
check = sha256_checksum(bytes(21))

mac = hmac_sha512(b"secret", b"message")

password = "password"
derived = pbkdf2_hmac_sha512(password.encode(), b"salt", 2048, 64)

print(ripemd160_hex(ripemd160(b"abc")))
print(rmd160_data(b"abc").hex())
print(keccak(b"").hex())
```

Some points to note:

- `sha256_file(path)` reads the file in chunks and returns its SHA-256
  digest. `hashkit.hashing.sha256_file` does the same with `hashlib`.
- `hmac_sha512` uses only the first 128 bytes of the key. A longer key is
  cut short, not hashed.
- `pbkdf2_hmac_sha512` replaces a password of 128 bytes or more with its
  SHA-512 digest. An iteration count of 0 acts like 1.
- `keccak` returns Keccak-256 with the original padding, not SHA3-256.
- `ripemd160_comp_hash(h0, h1)` tells you whether two digests agree in their
  first 20 bytes.
- `compress(state, block)` in `hashkit.sha256` and in `hashkit.ripemd160` runs
  the compression function once on a 64-byte block.

## Fixed-size and batch helpers

- `sha256_33(data)` hashes exactly 33 bytes, such as a compressed public key.
  `sha256_65(data)` hashes exactly 65 bytes, such as an uncompressed public
  key.
- `ripemd160_32(data)` hashes exactly 32 bytes, for example a SHA-256 digest.
- `hashkit.hashing.sha256_4` and `hashkit.hashing.rmd160_4` take four inputs
  of equal length and return four digests.
- `hashkit.sha256_x4.sha256_x4_1b` and `sha256_x4_2b` compress four messages
  that are already padded, of one or two 64-byte blocks each. Give each lane
  as bytes or as a list of 32-bit big-endian message words.
- `hashkit.sha256_checksum_x4.sha256_x4_checksum` takes four padded single
  blocks and returns a 4-byte double-SHA-256 checksum for each.

A helper whose input has the wrong size raises `ValueError`.

## What it does not do

This is a library only. It installs no command-line tool. It has no four-lane
RIPEMD-160 helper; use `hashkit.hashing.rmd160_4` or call `ripemd160_32` once
for each input.