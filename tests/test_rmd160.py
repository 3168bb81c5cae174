import pytest

from hashkit.ripemd160 import ripemd160
from hashkit.rmd160 import RMD160Context, rmd160_data


@pytest.mark.parametrize(
    ("message", "expected"),
    [
        (b"", "9c1185a5c5e9fc54612808977ee8f548b2258d31"),
        (b"abc", "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"),
        (b"message digest", "5d0689ef49d2fae572b881b123a85ffa21595f36"),
    ],
)
def test_standard_vectors(message, expected):
    assert rmd160_data(message).hex() == expected


@pytest.mark.parametrize("length", [0, 1, 31, 32, 55, 56, 57, 63, 64, 65, 119, 120, 128, 200])
def test_agrees_with_streaming_hasher_at_block_boundaries(length):
    data = bytes((i * 7 + 3) & 0xFF for i in range(length))
    assert rmd160_data(data) == ripemd160(data)


def test_chunked_updates_match_one_shot():
    data = bytes(range(256)) * 3
    ctx = RMD160Context()
    for start in range(0, len(data), 37):
        ctx.update(data[start:start + 37])
    assert ctx.digest() == rmd160_data(data)
    assert ctx.byte_count == len(data)


def test_constructor_data_equals_update():
    ctx = RMD160Context()
    ctx.update(b"hello world")
    assert RMD160Context(b"hello world").digest() == ctx.digest()


def test_digest_does_not_consume_state():
    ctx = RMD160Context(b"first part ")
    early = ctx.digest()
    assert ctx.digest() == early
    ctx.update(b"second part")
    assert ctx.digest() == rmd160_data(b"first part second part")


def test_copy_is_independent():
    ctx = RMD160Context(b"shared prefix")
    clone = ctx.copy()
    clone.update(b" and more")
    assert ctx.digest() == rmd160_data(b"shared prefix")
    assert clone.digest() == rmd160_data(b"shared prefix and more")


def test_hexdigest_matches_digest():
    ctx = RMD160Context(b"abc")
    assert ctx.hexdigest() == ctx.digest().hex()
    assert len(ctx.digest()) == 20


def test_accepts_bytearray_and_memoryview():
    data = b"some bytes to hash"
    assert rmd160_data(bytearray(data)) == rmd160_data(data)
    assert rmd160_data(memoryview(data)) == rmd160_data(data)


def test_rejects_str_input():
    with pytest.raises(TypeError):
        RMD160Context().update("text")