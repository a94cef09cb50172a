import random
import pytest

import serialization

def test_hmac_vectors():
    assert serialization.hmac(0, 0) == 16505158189605431714
    assert serialization.hmac(1, 2) == 8764002627444688607
    assert serialization.hmac(2, 1) == 3147454975509892084
    assert serialization.hmac(0xffffffffffffffff, 0x0123456789abcdef) == 15528071583886934742
    assert serialization.tag is serialization.hmac

def test_hmac_deterministic():
    r = random.Random(1)
    pairs = [(r.getrandbits(64), r.getrandbits(64)) for _ in range(32)]
    tags = [serialization.hmac(x, y) for x, y in pairs]
    assert tags == [serialization.hmac(x, y) for x, y in pairs]
    assert len(set(tags)) > 1
    assert all(0 <= t <= 0xffffffffffffffff for t in tags)

def test_hmac_leu64():
    x = serialization.to_byte8(1)
    y = serialization.to_byte8(2)
    assert serialization.hmac_leu64(x, y) == serialization.to_byte8(8764002627444688607)

def test_uint64_decode():
    buf = bytes([8, 7, 6, 5, 4, 3, 2, 1])
    assert serialization.uint64_decode(buf) == 0x0102030405060708
    assert serialization.uint64_decode(buf + b'\xff\xff') == 0x0102030405060708
    assert serialization.uint64_decode(buf[:7]) == 0
    assert serialization.uint64_decode(b'') == 0

def test_uint64_encode():
    buf = bytearray(8)
    serialization.uint64_encode(0x0102030405060708, buf)
    assert bytes(buf) == bytes([8, 7, 6, 5, 4, 3, 2, 1])

    buf = bytearray(10)
    serialization.uint64_encode(0xffffffffffffffff, buf)
    assert bytes(buf) == b'\xff' * 8 + b'\x00\x00'

def test_uint64_encode_short():
    buf = bytearray(b'abcdefg')
    serialization.uint64_encode(0x0102030405060708, buf)
    assert buf == bytearray(b'abcdefg')

def test_codec_roundtrip():
    r = random.Random(2)
    for _ in range(20):
        buf = bytes(r.getrandbits(8) for _ in range(8))
        out = bytearray(8)
        serialization.uint64_encode(serialization.uint64_decode(buf), out)
        assert bytes(out) == buf

def test_b64_uint64():
    s = serialization.b64encode_uint64(0x0102030405060708)
    assert s == 'CAcGBQQDAgE='
    assert serialization.b64decode_uint64(s) == 0x0102030405060708

def test_b64decode_uint64_invalid():
    with pytest.raises(ValueError):
        serialization.b64decode_uint64('AAAA')
    with pytest.raises(ValueError):
        serialization.b64decode_uint64('not base64!')

def test_hashc():
    assert serialization.hashc(b'') == 5649702678121420037
    assert serialization.hashc(b'abc') == 1917152046826937483
    assert serialization.hashc(b'1\n2\n3\n') == 15235030483159768249
    assert serialization.hashc(b'abc') != serialization.hashc(b'abd')
