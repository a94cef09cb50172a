import base64
import binascii
from common import MASK32, MASK64

def uint64_decode(data):
    #little-endian, extra bytes ignored
    if len(data) < 8:
        return 0
    return int.from_bytes(data[:8], byteorder = 'little')

def uint64_encode(v, buf):
    if len(buf) < 8:
        return
    buf[0:8] = to_byte8(v)

def to_byte8(v):
    return (v & MASK64).to_bytes(8,byteorder = 'little')

def b64encode_uint64(v):
    return base64.b64encode(to_byte8(v)).decode()

def b64decode_uint64(s):
    try:
        data = base64.b64decode(s, validate = True)
    except binascii.Error as err:
        raise ValueError('decoding base64 key failed: %s' % err)
    if len(data) < 8:
        raise ValueError('wrong key length: %d' % len(data))
    return uint64_decode(data)

# Constants are the integer part of the sines of integers (in radians) * 2^32.
K = (
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee,
    0xf57c0faf, 0x4787c62a, 0xa8304613, 0xfd469501,
    0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be,
    0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa,
    0xd62f105d, 0x02441453, 0xd8a1e681, 0xe7d3fbc8,
    0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed,
    0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c,
    0xa4beea44, 0x4bdecfa9, 0xf6bb4b60, 0xbebfbc70,
    0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05,
    0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039,
    0x655b59c3, 0x8f0ccc92, 0xffeff47d, 0x85845dd1,
    0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1,
    0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
)

# per-round shift amounts
R = (7, 12, 17, 22) * 4 + (5, 9, 14, 20) * 4 + (4, 11, 16, 23) * 4 + (6, 10, 15, 21) * 4

def _leftrotate(x, c):
    return ((x << c) | (x >> (32 - c))) & MASK32

def hmac(x,y):
    """Mix two 64bit values into a 64bit tag.

    One md5-like block: the 16 words are (x high, x low, y high, y low)
    repeated four times, the four registers are folded into the result.
    """
    w = [(x >> 32) & MASK32, x & MASK32, (y >> 32) & MASK32, y & MASK32] * 4

    a = 0x67452301
    b = 0xefcdab89
    c = 0x98badcfe
    d = 0x10325476

    for i in range(64):
        if i < 16:
            f = (b & c) | (~b & d)
            g = i
        elif i < 32:
            f = (d & b) | (~d & c)
            g = (5*i + 1) % 16
        elif i < 48:
            f = b ^ c ^ d
            g = (3*i + 5) % 16
        else:
            f = c ^ (b | (~d & MASK32))
            g = (7*i) % 16
        f &= MASK32

        temp = d
        d = c
        c = b
        b = (b + _leftrotate((a + f + K[i] + w[g]) & MASK32, R[i])) & MASK32
        a = temp

    return (a ^ b) << 32 | (c ^ d)

tag = hmac

def hmac_leu64(x,y):
    return to_byte8(hmac(uint64_decode(x), uint64_decode(y)))

def hashc(s):
    djb_hash = 5381
    js_hash  = 1315423911
    for c in s:
        djb_hash = (djb_hash + (djb_hash << 5) + c) & MASK32
        js_hash ^= ((js_hash << 5) + c + (js_hash >> 2)) & MASK32
    return js_hash << 32 | djb_hash
