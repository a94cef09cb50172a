import serialization
from Crypto.Cipher import ARC4

def gen_rc4_key(secret):
    """32 byte stream key, four tags of the secret and a counter"""
    key = bytearray()
    for i in range(4):
        key[i*8:i*8+8] = serialization.to_byte8(serialization.hmac(secret, i))
    return bytes(key)

def new_cipher(secret):
    return ARC4.new(gen_rc4_key(secret))
