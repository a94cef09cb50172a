import random
import log
from common import P, G, MASK64, RAND_MAX, config

p = P
g = G

def mul_mod_p(a,b):
    #a*b % p without leaving [0, 2p)
    m = 0x0000000000000000
    while b>0:
        if b&1 > 0:
            t = p - a
            if m >= t:
                m -= t
            else:
                m += a
        if a >= p-a:
            a = a*2 - p
        else:
            a = a * 2
        b >>= 1
    return m

def pow_mod_p(a,b):
    if b == 1:
        return a
    t = pow_mod_p(a, b>>1)
    t = mul_mod_p(t,t)
    if b%2 > 0:
        t = mul_mod_p(t,a)
    return t

def powmodp(a,b):
    """calc a^b % p, b must be at least 1"""
    if b < 1:
        raise ValueError('invalid exponent: %s' % b)
    if a >= p:
        a %= p
    return pow_mod_p(a,b)

def exchange(random):
    """public value sent to the peer, random is the private value"""
    return powmodp(g,random)

def secret(peer_public, own_random):
    return powmodp(peer_public,own_random)

def random_secret(rand):
    """Concatenate four draws of rand() into one 64bit value.

    rand is a callable returning a non-negative int with at least 16 usable
    bits, like the c library rand(). Wider draws overlap the next slot.
    """
    a = rand()
    b = rand()
    c = rand()
    d = rand()
    return (a << 48 | b << 32 | c << 16 | d) & MASK64

def new_rand(seed=None):
    if seed is None:
        seed = config.get('random', 'seed', fallback=None)
        if seed is not None:
            seed = int(seed)
    r = random.Random(seed)
    def rand():
        return r.randint(0, RAND_MAX)
    return rand

def private_key(rand):
    while True:
        v = random_secret(rand)
        if v > 0:
            return v

def public_key(private_key):
    return exchange(private_key)

def secret_key(private_key, peer_public):
    return secret(peer_public, private_key)

def gen_token(peer_public, rand):
    """Answer a peer public value: returns (token, secret)"""
    prikey = private_key(rand)
    token = exchange(prikey)
    sec = secret(peer_public, prikey)
    log.debug("random:%x, token:%x, secret:%x", prikey, token, sec)
    return token, sec
