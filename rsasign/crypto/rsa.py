#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  rsasign.crypto.rsa:  RSA signature primitives, fast version

"""

from Crypto.Util.number import bytes_to_long, isPrime
from Crypto.Random import get_random_bytes
from Crypto.Hash import MD5, SHA1, SHA224, SHA256, SHA384, SHA512
from Crypto.Hash import SHA3_224, SHA3_256, SHA3_384, SHA3_512

from rsasign.cryptobase.rsa import math, normalise_hash_name
from rsasign.cryptobase.rsa import PublicKey, PrivateKey, KeyPair
from rsasign.cryptobase.rsa import generate_prime as _generate_prime
from rsasign.cryptobase.rsa import sign, verify, PUBLIC_EXPONENT


HASHES = {
    "md5": MD5,
    "sha1": SHA1,
    "sha224": SHA224,
    "sha256": SHA256,
    "sha384": SHA384,
    "sha512": SHA512,
    "sha3_224": SHA3_224,
    "sha3_256": SHA3_256,
    "sha3_384": SHA3_384,
    "sha3_512": SHA3_512,
}


class math(math):
    bytes_to_long = staticmethod(bytes_to_long)
    randbytes = staticmethod(get_random_bytes)

    @staticmethod
    def modpow(base,exponent,modulus):
        #  Built-in pow would happily take negative arguments.
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        if exponent < 0:
            raise ValueError("exponent must not be negative")
        return pow(base,exponent,modulus)

    @staticmethod
    def is_prime(n):
        return n >= 2 and bool(isPrime(n,false_positive_prob=1e-12))

    @staticmethod
    def get_hash(name):
        try:
            return HASHES[normalise_hash_name(name)].new
        except KeyError:
            raise ValueError("unknown hash algorithm: %s" % (name,))


class PublicKey(PublicKey):
    """Public half of an RSA key, fast version."""
    _math = math


class PrivateKey(PrivateKey):
    """Private half of an RSA key, fast version."""
    _math = math


class KeyPair(KeyPair):
    _math = math
    _PublicKey = PublicKey
    _PrivateKey = PrivateKey


def generate_prime(bits,randbytes=None):
    return _generate_prime(bits,randbytes,math)


def generate_keypair(bits=2048,randbytes=None,max_attempts=16):
    """Generate a new KeyPair, using PyCryptodome for the heavy lifting."""
    return KeyPair.generate(bits,randbytes,max_attempts)


inverse = math.inverse
modpow = math.modpow
