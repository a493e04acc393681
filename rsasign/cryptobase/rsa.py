#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  rsasign.cryptobase.rsa:  RSA signature primitives in pure python

This module implements raw "hash, reduce, exponentiate" RSA signatures.
There is no PKCS#1 padding: the message digest is read as a big-endian
integer and halved until it is no larger than the key modulus, then raised
to the private exponent.  Signatures made this way will not verify under
standard PKCS#1 verifiers, and vice-versa.

All the arithmetic goes through the 'math' class, which the faster
implementations in rsasign.crypto replace wholesale.

"""

import os
import hashlib

from rsasign.errors import NotInvertible, EntropySourceUnavailable
from rsasign.errors import MalformedSignatureText
from rsasign.util import debug, profile_call
from rsasign.cryptobase import b36


PUBLIC_EXPONENT = 2**16 + 1

_SMALL_PRIMES = (2,3,5,7,11,13,17,19,23,29,31,37,41,43,47,
                 53,59,61,67,71,73,79,83,89,97)

#  Miller-Rabin with these bases is exact for n < 3.3 * 10**24.
_WITNESSES = _SMALL_PRIMES[:12]


def normalise_hash_name(name):
    """Map e.g. "SHA-384" or "sha3-256" onto hashlib-style names."""
    name = name.lower()
    if name.startswith("sha-"):
        name = "sha" + name[4:]
    return name.replace("-","_")


class math(object):
    """Math utilities for RSA, designed to be easily replaced."""

    randbytes = staticmethod(os.urandom)

    @staticmethod
    def bytes_to_long(bytes):
        n = 0
        for b in bytearray(bytes):
            n = (n << 8) + b
        return n

    @staticmethod
    def modpow(base,exponent,modulus):
        """Calculate (base ** exponent) % modulus by repeated squaring.

        The exponent is consumed from its lowest bit upwards, and every
        intermediate product is reduced by the modulus.
        """
        if modulus <= 0:
            raise ValueError("modulus must be positive")
        if exponent < 0:
            raise ValueError("exponent must not be negative")
        result = 1 % modulus
        base = base % modulus
        while exponent > 0:
            if exponent & 1:
                result = (result * base) % modulus
            base = (base * base) % modulus
            exponent = exponent // 2
        return result

    @staticmethod
    def inverse(a,n):
        """Calculate the inverse of a modulo n.

        This is the iterative extended Euclidean algorithm.  If a and n
        share a common factor then no inverse exists, and NotInvertible
        is raised.
        """
        if n <= 0:
            raise ValueError("modulus must be positive")
        (r,newr) = (n,a % n)
        (y,newy) = (0,1)
        while newr != 0:
            q = r // newr
            (r,newr) = (newr,r - q*newr)
            (y,newy) = (newy,y - q*newy)
        if r > 1:
            raise NotInvertible("arguments share a common factor")
        if y < 0:
            y = y + n
        return y

    @classmethod
    def is_prime(cls,n):
        """Probabilistic primality test: trial division, then Miller-Rabin."""
        if n < 2:
            return False
        for p in _SMALL_PRIMES:
            if n == p:
                return True
            if n % p == 0:
                return False
        d = n - 1
        s = 0
        while d % 2 == 0:
            d = d // 2
            s += 1
        for a in _WITNESSES:
            x = cls.modpow(a,d,n)
            if x == 1 or x == n - 1:
                continue
            for _ in range(s - 1):
                x = (x * x) % n
                if x == n - 1:
                    break
            else:
                return False
        return True

    @classmethod
    def next_prime(cls,n):
        """Find the smallest prime that is greater than or equal to n."""
        if n <= 2:
            return 2
        if n % 2 == 0:
            n += 1
        while not cls.is_prime(n):
            n += 2
        return n

    @staticmethod
    def get_hash(name):
        """Get a hashlib-style constructor for the named hash algorithm."""
        name = normalise_hash_name(name)
        if name.startswith("shake"):
            raise ValueError("unknown hash algorithm: %s" % (name,))
        try:
            hashlib.new(name)
        except ValueError:
            raise ValueError("unknown hash algorithm: %s" % (name,))
        def hash(data=b""):
            return hashlib.new(name,data)
        return hash


def generate_prime(bits,randbytes=None,math=math):
    """Generate a random prime of approximately the given bit size.

    This draws bits//8 random bytes, reads them as a big-endian integer and
    returns the next prime at or above that number.  Sizes that are not a
    multiple of 8 are rounded down to whole bytes.
    """
    nbytes = bits // 8
    if nbytes <= 0:
        raise ValueError("prime size must be at least 8 bits")
    if randbytes is None:
        randbytes = math.randbytes
    try:
        data = randbytes(nbytes)
    except (OSError,NotImplementedError) as e:
        raise EntropySourceUnavailable("could not read random bytes: %s" % (e,))
    if len(data) != nbytes:
        raise EntropySourceUnavailable("short read from random source")
    return math.next_prime(math.bytes_to_long(data))


def _parse_int(value):
    """Parse a key field given as an int, decimal string or 0x-hex string."""
    if isinstance(value,str):
        value = value.strip()
        if "_" in value:
            raise ValueError("invalid key value: %r" % (value,))
        if value[:2].lower() == "0x":
            value = int(value[2:],16)
        else:
            value = int(value,10)
    elif isinstance(value,bool) or not isinstance(value,int):
        raise ValueError("invalid key value: %r" % (value,))
    if value <= 0:
        raise ValueError("key values must be positive")
    return value


class RSAKey(object):
    """Base class for the public and private halves of an RSA key.

    Key objects are treated as immutable values; they compare equal when
    they hold the same numbers.
    """

    _math = math
    _codec = b36
    _fields = ("n",)

    default_hash = "sha384"

    def __init__(self,n):
        self.n = n

    def _values(self):
        return tuple(getattr(self,f) for f in self._fields)

    def __eq__(self,other):
        if not isinstance(other,RSAKey):
            return NotImplemented
        return (self._fields == other._fields and
                self._values() == other._values())

    def __ne__(self,other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash(self._fields + self._values())

    def __repr__(self):
        args = ",".join(repr(v) for v in self._values())
        return "%s(%s)" % (self.__class__.__name__,args)

    def _trace_repr(self):
        n = str(self.n)
        if len(n) > 12:
            n = n[:12] + "..."
        return "%s(n=%s)" % (self.__class__.__name__,n)

    def to_dict(self,base=10):
        """Get the key numbers as a dict of decimal or hexadecimal strings."""
        if base == 10:
            fmt = str
        elif base == 16:
            fmt = hex
        else:
            raise ValueError("base must be 10 or 16, not %r" % (base,))
        return dict((f,fmt(v)) for (f,v) in zip(self._fields,self._values()))

    @classmethod
    def from_dict(cls,fields):
        """Create a key from a dict as produced by to_dict()."""
        try:
            values = [fields[f] for f in cls._fields]
        except KeyError as e:
            raise ValueError("missing key field: %s" % (e.args[0],))
        return cls(*[_parse_int(v) for v in values])

    def _get_hasher(self,hash_algo):
        if hash_algo is None:
            hash_algo = self.default_hash
        if callable(hash_algo):
            return hash_algo
        if not isinstance(hash_algo,str):
            raise TypeError("hash_algo must be a name or a hash constructor")
        return self._math.get_hash(hash_algo)

    def digest(self,message,hash_algo=None):
        """Hash the message and reduce it to an integer no bigger than n.

        The reduction halves the digest until it fits rather than taking
        it modulo n, discarding low-order bits of the hash.  Text messages
        are encoded as UTF-8 before hashing.
        """
        if isinstance(message,str):
            message = message.encode("utf8")
        hasher = self._get_hasher(hash_algo)
        digest = self._math.bytes_to_long(hasher(message).digest())
        while digest > self.n:
            digest = digest // 2
        return digest


class PublicKey(RSAKey):
    """Public half of an RSA key, able to verify signatures."""

    _fields = ("n","e")

    def __init__(self,n,e=PUBLIC_EXPONENT):
        super(PublicKey,self).__init__(n)
        self.e = e

    @profile_call
    def verify(self,message,signature,hash_algo=None):
        """Check that 'signature' is a valid signature of 'message'.

        Any mismatch, including badly-formed signature text, gives False.
        The hash algorithm must be the one used to make the signature.
        """
        digest = self.digest(message,hash_algo)
        try:
            sig = self._codec.decode(signature)
        except MalformedSignatureText:
            return False
        if sig >= self.n:
            return False
        return self._math.modpow(sig,self.e,self.n) == digest


class PrivateKey(RSAKey):
    """Private half of an RSA key, able to produce signatures."""

    _fields = ("n","d")

    def __init__(self,n,d):
        super(PrivateKey,self).__init__(n)
        self.d = d

    @profile_call
    def sign(self,message,hash_algo=None):
        """Sign the given message, returning the signature as a string."""
        digest = self.digest(message,hash_algo)
        return self._codec.encode(self._math.modpow(digest,self.d,self.n))


class KeyPair(object):
    """Matched public and private keys sharing a single modulus."""

    _math = math
    _PublicKey = PublicKey
    _PrivateKey = PrivateKey

    def __init__(self,public,private):
        if public.n != private.n:
            raise ValueError("public and private keys have different moduli")
        self.public = public
        self.private = private

    @property
    def n(self):
        return self.public.n

    def get_public_key(self):
        return self.public

    def get_private_key(self):
        return self.private

    def __iter__(self):
        return iter((self.public,self.private))

    def __eq__(self,other):
        if not isinstance(other,KeyPair):
            return NotImplemented
        return self.public == other.public and self.private == other.private

    def __ne__(self,other):
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return eq
        return not eq

    def __hash__(self):
        return hash((self.public,self.private))

    def __repr__(self):
        return "%s(%r,%r)" % (self.__class__.__name__,self.public,self.private)

    @classmethod
    @profile_call
    def generate(cls,bits=2048,randbytes=None,max_attempts=16):
        """Generate a new key pair with a modulus of about 'bits' bits.

        Each prime gets bits//2 + 1 bits, so that their product isn't left
        short of the requested size.  If the public exponent turns out not
        to be invertible for the chosen primes, fresh primes are drawn, up
        to 'max_attempts' times in total.
        """
        if bits < 14:
            raise ValueError("key size must be at least 14 bits")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        prime_bits = bits // 2 + 1
        for attempt in range(1,max_attempts + 1):
            p = generate_prime(prime_bits,randbytes,cls._math)
            q = generate_prime(prime_bits,randbytes,cls._math)
            while q == p:
                q = generate_prime(prime_bits,randbytes,cls._math)
            n = p * q
            phi = (p - 1) * (q - 1)
            try:
                d = cls._math.inverse(PUBLIC_EXPONENT,phi)
            except NotInvertible:
                if attempt >= max_attempts:
                    raise
                debug("keygen attempt %d: exponent not invertible, retrying",
                      attempt)
                continue
            return cls(cls._PublicKey(n,PUBLIC_EXPONENT),
                       cls._PrivateKey(n,d))


def generate_keypair(bits=2048,randbytes=None,max_attempts=16):
    """Generate a new KeyPair using the pure-python primitives."""
    return KeyPair.generate(bits,randbytes,max_attempts)


def sign(private_key,message,hash_algo=None):
    """Sign a message with the given private key."""
    return private_key.sign(message,hash_algo)


def verify(public_key,message,signature,hash_algo=None):
    """Verify a message signature with the given public key."""
    return public_key.verify(message,signature,hash_algo)


inverse = math.inverse
modpow = math.modpow
