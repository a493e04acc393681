#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

rsasign:  raw RSA signatures over arbitrary-precision integers
=============================================================


This module implements a small RSA signature scheme: key-pair generation,
modular inverses, modular exponentiation, and a hash-then-sign protocol
whose signatures are written as compact radix-36 strings.

To generate a key pair and sign something::

    import rsasign

    (pubkey,privkey) = rsasign.generate_keypair(2048)
    sig = rsasign.sign(privkey,"hello, world!")
    assert rsasign.verify(pubkey,"hello, world!",sig)

The keys are simple value objects holding the numbers 'n' and 'e' (public)
or 'n' and 'd' (private).  There is no file format; use to_dict() and
from_dict() to move them around as decimal or hexadecimal strings::

    fields = pubkey.to_dict()
    pubkey = rsasign.PublicKey.from_dict(fields)


The Signature Scheme
--------------------

Signing hashes the message (SHA-384 by default), reads the digest as a
big-endian integer, and halves it until it is no larger than the modulus.
The result is raised to the private exponent and written in radix 36 using
the characters 0-9 and A-Z.  Verifying reverses the exponentiation with the
public exponent and compares against the recomputed digest.

There is no padding, and the reduction is not the usual modular one, so
these signatures are NOT compatible with PKCS#1 implementations.  The hash
algorithm is not recorded in the signature; if signer and verifier disagree
on it, verification simply fails.  Pass e.g. hash_algo="sha256" to both.


Implementations
---------------

The pure-python primitives live in rsasign.cryptobase, and faster versions
built on PyCryptodome live in rsasign.crypto.  The names exported from this
package are the fast versions.  Set rsasign.util.rsasign_debug to True to
trace key generation, signing and verification calls on stderr.

"""

__ver_major__ = 0
__ver_minor__ = 1
__ver_patch__ = 0
__ver_sub__ = ""
__ver_tuple__ = (__ver_major__,__ver_minor__,__ver_patch__,__ver_sub__)
__version__ = "%d.%d.%d%s" % __ver_tuple__


from rsasign.errors import RSASignError, NotInvertible
from rsasign.errors import EntropySourceUnavailable, MalformedSignatureText
from rsasign.crypto.rsa import PublicKey, PrivateKey, KeyPair
from rsasign.crypto.rsa import generate_keypair, generate_prime
from rsasign.crypto.rsa import sign, verify, inverse, modpow
from rsasign.crypto.rsa import PUBLIC_EXPONENT
from rsasign.cryptobase.b36 import encode as encode_signature
from rsasign.cryptobase.b36 import decode as decode_signature
