
import unittest

import os
import random

from rsasign.tests.test_cryptobase import TestCryptoBase
from rsasign.tests.test_cryptobase import VECTOR_N, VECTOR_D, VECTOR_SIG

from rsasign.cryptobase import b36
from rsasign.cryptobase import rsa as baseRSA
from rsasign.crypto import rsa


class TestCrypto(TestCryptoBase):

    b36 = b36
    rsa = rsa
    keysize = 1024

    def test_agrees_with_cryptobase_on_primes(self):
        for i in range(200):
            n = random.getrandbits(64)
            self.assertEqual(rsa.math.is_prime(n),baseRSA.math.is_prime(n))
            self.assertEqual(rsa.math.next_prime(n),
                             baseRSA.math.next_prime(n))

    def test_agrees_with_cryptobase_on_modpow(self):
        for i in range(100):
            b = random.getrandbits(512)
            e = random.getrandbits(512)
            m = random.getrandbits(512) | 1
            self.assertEqual(rsa.math.modpow(b,e,m),baseRSA.math.modpow(b,e,m))

    def test_keys_interoperate_with_cryptobase(self):
        (pubkey,privkey) = rsa.generate_keypair(self.keysize)
        basepub = baseRSA.PublicKey.from_dict(pubkey.to_dict())
        basepriv = baseRSA.PrivateKey.from_dict(privkey.to_dict())
        self.assertEqual(basepub,pubkey)
        self.assertEqual(basepriv,privkey)
        for i in range(10):
            bs = os.urandom(random.randint(1,100))
            self.assertEqual(privkey.sign(bs),basepriv.sign(bs))
            self.assertTrue(basepub.verify(bs,privkey.sign(bs)))
            self.assertTrue(pubkey.verify(bs,basepriv.sign(bs)))
            for algo in ("sha1","sha256","sha512","sha3_384"):
                self.assertEqual(privkey.sign(bs,algo),basepriv.sign(bs,algo))

    def test_known_signature_across_implementations(self):
        sig = baseRSA.PrivateKey(VECTOR_N,VECTOR_D).sign(b"hello, world!")
        self.assertEqual(sig,VECTOR_SIG)
        self.assertTrue(rsa.PublicKey(VECTOR_N).verify(b"hello, world!",sig))
