
import unittest

import io
import sys

import rsasign
import rsasign.util
from rsasign.crypto import rsa
from rsasign.tests.test_cryptobase import VECTOR_N, VECTOR_D, VECTOR_SIG


class TestRSASign(unittest.TestCase):

    def test_version(self):
        self.assertEqual(rsasign.__version__,"%d.%d.%d%s" % rsasign.__ver_tuple__)

    def test_exports_fast_implementation(self):
        self.assertTrue(rsasign.PublicKey is rsa.PublicKey)
        self.assertTrue(rsasign.PrivateKey is rsa.PrivateKey)
        self.assertTrue(rsasign.KeyPair is rsa.KeyPair)
        self.assertEqual(rsasign.PUBLIC_EXPONENT,65537)
        self.assertEqual(rsasign.modpow(4,13,497),445)
        self.assertEqual(rsasign.inverse(17,3120),2753)
        self.assertRaises(rsasign.NotInvertible,rsasign.inverse,4,8)

    def test_round_trip(self):
        (pubkey,privkey) = rsasign.generate_keypair(512)
        sig = rsasign.sign(privkey,"a message")
        self.assertTrue(rsasign.verify(pubkey,"a message",sig))
        self.assertFalse(rsasign.verify(pubkey,"another message",sig))
        self.assertEqual(rsasign.decode_signature(sig) < pubkey.n,True)
        self.assertEqual(rsasign.encode_signature(rsasign.decode_signature(sig)),sig)

    def test_known_signature(self):
        privkey = rsasign.PrivateKey(VECTOR_N,VECTOR_D)
        pubkey = rsasign.PublicKey(VECTOR_N)
        self.assertEqual(rsasign.sign(privkey,"hello, world!"),VECTOR_SIG)
        self.assertTrue(rsasign.verify(pubkey,"hello, world!",VECTOR_SIG))

    def test_error_hierarchy(self):
        for exc in (rsasign.NotInvertible,rsasign.EntropySourceUnavailable,
                    rsasign.MalformedSignatureText):
            self.assertTrue(issubclass(exc,rsasign.RSASignError))
        self.assertRaises(rsasign.MalformedSignatureText,
                          rsasign.decode_signature,"not base36!")


class TestDebugTracing(unittest.TestCase):

    def setUp(self):
        self.old_stderr = sys.stderr
        self.old_debug = rsasign.util.rsasign_debug
        sys.stderr = io.StringIO()

    def tearDown(self):
        sys.stderr = self.old_stderr
        rsasign.util.rsasign_debug = self.old_debug

    def test_tracing_disabled_by_default(self):
        rsasign.util.rsasign_debug = False
        rsasign.PrivateKey(VECTOR_N,VECTOR_D).sign("hello, world!")
        self.assertEqual(sys.stderr.getvalue(),"")

    def test_tracing_enabled(self):
        rsasign.util.rsasign_debug = True
        privkey = rsasign.PrivateKey(VECTOR_N,VECTOR_D)
        self.assertEqual(privkey.sign("hello, world!"),VECTOR_SIG)
        output = sys.stderr.getvalue()
        self.assertTrue("CALL> sign(" in output)
        self.assertTrue("CALL< sign(" in output)
        self.assertFalse(str(VECTOR_D) in output)

    def test_tracing_keygen_retries(self):
        rsasign.util.rsasign_debug = True
        failures = [1]
        class FlakyMath(rsa.math):
            @classmethod
            def inverse(cls,a,n):
                if failures:
                    failures.pop()
                    raise rsasign.NotInvertible("forced failure")
                return super(FlakyMath,cls).inverse(a,n)
        class FlakyKeyPair(rsa.KeyPair):
            _math = FlakyMath
        FlakyKeyPair.generate(128)
        output = sys.stderr.getvalue()
        self.assertTrue("CALL> generate(" in output)
        self.assertTrue("attempt 1" in output)
        self.assertTrue("retrying" in output)

    def test_tracing_hides_private_exponent(self):
        rsasign.util.rsasign_debug = True
        rsasign.PrivateKey(3233,2753).sign("x")
        output = sys.stderr.getvalue()
        self.assertTrue("CALL> sign(PrivateKey(n=3233),x)" in output)
        self.assertFalse("2753" in output)
