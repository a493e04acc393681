"""

  rsasign.crypto:  basic crypto primitives.

This package provides the same interface as rsasign.cryptobase, but hands
the expensive parts (primality testing, exponentiation, random bytes and
hashing) off to PyCryptodome.

"""
