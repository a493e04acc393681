"""

  rsasign.cryptobase:  basic pure-python crypto primitives.

This package contains pure-python implementations of the RSA arithmetic and
the signature text encoding.  They need nothing beyond the standard library,
which makes them handy for checking the faster versions against.

Don't use anything from this module unless you know you really need it. Use
the rsasign.crypto module instead, which uses PyCryptodome for much better
key generation performance.

"""
