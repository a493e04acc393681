#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  rsasign.cryptobase.b36:  compact text encoding for signatures

Signatures are written as plain radix-36 numbers using the digits 0-9 and
the upper-case letters A-Z.  There is no radix marker, sign or padding, so
the length of a signature string varies with the size of the key.

"""

from rsasign.errors import MalformedSignatureText


DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"

_VALUES = dict((c,i) for (i,c) in enumerate(DIGITS))


def encode(n):
    """Encode the non-negative integer n as radix-36 text."""
    if isinstance(n,bool) or not isinstance(n,int):
        raise ValueError("can only encode integers, not %r" % (n,))
    if n < 0:
        raise ValueError("can't encode a negative number")
    if n == 0:
        return DIGITS[0]
    chars = []
    while n > 0:
        n,r = divmod(n,36)
        chars.append(DIGITS[r])
    return "".join(reversed(chars))


def decode(text):
    """Decode radix-36 text back into an integer.

    Only the characters produced by encode() are accepted; lower-case
    letters, whitespace and sign characters are rejected with
    MalformedSignatureText.
    """
    if isinstance(text,bytes):
        try:
            text = text.decode("ascii")
        except UnicodeDecodeError:
            raise MalformedSignatureText("signature is not ascii text")
    if not isinstance(text,str):
        raise MalformedSignatureText("signature must be a string")
    if not text:
        raise MalformedSignatureText("empty signature")
    n = 0
    for c in text:
        try:
            n = n * 36 + _VALUES[c]
        except KeyError:
            raise MalformedSignatureText("invalid character %r" % (c,))
    return n
