#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  rsasign.errors:  exceptions raised by the rsasign primitives

"""


class RSASignError(Exception):
    """Base class for errors raised by rsasign."""
    pass

class NotInvertible(RSASignError,ValueError):
    """Error raised when a number has no inverse modulo the given modulus."""
    pass

class EntropySourceUnavailable(RSASignError,RuntimeError):
    """Error raised when random bytes cannot be obtained."""
    pass

class MalformedSignatureText(RSASignError,ValueError):
    """Error raised when a signature string is not valid radix-36 text."""
    pass
