"""Shared exceptions for :mod:`hmac_entropy.crypto`.

Caller mistakes (bad lengths, non-bytes inputs) raise the built-in
``ValueError``/``TypeError``. The classes below cover everything else.
"""

from __future__ import annotations


class CryptoError(Exception):
    """Base error for cryptographic operations."""


class UnsupportedAlgorithmError(CryptoError):
    """Raised when a keyed-hash algorithm name is not recognised."""


class StreamInvariantError(CryptoError):
    """Raised when a stream produces a different number of bytes than requested.

    This is never a caller error. It means the keyed-hash backend returned a
    short digest or the block bookkeeping is broken, and the stream must not
    be used further.
    """
