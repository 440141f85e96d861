"""Keyed-hash primitives and the entropy stream built on them.

The keyed hash itself comes from :pypi:`cryptography`; this package only adds
the chaining discipline on top of it.
"""

from __future__ import annotations

from .entropy import Entropy, block_count, initialize, produce
from .errors import CryptoError, StreamInvariantError, UnsupportedAlgorithmError
from .mac import HmacKeyedHash, KeyedHash, hash_algorithm, supported_algorithms

__all__ = [
    "CryptoError",
    "Entropy",
    "HmacKeyedHash",
    "KeyedHash",
    "StreamInvariantError",
    "UnsupportedAlgorithmError",
    "block_count",
    "hash_algorithm",
    "initialize",
    "produce",
    "supported_algorithms",
]
