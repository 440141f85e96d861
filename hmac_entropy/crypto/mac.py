"""HMAC wrappers.

The stream generator needs a keyed hash that can absorb bytes and report its
current digest without being finalized. :class:`KeyedHash` names that capability
set and :class:`HmacKeyedHash` provides it on top of :pypi:`cryptography`.
"""

from __future__ import annotations

from typing import Protocol

from cryptography.hazmat.primitives import hashes, hmac

from ..config import DEFAULT_ALGORITHM
from .errors import UnsupportedAlgorithmError

_ALGORITHMS: dict[str, type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "sha512_256": hashes.SHA512_256,
    "sha3_256": hashes.SHA3_256,
}


class KeyedHash(Protocol):
    """A keyed hash whose running state can be duplicated."""

    digest_size: int

    def update(self, data: bytes) -> None: ...

    def copy(self) -> "KeyedHash": ...

    def finalize(self) -> bytes: ...

    def peek(self) -> bytes: ...


def supported_algorithms() -> list[str]:
    """Return the algorithm names accepted by :func:`hash_algorithm`."""

    return sorted(_ALGORITHMS)


def hash_algorithm(name: str) -> hashes.HashAlgorithm:
    """Resolve ``name`` (case-insensitive) to a :mod:`cryptography` hash instance."""

    if not isinstance(name, str):
        raise TypeError("algorithm must be a string")
    try:
        return _ALGORITHMS[name.lower()]()
    except KeyError:
        raise UnsupportedAlgorithmError(
            f"unsupported keyed-hash algorithm {name!r}; expected one of {supported_algorithms()}"
        ) from None


class HmacKeyedHash:
    """HMAC over a :mod:`cryptography` hash, satisfying :class:`KeyedHash`."""

    __slots__ = ("_ctx", "digest_size", "algorithm")

    def __init__(self, ctx: hmac.HMAC, algorithm: str, digest_size: int) -> None:
        self._ctx = ctx
        self.algorithm = algorithm
        self.digest_size = digest_size

    @classmethod
    def new(cls, key: bytes, algorithm: str = DEFAULT_ALGORITHM) -> "HmacKeyedHash":
        """Create an HMAC context keyed with ``key``."""

        if not isinstance(key, (bytes, bytearray, memoryview)):
            raise TypeError("key must be bytes-like")
        hash_alg = hash_algorithm(algorithm)
        return cls(hmac.HMAC(bytes(key), hash_alg), algorithm.lower(), hash_alg.digest_size)

    def update(self, data: bytes) -> None:
        self._ctx.update(data)

    def copy(self) -> "HmacKeyedHash":
        return HmacKeyedHash(self._ctx.copy(), self.algorithm, self.digest_size)

    def finalize(self) -> bytes:
        """Finalize this context. It cannot be updated afterwards."""

        return self._ctx.finalize()

    def peek(self) -> bytes:
        """Return the current digest while leaving this context live."""

        return self._ctx.copy().finalize()
