"""Keyed pseudorandom byte streams.

An :class:`Entropy` stream is an HMAC keyed with a secret that has absorbed a
salt. Each block of output is the digest of a copy of the running HMAC, and
every block is fed back into the running HMAC before the next one is taken:

    block_1 = HMAC(secret, salt)
    block_2 = HMAC(secret, salt || block_1)
    block_3 = HMAC(secret, salt || block_1 || block_2)
    ...

Requests are served in whole blocks. When a request is not a multiple of the
block size the unused tail of the last block is dropped from the output but is
still absorbed, so the stream depends on how earlier requests were split, not
only on how many bytes they returned.

Instances are not thread-safe; callers sharing one must serialize access.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..config import StreamConfig
from .errors import StreamInvariantError
from .mac import HmacKeyedHash, KeyedHash

logger = logging.getLogger(__name__)

KeyedHashFactory = Callable[[bytes], KeyedHash]


def block_count(length: int, block_size: int = 32) -> int:
    """Return how many ``block_size`` blocks are needed to cover ``length`` bytes."""

    if length < 0:
        raise ValueError("length must be non-negative")
    if block_size <= 0:
        raise ValueError("block_size must be positive")
    return length // block_size + (1 if length % block_size > 0 else 0)


def _as_bytes(value: bytes, name: str) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise TypeError(f"{name} must be bytes-like")
    return bytes(value)


class Entropy:
    """A forward-only stream of bytes derived from ``(secret, salt)``.

    Args:
        secret: HMAC key.
        salt: First message absorbed by the HMAC, before any output.
        config: Stream settings. Defaults to ``StreamConfig()`` (HMAC-SHA256);
            pass :meth:`StreamConfig.from_environment` explicitly to honour
            ``HMAC_ENTROPY_ALGORITHM``.
        keyed_hash_factory: Builds the keyed hash from ``secret``. Defaults to
            HMAC over ``config.algorithm``. Cannot be combined with ``config``.
    """

    __slots__ = ("_mac", "_consumed", "_block_size")

    def __init__(
        self,
        secret: bytes,
        salt: bytes,
        *,
        config: StreamConfig | None = None,
        keyed_hash_factory: KeyedHashFactory | None = None,
    ) -> None:
        secret = _as_bytes(secret, "secret")
        salt = _as_bytes(salt, "salt")

        if keyed_hash_factory is None:
            algorithm = (config or StreamConfig()).algorithm
            mac: KeyedHash = HmacKeyedHash.new(secret, algorithm)
        elif config is not None:
            raise TypeError("config and keyed_hash_factory are mutually exclusive")
        else:
            mac = keyed_hash_factory(secret)

        mac.update(salt)
        self._mac = mac
        self._consumed = 0
        self._block_size = mac.digest_size
        logger.debug("entropy stream initialized (block_size=%d)", self._block_size)

    @property
    def block_size(self) -> int:
        """Bytes produced per keyed-hash invocation."""

        return self._block_size

    @property
    def produced_bytes(self) -> int:
        """Total bytes computed so far, including truncated block tails.

        This is ``sum(block_count(n) * block_size)`` over every requested
        ``n``, which exceeds the number of bytes handed out whenever a request
        was not a multiple of :attr:`block_size`.
        """

        return self._consumed

    def get_bytes(self, length: int) -> bytes:
        """Return the next ``length`` bytes of the stream.

        Raises:
            TypeError: If ``length`` is not an integer.
            ValueError: If ``length`` is negative.
            StreamInvariantError: If the keyed hash produced too few bytes.
        """

        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError("length must be an int")
        blocks = block_count(length, self._block_size)

        output = bytearray()
        for _ in range(blocks):
            block = self._mac.peek()
            self._mac.update(block)
            output += block

        self._consumed += len(output)
        del output[length:]
        logger.debug(
            "produced %d bytes from %d blocks (total computed %d)",
            length,
            blocks,
            self._consumed,
        )

        if len(output) != length:
            raise StreamInvariantError(
                f"stream produced {len(output)} bytes, expected {length}"
            )
        return bytes(output)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(block_size={self._block_size}, "
            f"produced_bytes={self._consumed})"
        )


def initialize(secret: bytes, salt: bytes, *, algorithm: str | None = None) -> Entropy:
    """Create an :class:`Entropy` stream keyed with ``secret`` and seeded with ``salt``."""

    config = StreamConfig(algorithm=algorithm) if algorithm is not None else None
    return Entropy(secret, salt, config=config)


def produce(state: Entropy, length: int) -> bytes:
    """Advance ``state`` and return exactly ``length`` bytes."""

    return state.get_bytes(length)
