"""Configuration for hmac-entropy streams."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List
import os

ALGORITHM_ENV_VAR = "HMAC_ENTROPY_ALGORITHM"
DEFAULT_ALGORITHM = "sha256"


@dataclass(frozen=True)
class StreamConfig:
    """Settings shared by every stream built from this config.

    Attributes:
        algorithm: Name of the hash underneath HMAC. The digest size of this
            hash is the stream's block size.
    """

    algorithm: str = DEFAULT_ALGORITHM

    @classmethod
    def from_environment(cls, env_var: str = ALGORITHM_ENV_VAR) -> StreamConfig:
        """
        Build a config from the environment.

        Args:
            env_var: Environment variable holding the algorithm name.

        Returns:
            Config using the environment value, or the default algorithm when
            the variable is unset or blank.
        """
        env_value = os.getenv(env_var)
        if env_value is not None and env_value.strip():
            return cls(algorithm=env_value.strip())
        return cls()

    @property
    def block_size(self) -> int:
        """Digest size in bytes of the configured algorithm."""
        from .crypto.mac import hash_algorithm

        return hash_algorithm(self.algorithm).digest_size

    def validate(self) -> List[str]:
        """
        Validate this configuration.

        Returns:
            List of validation errors. Empty if valid.
        """
        from .crypto.mac import supported_algorithms

        errors = []
        if not isinstance(self.algorithm, str):
            errors.append("algorithm must be a string")
        elif not self.algorithm:
            errors.append("algorithm must not be empty")
        elif self.algorithm.lower() not in supported_algorithms():
            errors.append(
                f"algorithm must be one of {', '.join(supported_algorithms())}"
            )
        return errors
