"""hmac-entropy: a keyed, forward-only pseudorandom byte stream."""

__version__ = "0.1.0"

from .config import StreamConfig
from .crypto import Entropy, initialize, produce

__all__ = ["Entropy", "StreamConfig", "initialize", "produce"]
