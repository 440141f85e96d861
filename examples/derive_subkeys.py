#!/usr/bin/env python3
"""Derive several subkeys from one master secret.

This example shows the usual pattern: build one stream per session from a
master secret and a session salt, then pull keys off it in a fixed order.
"""

import logging
import sys
from pathlib import Path

# Add the parent directory to the path so we can import hmac_entropy
sys.path.insert(0, str(Path(__file__).parent.parent))

from hmac_entropy import initialize, produce
from hmac_entropy.logging_config import setup_logging


def main() -> None:
    setup_logging(logging.DEBUG)

    master = bytes(64)
    stream = initialize(master, b"Hello World")

    enc_key = produce(stream, 32)
    mac_key = produce(stream, 32)
    nonce = produce(stream, 12)

    print(f"enc_key: {enc_key.hex()}")
    print(f"mac_key: {mac_key.hex()}")
    print(f"nonce:   {nonce.hex()}")
    print(f"computed {stream.produced_bytes} bytes, handed out {32 + 32 + 12}")


if __name__ == "__main__":
    main()
