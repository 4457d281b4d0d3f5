# Area: Core
"""
fair_rps._core.keygen — HMAC key generation
===========================================

Keys come from the OS CSPRNG via `secrets`, never from the move RNG.
"""

from __future__ import annotations
import logging
import secrets

from ..errors import EntropySourceError

logger = logging.getLogger("fair_rps.core.keygen")

MIN_KEY_BYTES = 32


def generate_key(num_bytes: int = MIN_KEY_BYTES) -> str:
    """
    Generate a fresh secret key as a lowercase hex string.

    Args:
        num_bytes: Number of random bytes (at least 32)

    Raises:
        ValueError: If num_bytes is below MIN_KEY_BYTES
        EntropySourceError: If the OS entropy source fails
    """
    if num_bytes < MIN_KEY_BYTES:
        raise ValueError(
            f"Key must be at least {MIN_KEY_BYTES} bytes, got {num_bytes}"
        )
    try:
        key = secrets.token_hex(num_bytes)
    except (OSError, NotImplementedError) as e:
        raise EntropySourceError(e) from e
    logger.debug(f"Generated {num_bytes * 8}-bit key")
    return key
