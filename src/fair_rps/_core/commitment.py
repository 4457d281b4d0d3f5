# Area: Core
"""
fair_rps._core.commitment — HMAC commitments
============================================

The computer commits to its move with HMAC-SHA-256 keyed by the
game's current key. The key is used as the UTF-8 bytes of its hex string,
so anyone can re-check a tag with a generic HMAC tool by pasting the
key as text.
"""

from __future__ import annotations
import hashlib
import hmac


def calculate_commitment(key: str, move: str) -> str:
    """Return the lowercase hex HMAC-SHA-256 of `move` under `key`."""
    return hmac.new(
        key.encode("utf-8"),
        move.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()


def verify_commitment(key: str, move: str, commitment: str) -> bool:
    """Check a revealed (key, move) pair against a previously shown tag."""
    computed = calculate_commitment(key, move)
    return hmac.compare_digest(computed, commitment.strip().lower())
