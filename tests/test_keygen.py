# Area: Core Tests
"""Tests for session key generation."""

import re

import pytest

from fair_rps._core import keygen
from fair_rps._core.keygen import MIN_KEY_BYTES, generate_key
from fair_rps.errors import EntropySourceError


class TestGenerateKey:
    """Tests for generate_key()."""

    def test_default_is_256_bits_hex(self):
        """Default key is 32 bytes rendered as 64 lowercase hex chars."""
        key = generate_key()
        assert MIN_KEY_BYTES == 32
        assert re.fullmatch(r"[0-9a-f]{64}", key)

    def test_larger_keys(self):
        assert len(generate_key(64)) == 128

    def test_rejects_short_keys(self):
        """Keys below 256 bits are refused."""
        with pytest.raises(ValueError):
            generate_key(16)

    def test_keys_are_fresh(self):
        """Consecutive keys differ."""
        keys = {generate_key() for _ in range(50)}
        assert len(keys) == 50

    def test_entropy_failure_raises(self, monkeypatch):
        """An OS entropy failure surfaces as EntropySourceError."""
        def broken(num_bytes):
            raise OSError("no randomness")

        monkeypatch.setattr(keygen.secrets, "token_hex", broken)
        with pytest.raises(EntropySourceError) as exc_info:
            generate_key()
        assert isinstance(exc_info.value.cause, OSError)
