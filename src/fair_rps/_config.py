# Area: Shared
"""
fair_rps._config — Game Configuration
=====================================

Move-set validation, the GameSettings model, and config loading
(JSON file, then environment variables).
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._core.enums import KeyPolicy
from ._core.keygen import MIN_KEY_BYTES
from .errors import InvalidMoveSetError

logger = logging.getLogger("fair_rps.config")

MIN_MOVES = 3

# Environment variable -> settings field
ENV_MAPPINGS = {
    "FAIR_RPS_KEY_POLICY": "key_policy",
    "FAIR_RPS_KEY_BYTES": "key_bytes",
    "FAIR_RPS_SEED": "seed",
    "FAIR_RPS_LOG_FILE": "log_file",
    "FAIR_RPS_LOG_LEVEL": "log_level",
    "FAIR_RPS_VERBOSE": "verbose",
}

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class GameSettings(BaseModel):
    """Validated runtime settings for one invocation."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    key_policy: KeyPolicy = KeyPolicy.TURN
    key_bytes: int = Field(default=MIN_KEY_BYTES, ge=MIN_KEY_BYTES)
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = "INFO"
    verbose: bool = False

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)


def validate_moves(moves: Sequence[str]) -> None:
    """
    Validate a move set before a game is created.

    Args:
        moves: Moves as given on the command line

    Raises:
        InvalidMoveSetError: If fewer than 3 moves, an even count, or duplicates
    """
    if len(moves) < MIN_MOVES:
        raise InvalidMoveSetError(
            moves,
            InvalidMoveSetError.TOO_FEW_MOVES,
            f"At least {MIN_MOVES} moves are required, got {len(moves)}.",
        )
    if len(moves) % 2 == 0:
        raise InvalidMoveSetError(
            moves,
            InvalidMoveSetError.EVEN_MOVE_COUNT,
            f"An odd number of moves is required, got {len(moves)}.",
        )
    if len(set(moves)) != len(moves):
        raise InvalidMoveSetError(
            moves,
            InvalidMoveSetError.DUPLICATE_MOVES,
            "Every move must be unique (comparison is case-sensitive).",
        )


def load_config(config_path: Optional[str]) -> Dict[str, Any]:
    """
    Load config from file, then override with environment variables.

    Raises:
        OSError: If the config path exists but cannot be read
        ValueError: If the file is not valid JSON or not a JSON object
    """
    config: Dict[str, Any] = {}

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config = json.load(f)
            if not isinstance(config, dict):
                raise ValueError(
                    f"{path} must contain a JSON object, got {type(config).__name__}"
                )
        else:
            logger.warning(f"Config file not found: {path}")

    for env_key, config_key in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = os.environ[env_key]

    return config


def build_settings(config: Dict[str, Any], overrides: Dict[str, Any]) -> GameSettings:
    """
    Merge CLI overrides into loaded config and validate.

    Overrides whose value is None are ignored.

    Raises:
        pydantic.ValidationError: If a value is out of range or malformed
    """
    merged = dict(config)
    merged.update({k: v for k, v in overrides.items() if v is not None})
    return GameSettings.model_validate(merged)
