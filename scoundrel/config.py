"""Validated session configuration for Scoundrel."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)


class GameConfig(BaseModel):
    seed: Optional[int] = Field(None, description="Shuffle seed. A time-based seed is used when omitted.")
    log_tail: int = Field(10, ge=0, description="Number of adventure-log lines included in views.")

    @field_validator("seed")
    @classmethod
    def ensure_non_negative_seed(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise ValueError("Seed must be non-negative.")
        return value


def load_config(path: Union[str, Path]) -> GameConfig:
    """Read a JSON configuration file into a :class:`GameConfig`."""
    config_path = Path(path)
    try:
        payload = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ValueError(f"Could not read config from {config_path}: {exc}") from exc
    config = GameConfig.model_validate(payload)
    logger.info("Loaded game config from %s", config_path)
    return config
