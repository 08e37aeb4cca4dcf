"""
Configuration model for spellforge.
"""

import logging
import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

logger = logging.getLogger("spellforge")

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class SpellforgeConfig(BaseModel):
    """Settings for extraction thresholds, data location and randomness."""

    data_file: Path | None = Field(
        default=None,
        description="YAML spell data file; the bundled data when unset"
    )
    match_threshold: int = Field(
        default=3,
        ge=1,
        description="Minimum matcher score for a component to count as found"
    )
    element_match_threshold: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Minimum character-overlap score for element mapping"
    )
    seed: int | None = Field(
        default=None,
        description="Seed for template and random component selection"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level name"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is a standard level name."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(sorted(VALID_LOG_LEVELS))}")
        return level


def load_config(**overrides) -> SpellforgeConfig:
    """Build a config from the environment (and a .env file, if present).

    Reads SPELLFORGE_DATA_FILE, SPELLFORGE_MATCH_THRESHOLD, SPELLFORGE_SEED
    and SPELLFORGE_LOG_LEVEL. Keyword overrides that are not None take
    precedence over the environment.

    Raises:
        ConfigError: If a value fails validation
    """
    if not load_dotenv(find_dotenv(usecwd=True)):
        logger.debug("No .env file found, using process environment only")

    values: dict = {}
    env_map = {
        "data_file": "SPELLFORGE_DATA_FILE",
        "match_threshold": "SPELLFORGE_MATCH_THRESHOLD",
        "seed": "SPELLFORGE_SEED",
        "log_level": "SPELLFORGE_LOG_LEVEL",
    }
    for field, env_var in env_map.items():
        raw = os.getenv(env_var)
        if raw:
            values[field] = raw

    values.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return SpellforgeConfig(**values)
    except ValidationError as e:
        raise ConfigError(
            "Invalid spellforge configuration",
            details={"errors": e.errors(include_url=False)},
        ) from e


__all__ = ["SpellforgeConfig", "load_config"]
