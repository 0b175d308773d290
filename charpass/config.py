"""
config.py: runtime settings and logging setup.

Settings come from the environment (prefix ``CHARPASS_``) or a local
``.env`` file, with defaults that suit interactive use:

    CHARPASS_MAX_TRIALS=200
    CHARPASS_FAILURE_TOLERANCE=1e-9
    CHARPASS_RANDOM_REFILL_BYTES=256
    CHARPASS_LOG_LEVEL=WARNING
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LOGGER_NAME = "charpass"


class Settings(BaseSettings):
    """Tunable knobs of the generator.

    Attributes:
        MAX_TRIALS: Attempts allowed before giving up on a recipe with
            requirements.
        FAILURE_TOLERANCE: Largest acceptable chance that all attempts fail.
            Recipes above it are refused before sampling.
        RANDOM_REFILL_BYTES: How many secure random bytes the sampler pulls
            per refill.
        LOG_LEVEL: Level used by configure_logging() when none is given.
    """

    MAX_TRIALS: int = Field(200, ge=1)
    FAILURE_TOLERANCE: float = Field(1e-9, ge=0.0, le=1.0)
    RANDOM_REFILL_BYTES: int = Field(256, ge=4)
    LOG_LEVEL: str = "WARNING"

    model_config = SettingsConfigDict(
        env_prefix="CHARPASS_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger (once) and set its level.

    Library code only logs through module loggers; applications and demos
    call this to actually see the output.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )
        logger.addHandler(handler)
    return logger


__all__ = [
    "LOGGER_NAME",
    "Settings",
    "settings",
    "configure_logging",
]
