"""Runtime configuration, read from environment variables (with defaults that work out of the box)."""

import logging
import os
from typing import Mapping, Self

from pydantic import BaseModel, Field, ValidationError

from src.core.exceptions import InvalidRequestError

ENV_PREFIX = "FAMILY_MATCH_"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseModel):
    database_url: str = "sqlite:///family_match.db"
    reveal_delay_ms: int = Field(default=1000, ge=0)
    leaderboard_size: int = Field(default=10, ge=1)
    log_level: str = "WARNING"

    @property
    def reveal_delay_seconds(self) -> float:
        return self.reveal_delay_ms / 1000

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Self:
        """Pick up FAMILY_MATCH_<FIELD> overrides. Unknown variables are ignored."""
        environ = os.environ if environ is None else environ
        overrides = {
            name: environ[ENV_PREFIX + name.upper()]
            for name in cls.model_fields
            if ENV_PREFIX + name.upper() in environ
        }
        try:
            return cls(**overrides)
        except ValidationError as error:
            raise InvalidRequestError(f"Invalid configuration: {error}") from error


def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(level: str | int = "WARNING") -> None:
    """Attach a stream handler to the root logger unless one exists, and set the level (safe to call more than once)."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
