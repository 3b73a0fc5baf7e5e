from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Number of entries shown per section on the main screen
DEFAULT_SECTION_LIMIT = 5


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WOKE_", case_sensitive=False)

    # Catalogue
    SECTION_LIMIT: int = Field(default=DEFAULT_SECTION_LIMIT, ge=0, le=100)
    DATA_FILE: Path | None = None

    # HTTP
    ALLOWED_ORIGINS: str | None = "*"

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @property
    def cors_origins(self) -> List[str]:
        if not self.ALLOWED_ORIGINS:
            return []
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]


settings = Settings()
