"""Polyglot configuration settings."""

import re
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
import structlog

logger = structlog.stdlib.get_logger().bind(component="config")

LANGUAGE_CODE_REGEX = re.compile(r"[a-z]{2}")


class PolyglotSettings(BaseSettings):
    """Dictionary engine configuration settings.

    Environment Variables:
        POLYGLOT_PREFERRED_LANGUAGE: Language selected as the engine default
            once the seed entries are loaded (default: en)
        POLYGLOT_OVERRIDE_POLICY: What an explicit override does when its
            language is only partly supported: 'raise' or 'warn'
            (default: raise)
    """

    PREFERRED_LANGUAGE: str = Field(
        default="en",
        alias="POLYGLOT_PREFERRED_LANGUAGE",
        description="Default language of a newly created engine",
    )
    OVERRIDE_POLICY: Literal["raise", "warn"] = Field(
        default="raise",
        alias="POLYGLOT_OVERRIDE_POLICY",
        description="Policy for overrides of partly supported languages",
    )

    @field_validator("PREFERRED_LANGUAGE", mode="before")
    @classmethod
    def _validate_preferred_language(cls, v):
        """Accept only two-letter lowercase codes."""
        if not isinstance(v, str) or not LANGUAGE_CODE_REGEX.fullmatch(v):
            logger.warning("invalid_preferred_language_setting", value=v)
            raise ValueError(f"Invalid language code '{v}'!")
        return v

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Polyglot configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    polyglot: PolyglotSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "polyglot": PolyglotSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
