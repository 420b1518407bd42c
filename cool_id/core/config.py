import logging
import os
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from cool_id.core.types import Size

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "COOL_ID_CONFIG_FILE"
DEFAULT_CONFIG_FILE = "cool_id.toml"


class GeneratorConfig(BaseModel):
    """Defaults used when a caller does not pick a size or count."""

    default_size: Size = Size.SHORT
    default_count: int = 1

    @field_validator("default_count")
    @classmethod
    def validate_default_count(cls, v: int) -> int:
        if v < 1:
            raise ValueError("default_count must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "text"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        valid_formats = ["json", "text"]
        if v not in valid_formats:
            raise ValueError(f"format must be one of {valid_formats}")
        return v


class Settings(BaseSettings):
    """Settings with nested configuration support."""

    model_config = SettingsConfigDict(
        env_prefix="COOL_ID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        validate_default=True,
        extra="ignore",
    )

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_file = os.environ.get(CONFIG_FILE_ENV, DEFAULT_CONFIG_FILE)
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=toml_file),
            file_secret_settings,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached Settings instance."""
    try:
        settings = Settings()
        return settings
    except Exception as e:
        logger.error(f"Failed to load configuration: {e}")
        raise
