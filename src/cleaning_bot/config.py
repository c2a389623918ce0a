"""Application configuration via pydantic-settings."""

from functools import lru_cache
from typing import Annotated

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_COMMAND_PREFIX = "!"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Built once at startup and passed explicitly to the components that need it.
    Instances are frozen.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Scheduling API
    api_base_url: str = "http://localhost:3000/api"
    api_key: str = ""
    api_timeout: float = 10.0

    # Bot behaviour
    authorized_numbers: Annotated[tuple[str, ...], NoDecode] = ()
    command_prefix: str = DEFAULT_COMMAND_PREFIX
    allowed_groups: Annotated[tuple[str, ...], NoDecode] = ()
    allow_direct_messages: bool = False

    # WhatsApp gateway (Evolution API)
    evolution_base_url: str = "http://localhost:8080"
    evolution_instance: str = "cleaning-bot"
    evolution_api_key: str = ""
    webhook_secret: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    @field_validator("authorized_numbers", "allowed_groups", mode="before")
    @classmethod
    def _split_comma_list(cls, value: object) -> object:
        """Accept "a, b,c" from the environment as ("a", "b", "c")."""
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, (list, tuple)):
            return tuple(str(item).strip() for item in value if str(item).strip())
        return value

    @field_validator("command_prefix")
    @classmethod
    def _default_empty_prefix(cls, value: str) -> str:
        return value or DEFAULT_COMMAND_PREFIX


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
