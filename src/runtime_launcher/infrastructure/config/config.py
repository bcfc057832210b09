"""
Environment configuration for runtime-launcher.

Loads configuration from environment variables using pydantic-settings.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LAUNCHER_",
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )

    # Logging Configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_format: Literal["text", "json"] = Field(
        default="text", description="Logging format - text for human-readable, json for structured logs"
    )

    # Runtime Configuration
    runtime_home: Optional[str] = Field(
        default=None,
        description="Runtime home whose ../bin is searched for the executable",
    )
    java_home: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("JAVA_HOME"),
        description="JDK or JRE installation; its bin directory is searched for the executable",
    )
    runtime_command: str = Field(
        default="java", min_length=1, description="Bare runtime command name, resolved via PATH"
    )

    # In-process Configuration
    entry_function: str = Field(
        default="main", min_length=1, description="Entry point function looked up on loaded modules"
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
