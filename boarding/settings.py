"""
Command-line settings using pydantic-settings.

Only the CLI reads these; the pipeline functions take explicit arguments.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OUTPUT_FORMATS = ("table", "json")


class Settings(BaseSettings):
    """
    CLI settings loaded from BOARDING_* environment variables.

    Command-line flags override these.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOARDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    output_format: str = Field(
        default="table",
        description="How the boarding sequence is printed: 'table' or 'json'",
    )
    strict: bool = Field(
        default=True,
        description="Refuse to print a sequence when validation reports problems",
    )

    @field_validator("output_format", mode="after")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate and normalize output_format."""
        v = v.lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"Invalid BOARDING_OUTPUT_FORMAT: {v}. Must be 'table' or 'json'")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
