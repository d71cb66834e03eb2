"""Base configuration settings."""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_FORMATS = ("console", "json")


class Settings(BaseSettings):
    """Application settings.

    Values are read from the environment (case-insensitive) and from an
    optional ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Health Ledger Contracts"
    environment: str = "development"
    log_level: str = "INFO"
    log_format: str = "console"

    # Contracts
    contract_owner: str = Field(
        default="contract-owner",
        description="Principal allowed to issue data sharing rewards",
    )
    data_sharing_reward: int = Field(
        default=100,
        description="Tokens credited to a patient for every shared data entry",
    )
    privileged_viewers: List[str] = Field(
        default_factory=list,
        description="Principals allowed to read any patient's wearable metrics",
    )

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Accept only the renderers setup_logging knows about."""
        v = v.lower()
        if v not in VALID_LOG_FORMATS:
            raise ValueError(
                f"log_format must be one of {', '.join(VALID_LOG_FORMATS)}, got {v!r}"
            )
        return v

    @field_validator("data_sharing_reward")
    @classmethod
    def validate_reward(cls, v: int) -> int:
        """Sharing data earns tokens, so the automatic reward cannot be negative."""
        if v < 0:
            raise ValueError("data_sharing_reward must not be negative")
        return v
