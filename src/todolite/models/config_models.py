"""Configuration models for todolite."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class StorageConfig(BaseModel):
    """Where the key-value store lives."""

    path: str | None = Field(
        default=None,
        description="Override for the storage JSON file (default: user data dir)",
    )


class UIConfig(BaseModel):
    """UI configuration."""

    alert_seconds: float = Field(
        default=3.0, description="Seconds before an alert banner hides itself"
    )
    default_theme: str | None = Field(
        default=None, description="Theme applied when none has been saved yet"
    )

    @field_validator("alert_seconds")
    @classmethod
    def validate_alert_seconds(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("alert_seconds must be positive")
        return v


class AppConfig(BaseModel):
    """Main todolite configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    ui: UIConfig = Field(default_factory=UIConfig)
