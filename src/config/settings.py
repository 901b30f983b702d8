# src/config/settings.py — v1
"""Typed configuration loaded from environment / .env via pydantic-settings.

Every variable is prefixed with HTMLVALID_, e.g. HTMLVALID_USER_AGENT.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USER_AGENT = "HTMLValid"


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="HTMLVALID_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Program ===
    program_name: str = "HTMLValid"

    # === Validator endpoints ===
    css_validator_url: str = "http://jigsaw.w3.org/css-validator/validator"
    html_validator_url: str = "http://validator.w3.org/check"
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout_seconds: float = 30.0
    report_source: bool = True

    # === Batch ===
    confirm_threshold: int = 5
    errors_warnings_only: bool = True

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("user_agent", mode="before")
    @classmethod
    def default_blank_user_agent(cls, v: object) -> object:  # noqa: N805
        """Blank or whitespace-only agents fall back to the default."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return DEFAULT_USER_AGENT
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        if self.request_timeout_seconds <= 0:
            errors.append("REQUEST_TIMEOUT_SECONDS must be > 0")

        if self.confirm_threshold < 0:
            errors.append("CONFIRM_THRESHOLD must be >= 0")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if not self.user_agent.isascii():
            errors.append(f"USER_AGENT must be ASCII, got {self.user_agent!r}")

        for name in ("css_validator_url", "html_validator_url"):
            url = getattr(self, name)
            if not url.startswith(("http://", "https://")):
                errors.append(f"{name.upper()} must be an http(s) URL, got {url!r}")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from the environment with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
