"""Configuration settings and loading."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationInfo, field_validator
from pydantic_settings import (
    BaseSettings,
    DotEnvSettingsSource,
    EnvSettingsSource,
    SettingsConfigDict,
)

from pipelinecraft.errors import ConfigValidationError, ErrorContext

ENV_PREFIX = "PIPELINECRAFT_"

DEFAULT_BASE_URL = "https://www.saucedemo.com"
DEFAULT_API_URL = "https://dummyjson.com"


@dataclass(frozen=True)
class Credentials:
    """A username/password pair."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"


# Public demo accounts. Tasks fall back to these values, never to the environment.
DEFAULT_SHOPPER_CREDENTIALS = Credentials("standard_user", "secret_sauce")
DEFAULT_API_CREDENTIALS = Credentials("emilys", "emilyspass")

# Records known to exist on DummyJSON.
TEST_USER_IDS = {
    "with_carts": 33,
    "without_carts": 1,
}
TEST_RESOURCE_IDS = {
    "cart": 1,
    "product": 1,
    "invalid_product": 99999,
}

VALID_BROWSERS = ("chromium", "firefox", "webkit")


class Settings(BaseSettings):
    """Configuration for the PipelineCraft suite."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = DEFAULT_BASE_URL
    api_url: str = DEFAULT_API_URL
    username: str = DEFAULT_SHOPPER_CREDENTIALS.username
    password: str = DEFAULT_SHOPPER_CREDENTIALS.password
    api_username: str = DEFAULT_API_CREDENTIALS.username
    api_password: str = DEFAULT_API_CREDENTIALS.password
    browser: str = "chromium"
    headless: bool = True
    timeout_ms: int = 30000
    api_timeout: float = 15.0
    slow_mo: int = 0
    report_dir: str = "reports"
    verbose: bool = False

    @field_validator("base_url", "api_url", mode="before")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not str(v).startswith(("http://", "https://")):
            raise ConfigValidationError(
                message=f"URL must start with http:// or https://, got {v!r}",
                field="url",
                value=v,
                context=ErrorContext(extra={"expected_prefix": "https://"}),
            )
        return str(v).rstrip("/")

    @field_validator("browser", mode="before")
    @classmethod
    def validate_browser(cls, v: str) -> str:
        if v not in VALID_BROWSERS:
            raise ConfigValidationError(
                message=f"Invalid browser: {v!r}. Valid: {list(VALID_BROWSERS)}",
                field="browser",
                value=v,
                context=ErrorContext(extra={"valid_browsers": list(VALID_BROWSERS)}),
            )
        return v

    @field_validator("timeout_ms", "slow_mo")
    @classmethod
    def validate_non_negative(cls, v: int, info: ValidationInfo) -> int:
        if v < 0:
            raise ConfigValidationError(
                message=f"{info.field_name} must be a non-negative number of milliseconds, got {v}",
                field=info.field_name,
                value=v,
            )
        return v

    @property
    def shopper_credentials(self) -> Credentials:
        return Credentials(self.username, self.password)

    @property
    def api_credentials(self) -> Credentials:
        return Credentials(self.api_username, self.api_password)

    def masked(self) -> dict[str, Any]:
        """Settings as a dict with passwords hidden, for display."""
        data = self.model_dump()
        for key in ("password", "api_password"):
            data[key] = "***"
        return data


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from file and environment.

    Priority: PIPELINECRAFT_* env vars > PIPELINECRAFT_* entries in .env >
    legacy env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}

    config_data.update(_get_env_overrides())

    # Explicit init values win over the env and .env sources, so drop anything
    # the prefixed variables already set.
    prefixed = {**DotEnvSettingsSource(Settings)(), **EnvSettingsSource(Settings)()}
    for key in prefixed:
        config_data.pop(key, None)

    return Settings(**config_data)


def _parse_bool(value: str) -> bool:
    return value.lower() in ("true", "1", "yes")


def _get_env_overrides() -> dict[str, Any]:
    """Read the unprefixed variables (BASE_URL, API_URL, HEADLESS, ...)."""
    overrides: dict[str, Any] = {}

    env_mappings = {
        "BASE_URL": "base_url",
        "API_URL": "api_url",
        "USERNAME": "username",
        "PASSWORD": "password",
        "API_USERNAME": "api_username",
        "API_PASSWORD": "api_password",
        "HEADLESS": ("headless", _parse_bool),
        "TIMEOUT": ("timeout_ms", int),
        "SLOW_MO": ("slow_mo", int),
    }

    for env_key, config_key in env_mappings.items():
        value = os.environ.get(env_key)
        if value is not None:
            if isinstance(config_key, tuple):
                key, converter = config_key
                overrides[key] = converter(value)
            else:
                overrides[config_key] = value

    return overrides
