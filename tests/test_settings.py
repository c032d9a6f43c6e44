"""Tests for settings loading and validation."""

from __future__ import annotations

import pytest

from pipelinecraft.config import (
    DEFAULT_API_CREDENTIALS,
    DEFAULT_SHOPPER_CREDENTIALS,
    Credentials,
    Settings,
    load_settings,
)
from pipelinecraft.errors import ConfigValidationError, ErrorCode

LEGACY_VARS = (
    "BASE_URL",
    "API_URL",
    "USERNAME",
    "PASSWORD",
    "API_USERNAME",
    "API_PASSWORD",
    "HEADLESS",
    "TIMEOUT",
    "SLOW_MO",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate each test from the developer's shell and any .env file."""
    monkeypatch.chdir(tmp_path)
    for name in LEGACY_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"PIPELINECRAFT_{name}", raising=False)
    monkeypatch.delenv("PIPELINECRAFT_TIMEOUT_MS", raising=False)
    monkeypatch.delenv("PIPELINECRAFT_BROWSER", raising=False)


class TestDefaults:
    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings.base_url == "https://www.saucedemo.com"
        assert settings.api_url == "https://dummyjson.com"
        assert settings.shopper_credentials == DEFAULT_SHOPPER_CREDENTIALS
        assert settings.api_credentials == DEFAULT_API_CREDENTIALS
        assert settings.headless is True
        assert settings.browser == "chromium"

    def test_credentials_repr_hides_password(self) -> None:
        assert "secret_sauce" not in repr(Credentials("standard_user", "secret_sauce"))

    def test_masked(self) -> None:
        masked = Settings().masked()

        assert masked["password"] == "***"
        assert masked["api_password"] == "***"
        assert masked["username"] == "standard_user"


class TestLoading:
    def test_yaml_file(self, tmp_path) -> None:
        path = tmp_path / "pipelinecraft.yaml"
        path.write_text("api_url: http://localhost:3000/\nheadless: false\ntimeout_ms: 5000\n")

        settings = load_settings(path)

        assert settings.api_url == "http://localhost:3000"
        assert settings.headless is False
        assert settings.timeout_ms == 5000

    def test_missing_file_uses_defaults(self, tmp_path) -> None:
        settings = load_settings(tmp_path / "absent.yaml")

        assert settings.base_url == "https://www.saucedemo.com"

    def test_legacy_env_overrides_file(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "pipelinecraft.yaml"
        path.write_text("base_url: https://file.example\n")
        monkeypatch.setenv("BASE_URL", "https://env.example")
        monkeypatch.setenv("HEADLESS", "false")
        monkeypatch.setenv("TIMEOUT", "1000")
        monkeypatch.setenv("USERNAME", "problem_user")

        settings = load_settings(path)

        assert settings.base_url == "https://env.example"
        assert settings.headless is False
        assert settings.timeout_ms == 1000
        assert settings.username == "problem_user"

    def test_prefixed_env_wins(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "pipelinecraft.yaml"
        path.write_text("api_url: https://file.example\n")
        monkeypatch.setenv("API_URL", "https://legacy.example")
        monkeypatch.setenv("PIPELINECRAFT_API_URL", "https://prefixed.example")

        settings = load_settings(path)

        assert settings.api_url == "https://prefixed.example"

    def test_dotenv_prefixed_value_wins_over_legacy_and_file(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "pipelinecraft.yaml"
        path.write_text("api_url: https://file.example\nheadless: false\n")
        (tmp_path / ".env").write_text(
            "PIPELINECRAFT_API_URL=https://dotenv.example\nPIPELINECRAFT_HEADLESS=true\n"
        )
        monkeypatch.setenv("API_URL", "https://legacy.example")

        settings = load_settings(path)

        assert settings.api_url == "https://dotenv.example"
        assert settings.headless is True

    def test_real_env_wins_over_dotenv(self, tmp_path, monkeypatch) -> None:
        (tmp_path / ".env").write_text("PIPELINECRAFT_API_URL=https://dotenv.example\n")
        monkeypatch.setenv("PIPELINECRAFT_API_URL", "https://prefixed.example")

        assert load_settings().api_url == "https://prefixed.example"


class TestValidation:
    def test_bad_url(self) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            Settings(api_url="dummyjson.com")

        assert exc_info.value.error_code == ErrorCode.INVALID_CONFIG

    def test_bad_browser(self) -> None:
        with pytest.raises(ConfigValidationError, match="Invalid browser"):
            Settings(browser="netscape")

    def test_negative_timeout(self) -> None:
        with pytest.raises(ConfigValidationError):
            Settings(timeout_ms=-1)

    @pytest.mark.parametrize("field", ["timeout_ms", "slow_mo"])
    def test_negative_value_names_field(self, field: str) -> None:
        with pytest.raises(ConfigValidationError) as exc_info:
            Settings(**{field: -1})

        assert exc_info.value.field == field
        assert exc_info.value.value == -1
        assert field in str(exc_info.value)

    def test_env_value_is_validated(self, monkeypatch) -> None:
        monkeypatch.setenv("PIPELINECRAFT_BROWSER", "netscape")

        with pytest.raises(ConfigValidationError):
            load_settings()
