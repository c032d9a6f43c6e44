"""Configuration for PipelineCraft."""

from pipelinecraft.config.settings import (
    DEFAULT_API_CREDENTIALS,
    DEFAULT_API_URL,
    DEFAULT_BASE_URL,
    DEFAULT_SHOPPER_CREDENTIALS,
    TEST_RESOURCE_IDS,
    TEST_USER_IDS,
    Credentials,
    Settings,
    load_settings,
)

__all__ = [
    "Settings",
    "Credentials",
    "load_settings",
    "DEFAULT_SHOPPER_CREDENTIALS",
    "DEFAULT_API_CREDENTIALS",
    "DEFAULT_BASE_URL",
    "DEFAULT_API_URL",
    "TEST_USER_IDS",
    "TEST_RESOURCE_IDS",
]
