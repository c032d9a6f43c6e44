"""Page object for the SauceDemo login page."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pipelinecraft.config.settings import DEFAULT_BASE_URL

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)


class LoginPage:
    USERNAME_INPUT = "#user-name"
    PASSWORD_INPUT = "#password"
    LOGIN_BUTTON = "#login-button"
    ERROR_MESSAGE = '[data-test="error"]'

    def __init__(self, page: Page, base_url: str = DEFAULT_BASE_URL) -> None:
        self.page = page
        self.base_url = base_url

    async def navigate(self) -> None:
        logger.debug(f"Opening login page at {self.base_url}")
        await self.page.goto(self.base_url)

    async def login(self, username: str, password: str) -> None:
        logger.debug(f"Logging in as {username}")
        await self.page.fill(self.USERNAME_INPUT, username)
        await self.page.fill(self.PASSWORD_INPUT, password)
        await self.page.click(self.LOGIN_BUTTON)
        await self.page.wait_for_load_state("networkidle")

    async def get_error_message(self) -> str:
        return await self.page.text_content(self.ERROR_MESSAGE) or ""

    async def is_error_visible(self) -> bool:
        return await self.page.is_visible(self.ERROR_MESSAGE)
