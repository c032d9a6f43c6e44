"""Page object for the SauceDemo checkout steps."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playwright.async_api import Page

_PRICE_PATTERN = re.compile(r"\$?(\d+(?:\.\d+)?)")


def parse_price(label: str) -> float | None:
    """Extract the amount from a label like "Total: $32.39"."""
    match = _PRICE_PATTERN.search(label)
    return float(match.group(1)) if match else None


class CheckoutPage:
    FIRST_NAME_INPUT = "#first-name"
    LAST_NAME_INPUT = "#last-name"
    POSTAL_CODE_INPUT = "#postal-code"
    CONTINUE_BUTTON = "#continue"
    FINISH_BUTTON = "#finish"
    COMPLETE_HEADER = ".complete-header"
    TOTAL_LABEL = ".summary_total_label"

    def __init__(self, page: Page) -> None:
        self.page = page

    async def fill_information(self, first_name: str, last_name: str, postal_code: str) -> None:
        await self.page.fill(self.FIRST_NAME_INPUT, first_name)
        await self.page.fill(self.LAST_NAME_INPUT, last_name)
        await self.page.fill(self.POSTAL_CODE_INPUT, postal_code)

    async def continue_(self) -> None:
        await self.page.click(self.CONTINUE_BUTTON)

    async def finish(self) -> None:
        await self.page.click(self.FINISH_BUTTON)

    async def get_completion_message(self) -> str:
        return await self.page.text_content(self.COMPLETE_HEADER) or ""

    async def get_total_price(self) -> str:
        return await self.page.text_content(self.TOTAL_LABEL) or ""

    async def is_order_complete(self) -> bool:
        return await self.page.is_visible(self.COMPLETE_HEADER)
