"""Page object for the SauceDemo inventory page."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)

# Visible label -> value of the sort <select>.
SORT_OPTIONS = {
    "Name (A to Z)": "az",
    "Name (Z to A)": "za",
    "Price (low to high)": "lohi",
    "Price (high to low)": "hilo",
}


def add_to_cart_button(product_name: str) -> str:
    return (
        f'//div[text()="{product_name}"]/ancestor::div[@class="inventory_item"]'
        '//button[contains(@class, "btn_inventory")]'
    )


class ProductsPage:
    PAGE_TITLE = ".title"
    CART_BADGE = ".shopping_cart_badge"
    CART_LINK = ".shopping_cart_link"
    SORT_SELECT = ".product_sort_container"
    ITEM_NAME = ".inventory_item_name"
    ITEM_PRICE = ".inventory_item_price"

    def __init__(self, page: Page) -> None:
        self.page = page

    async def is_loaded(self) -> bool:
        return await self.page.is_visible(self.PAGE_TITLE)

    async def get_title(self) -> str:
        return await self.page.text_content(self.PAGE_TITLE) or ""

    async def add_product_to_cart(self, product_name: str) -> None:
        logger.debug(f"Adding {product_name!r} to cart")
        button = self.page.locator(add_to_cart_button(product_name))
        await button.wait_for(state="visible", timeout=10000)
        await button.click()

    async def get_cart_item_count(self) -> int:
        badge = await self.page.text_content(self.CART_BADGE)
        return int(badge) if badge else 0

    async def go_to_cart(self) -> None:
        await self.page.click(self.CART_LINK)

    async def sort_products(self, option: str) -> None:
        """Sort by a visible label ("Name (A to Z)") or a raw value ("az")."""
        value = SORT_OPTIONS.get(option, option)
        dropdown = self.page.locator(self.SORT_SELECT)
        await dropdown.wait_for(state="visible", timeout=10000)
        await dropdown.select_option(value)

    async def get_first_product_name(self) -> str:
        return await self.page.text_content(self.ITEM_NAME) or ""

    async def get_all_product_names(self) -> list[str]:
        return await self.page.locator(self.ITEM_NAME).all_text_contents()

    async def get_all_product_prices(self) -> list[float]:
        prices = await self.page.locator(self.ITEM_PRICE).all_text_contents()
        return [float(price.replace("$", "")) for price in prices]
