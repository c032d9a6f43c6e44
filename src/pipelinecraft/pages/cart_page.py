"""Page object for the SauceDemo cart page."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playwright.async_api import Page


def remove_button(product_name: str) -> str:
    return f'//div[text()="{product_name}"]/ancestor::div[@class="cart_item"]//button'


class CartPage:
    CART_ITEM = ".cart_item"
    CHECKOUT_BUTTON = "#checkout"
    CONTINUE_SHOPPING_BUTTON = "#continue-shopping"
    ITEM_NAME = ".inventory_item_name"

    def __init__(self, page: Page) -> None:
        self.page = page

    async def get_cart_item_count(self) -> int:
        return await self.page.locator(self.CART_ITEM).count()

    async def proceed_to_checkout(self) -> None:
        await self.page.click(self.CHECKOUT_BUTTON)

    async def continue_shopping(self) -> None:
        await self.page.click(self.CONTINUE_SHOPPING_BUTTON)

    async def remove_product(self, product_name: str) -> None:
        await self.page.click(remove_button(product_name))

    async def get_product_names(self) -> list[str]:
        return await self.page.locator(self.ITEM_NAME).all_text_contents()
