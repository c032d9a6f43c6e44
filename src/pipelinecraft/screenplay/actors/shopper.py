"""Shopper - an actor browsing the SauceDemo storefront."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipelinecraft.screenplay.abilities import BrowseTheWeb
from pipelinecraft.screenplay.actors.base import Actor
from pipelinecraft.screenplay.memory import MemoryKey

if TYPE_CHECKING:
    from playwright.async_api import Page


@dataclass(frozen=True)
class CheckoutInfo:
    first_name: str
    last_name: str
    postal_code: str


SELECTED_PRODUCTS: MemoryKey[list[str]] = MemoryKey("selected_products")
CHECKOUT_INFO: MemoryKey[CheckoutInfo] = MemoryKey("checkout_info")
TOTAL_PRICE: MemoryKey[float] = MemoryKey("total_price")


class Shopper(Actor):
    """A shopper with typed memory for cart and checkout details."""

    def __init__(self, name: str, page: Page) -> None:
        super().__init__(name, page=page)
        self.grant(BrowseTheWeb())

    @classmethod
    def named(cls, name: str, page: Page) -> Shopper:  # type: ignore[override]
        return cls(name, page)

    def remember_selected_products(self, products: list[str]) -> None:
        self.remember(SELECTED_PRODUCTS, list(products))

    def recall_selected_products(self) -> list[str]:
        return self.recall(SELECTED_PRODUCTS)

    def remember_checkout_info(self, first_name: str, last_name: str, postal_code: str) -> None:
        self.remember(CHECKOUT_INFO, CheckoutInfo(first_name, last_name, postal_code))

    def recall_checkout_info(self) -> CheckoutInfo:
        return self.recall(CHECKOUT_INFO)

    def remember_total_price(self, price: float) -> None:
        self.remember(TOTAL_PRICE, price)

    def recall_total_price(self) -> float:
        return self.recall(TOTAL_PRICE)
