"""AddToCart task - adds products from the inventory page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipelinecraft.pages import ProductsPage
from pipelinecraft.screenplay.actors.base import Task
from pipelinecraft.screenplay.actors.shopper import SELECTED_PRODUCTS, Shopper

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


@dataclass(frozen=True)
class AddToCart(Task):
    """Click "Add to cart" for each named product, in order.

    A Shopper also remembers the products it has selected so far.
    """

    product_names: tuple[str, ...]

    @classmethod
    def product(cls, product_name: str) -> AddToCart:
        return cls((product_name,))

    @classmethod
    def products(cls, *product_names: str) -> AddToCart:
        return cls(tuple(product_names))

    async def perform_as(self, actor: Actor) -> None:
        products_page = ProductsPage(actor.page)

        for product_name in self.product_names:
            await products_page.add_product_to_cart(product_name)

        if isinstance(actor, Shopper):
            selected = actor.recall(SELECTED_PRODUCTS) if actor.has_remembered(SELECTED_PRODUCTS) else []
            actor.remember_selected_products([*selected, *self.product_names])

    def __str__(self) -> str:
        return f"add {', '.join(self.product_names)} to the cart"
