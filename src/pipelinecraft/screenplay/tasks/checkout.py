"""Checkout task - completes the purchase from the inventory page."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipelinecraft.pages import CartPage, CheckoutPage, ProductsPage, parse_price
from pipelinecraft.screenplay.actors.base import Task
from pipelinecraft.screenplay.actors.shopper import CheckoutInfo, Shopper

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


@dataclass(frozen=True)
class Checkout(Task):
    """Go to the cart, check out, fill the buyer details and finish.

    A Shopper remembers the checkout details and the order total shown on
    the overview step.
    """

    info: CheckoutInfo

    @classmethod
    def with_information(cls, first_name: str, last_name: str, postal_code: str) -> Checkout:
        return cls(CheckoutInfo(first_name, last_name, postal_code))

    async def perform_as(self, actor: Actor) -> None:
        page = actor.page

        await ProductsPage(page).go_to_cart()
        await CartPage(page).proceed_to_checkout()

        checkout_page = CheckoutPage(page)
        await checkout_page.fill_information(
            self.info.first_name, self.info.last_name, self.info.postal_code
        )
        await checkout_page.continue_()

        if isinstance(actor, Shopper):
            actor.remember_checkout_info(
                self.info.first_name, self.info.last_name, self.info.postal_code
            )
            total = parse_price(await checkout_page.get_total_price())
            if total is not None:
                actor.remember_total_price(total)

        await checkout_page.finish()

    def __str__(self) -> str:
        return "check out"
