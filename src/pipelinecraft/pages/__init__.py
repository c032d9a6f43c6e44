"""Page objects for the SauceDemo storefront."""

from pipelinecraft.pages.cart_page import CartPage
from pipelinecraft.pages.checkout_page import CheckoutPage, parse_price
from pipelinecraft.pages.login_page import LoginPage
from pipelinecraft.pages.products_page import SORT_OPTIONS, ProductsPage

__all__ = [
    "LoginPage",
    "ProductsPage",
    "CartPage",
    "CheckoutPage",
    "SORT_OPTIONS",
    "parse_price",
]
