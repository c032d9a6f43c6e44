"""Business-level tasks built from page objects and API calls."""

from pipelinecraft.screenplay.tasks.add_to_cart import AddToCart
from pipelinecraft.screenplay.tasks.authenticate_user import AuthenticateUser
from pipelinecraft.screenplay.tasks.checkout import Checkout
from pipelinecraft.screenplay.tasks.get_products import GetProducts
from pipelinecraft.screenplay.tasks.login import Login
from pipelinecraft.screenplay.tasks.manage_cart import CartItem, CartOperation, ManageCart

__all__ = [
    "Login",
    "AddToCart",
    "Checkout",
    "AuthenticateUser",
    "GetProducts",
    "ManageCart",
    "CartItem",
    "CartOperation",
]
