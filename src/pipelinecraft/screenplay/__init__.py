"""Screenplay layer: actors, abilities, tasks, questions and memory."""

from pipelinecraft.screenplay.abilities import Ability, AbilityKind, BrowseTheWeb, CallAnApi
from pipelinecraft.screenplay.actors import (
    Actor,
    ApiUser,
    CheckoutInfo,
    Question,
    Shopper,
    Task,
)
from pipelinecraft.screenplay.interactions import ApiRequest, Click, Fill, Navigate, Wait
from pipelinecraft.screenplay.memory import (
    AUTH_RESPONSE,
    CART_DATA,
    LAST_API_RESPONSE,
    PRODUCTS,
    PRODUCTS_RESPONSE,
    Memory,
    MemoryKey,
)
from pipelinecraft.screenplay.questions import ApiResponse, PageElement, Remembered
from pipelinecraft.screenplay.tasks import (
    AddToCart,
    AuthenticateUser,
    CartItem,
    Checkout,
    GetProducts,
    Login,
    ManageCart,
)

__all__ = [
    # Core
    "Actor",
    "Task",
    "Question",
    "Ability",
    "AbilityKind",
    "BrowseTheWeb",
    "CallAnApi",
    "Memory",
    "MemoryKey",
    # Actors
    "Shopper",
    "CheckoutInfo",
    "ApiUser",
    # Memory slots
    "LAST_API_RESPONSE",
    "AUTH_RESPONSE",
    "CART_DATA",
    "PRODUCTS",
    "PRODUCTS_RESPONSE",
    # Interactions
    "ApiRequest",
    "Click",
    "Fill",
    "Navigate",
    "Wait",
    # Tasks
    "Login",
    "AddToCart",
    "Checkout",
    "AuthenticateUser",
    "GetProducts",
    "ManageCart",
    "CartItem",
    # Questions
    "ApiResponse",
    "PageElement",
    "Remembered",
]
