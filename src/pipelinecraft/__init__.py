"""PipelineCraft - Screenplay-pattern test suite.

Actors with abilities perform tasks and ask questions against the SauceDemo
storefront (Playwright) and the DummyJSON API (httpx).

Quick Start:
    from pipelinecraft import ApiClient, ApiUser, AuthenticateUser, ApiResponse

    async with ApiClient("https://dummyjson.com") as api:
        emily = ApiUser.named("Emily", api)
        await emily.attempts_to(AuthenticateUser.as_default_user())
        assert await emily.asks(ApiResponse.status()) == 200
"""

from __future__ import annotations

from pipelinecraft.config import Credentials, Settings, load_settings
from pipelinecraft.errors import (
    MissingAbilityError,
    MissingRequiredParameterError,
    PipelineCraftError,
    UnknownMemoryKeyError,
    UpstreamFailureError,
)
from pipelinecraft.http import ApiClient, HTTPResponse
from pipelinecraft.screenplay import (
    Ability,
    AbilityKind,
    Actor,
    AddToCart,
    ApiRequest,
    ApiResponse,
    ApiUser,
    AuthenticateUser,
    BrowseTheWeb,
    CallAnApi,
    CartItem,
    Checkout,
    Click,
    Fill,
    GetProducts,
    Login,
    ManageCart,
    MemoryKey,
    Navigate,
    PageElement,
    Question,
    Remembered,
    Shopper,
    Task,
    Wait,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Actor",
    "Task",
    "Question",
    "Ability",
    "AbilityKind",
    "BrowseTheWeb",
    "CallAnApi",
    "MemoryKey",
    "Shopper",
    "ApiUser",
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
    # Handles
    "ApiClient",
    "HTTPResponse",
    # Config
    "Settings",
    "Credentials",
    "load_settings",
    # Errors
    "PipelineCraftError",
    "MissingAbilityError",
    "UnknownMemoryKeyError",
    "MissingRequiredParameterError",
    "UpstreamFailureError",
]
