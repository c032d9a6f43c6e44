"""ApiUser - an actor talking to the DummyJSON API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pipelinecraft.errors import NotAuthenticatedError
from pipelinecraft.screenplay.abilities import CallAnApi
from pipelinecraft.screenplay.actors.base import Actor
from pipelinecraft.screenplay.memory import PRODUCTS, MemoryKey

if TYPE_CHECKING:
    from pipelinecraft.http import ApiClient

AUTH_TOKEN: MemoryKey[str] = MemoryKey("auth_token")
REFRESH_TOKEN: MemoryKey[str] = MemoryKey("refresh_token")
USER_ID: MemoryKey[int] = MemoryKey("user_id")
CART_ID: MemoryKey[int] = MemoryKey("cart_id")


class ApiUser(Actor):
    """An API consumer with typed memory for tokens and ids."""

    def __init__(self, name: str, api: ApiClient) -> None:
        super().__init__(name, api=api)
        self.grant(CallAnApi())

    @classmethod
    def named(cls, name: str, api: ApiClient) -> ApiUser:  # type: ignore[override]
        return cls(name, api)

    def remember_auth_token(self, token: str) -> None:
        self.remember(AUTH_TOKEN, token)

    def recall_auth_token(self) -> str:
        return self.recall(AUTH_TOKEN)

    def remember_refresh_token(self, token: str) -> None:
        self.remember(REFRESH_TOKEN, token)

    def recall_refresh_token(self) -> str:
        return self.recall(REFRESH_TOKEN)

    def remember_user_id(self, user_id: int) -> None:
        self.remember(USER_ID, user_id)

    def recall_user_id(self) -> int:
        return self.recall(USER_ID)

    def remember_cart_id(self, cart_id: int) -> None:
        self.remember(CART_ID, cart_id)

    def recall_cart_id(self) -> int:
        return self.recall(CART_ID)

    def remember_products(self, products: list[dict[str, Any]]) -> None:
        self.remember(PRODUCTS, products)

    def recall_products(self) -> list[dict[str, Any]]:
        return self.recall(PRODUCTS)

    def authorization_header(self) -> dict[str, str]:
        """Bearer header built from the remembered access token.

        Raises:
            NotAuthenticatedError: If no token has been remembered yet.
        """
        if not self.has_remembered(AUTH_TOKEN):
            raise NotAuthenticatedError(
                message=f"{self.name} has not authenticated yet - no token available",
                actor_name=self.name,
                key=AUTH_TOKEN.name,
            )
        return {"Authorization": f"Bearer {self.recall_auth_token()}"}
