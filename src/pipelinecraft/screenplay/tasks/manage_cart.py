"""ManageCart task - creates, updates, reads and deletes carts via the API."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Any

from pipelinecraft.errors import ErrorContext, MissingRequiredParameterError, UpstreamFailureError
from pipelinecraft.screenplay.actors.api_user import USER_ID, ApiUser
from pipelinecraft.screenplay.actors.base import Task
from pipelinecraft.screenplay.memory import CART_DATA, LAST_API_RESPONSE

if TYPE_CHECKING:
    from pipelinecraft.http import HTTPResponse
    from pipelinecraft.screenplay.actors.base import Actor


class CartOperation(Enum):
    CREATE = "create"
    UPDATE = "update"
    GET = "get"
    DELETE = "delete"


@dataclass(frozen=True)
class CartItem:
    id: int
    quantity: int = 1

    def to_dict(self) -> dict[str, int]:
        return {"id": self.id, "quantity": self.quantity}


@dataclass(frozen=True)
class ManageCart(Task):
    """One cart operation against ``/carts``.

    ``create`` needs a user id, taken from the builder or else from an
    ApiUser's memory. The other operations need a cart id passed to the
    builder; the remembered cart id is never used implicitly. A missing id
    raises MissingRequiredParameterError before any request is sent; a
    non-success response raises UpstreamFailureError.

    Example::

        await actor.attempts_to(
            ManageCart.create().for_user(33).with_products(CartItem(1, 2)),
            ManageCart.update(cart_id=1).with_products(CartItem(5)).merging_with_existing(),
            ManageCart.delete(cart_id=1),
        )
    """

    operation: CartOperation
    cart_id: int | None = None
    user_id: int | None = None
    products: tuple[CartItem, ...] = ()
    merge: bool = False

    @classmethod
    def create(cls) -> ManageCart:
        return cls(CartOperation.CREATE)

    @classmethod
    def update(cls, cart_id: int | None = None) -> ManageCart:
        return cls(CartOperation.UPDATE, cart_id=cart_id)

    @classmethod
    def get(cls, cart_id: int | None = None) -> ManageCart:
        return cls(CartOperation.GET, cart_id=cart_id)

    @classmethod
    def delete(cls, cart_id: int | None = None) -> ManageCart:
        return cls(CartOperation.DELETE, cart_id=cart_id)

    def for_user(self, user_id: int) -> ManageCart:
        return replace(self, user_id=user_id)

    def for_cart(self, cart_id: int) -> ManageCart:
        return replace(self, cart_id=cart_id)

    def with_products(self, *products: CartItem | dict[str, int]) -> ManageCart:
        items = tuple(p if isinstance(p, CartItem) else CartItem(**p) for p in products)
        return replace(self, products=items)

    def merging_with_existing(self) -> ManageCart:
        return replace(self, merge=True)

    async def perform_as(self, actor: Actor) -> None:
        if self.operation is CartOperation.CREATE:
            user_id = self._user_id(actor)
            response = await actor.api.post(
                "/carts/add",
                json={"userId": user_id, "products": self._product_payload()},
            )
        else:
            cart_id = self._cart_id(actor)
            endpoint = f"/carts/{cart_id}"
            if self.operation is CartOperation.UPDATE:
                response = await actor.api.put(
                    endpoint,
                    json={"merge": self.merge, "products": self._product_payload()},
                )
            elif self.operation is CartOperation.GET:
                response = await actor.api.get(endpoint)
            else:
                response = await actor.api.delete(endpoint)

        if not response.ok:
            raise self._failure(actor, response)

        if self.operation is not CartOperation.DELETE:
            data = response.json()
            if self.operation is CartOperation.CREATE and isinstance(actor, ApiUser):
                actor.remember_cart_id(data["id"])
            actor.remember(CART_DATA, data)

        actor.remember(LAST_API_RESPONSE, response)

    def _user_id(self, actor: Actor) -> int:
        if self.user_id is not None:
            return self.user_id
        if isinstance(actor, ApiUser) and actor.has_remembered(USER_ID):
            return actor.recall_user_id()
        raise self._missing(actor, "user_id", "User ID")

    def _cart_id(self, actor: Actor) -> int:
        if self.cart_id is not None:
            return self.cart_id
        raise self._missing(actor, "cart_id", "Cart ID")

    def _missing(self, actor: Actor, parameter: str, label: str) -> MissingRequiredParameterError:
        return MissingRequiredParameterError(
            message=f"{label} is required to {self.operation.value} a cart",
            parameter=parameter,
            context=ErrorContext(actor_name=actor.name, task_name=str(self)),
        )

    def _product_payload(self) -> list[dict[str, Any]]:
        return [item.to_dict() for item in self.products]

    def _failure(self, actor: Actor, response: HTTPResponse) -> UpstreamFailureError:
        return UpstreamFailureError(
            message=f"Cart {self.operation.value} failed: {response.status_code} {response.text}",
            status_code=response.status_code,
            body_text=response.text,
            context=ErrorContext(
                actor_name=actor.name,
                task_name=str(self),
                response={"status": response.status_code, "body": response.text},
            ),
        )

    def __str__(self) -> str:
        return f"{self.operation.value} cart"
