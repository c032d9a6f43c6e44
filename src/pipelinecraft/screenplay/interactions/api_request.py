"""ApiRequest interaction - sends one HTTP request."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Literal

from pipelinecraft.screenplay.actors.base import Task
from pipelinecraft.screenplay.memory import LAST_API_RESPONSE, MemoryKey

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor

Method = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


@dataclass(frozen=True)
class ApiRequest(Task):
    """Send a request through the actor's API client.

    The response is remembered under ``LAST_API_RESPONSE`` and, when
    ``remembered_as`` was used, under the caller's key too. The status code
    is not checked; ask ``ApiResponse`` questions to assert on it.

    Example::

        await actor.attempts_to(
            ApiRequest.post("/carts/add")
            .with_headers(actor.authorization_header())
            .with_body({"userId": 1, "products": [{"id": 1, "quantity": 2}]})
            .remembered_as("new_cart")
        )
    """

    method: Method
    endpoint: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, Any] | None = None
    body: Any = None
    has_body: bool = False
    save_key: str | MemoryKey[Any] | None = None

    @classmethod
    def get(cls, endpoint: str) -> ApiRequest:
        return cls("GET", endpoint)

    @classmethod
    def post(cls, endpoint: str) -> ApiRequest:
        return cls("POST", endpoint)

    @classmethod
    def put(cls, endpoint: str) -> ApiRequest:
        return cls("PUT", endpoint)

    @classmethod
    def patch(cls, endpoint: str) -> ApiRequest:
        return cls("PATCH", endpoint)

    @classmethod
    def delete(cls, endpoint: str) -> ApiRequest:
        return cls("DELETE", endpoint)

    def with_headers(self, headers: dict[str, str]) -> ApiRequest:
        return replace(self, headers={**self.headers, **headers})

    def with_body(self, body: Any) -> ApiRequest:
        return replace(self, body=body, has_body=True)

    def with_params(self, params: dict[str, Any]) -> ApiRequest:
        return replace(self, params={**(self.params or {}), **params})

    def remembered_as(self, key: str | MemoryKey[Any]) -> ApiRequest:
        return replace(self, save_key=key)

    async def perform_as(self, actor: Actor) -> None:
        api = actor.api

        kwargs: dict[str, Any] = {"headers": dict(self.headers), "params": self.params}
        if self.has_body:
            kwargs["json"] = self.body

        response = await api.request(self.method, self.endpoint, **kwargs)

        if self.save_key is not None:
            actor.remember(self.save_key, response)
        actor.remember(LAST_API_RESPONSE, response)

    def __str__(self) -> str:
        return f"send {self.method} {self.endpoint}"
