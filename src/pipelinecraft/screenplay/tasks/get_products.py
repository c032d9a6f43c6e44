"""GetProducts task - fetches the product catalogue from the API."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from pipelinecraft.errors import ErrorContext, UpstreamFailureError
from pipelinecraft.screenplay.actors.api_user import ApiUser
from pipelinecraft.screenplay.actors.base import Task
from pipelinecraft.screenplay.memory import LAST_API_RESPONSE, PRODUCTS, PRODUCTS_RESPONSE

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


@dataclass(frozen=True)
class GetProducts(Task):
    limit: int = 10
    skip: int = 0
    query: str | None = None

    @classmethod
    def all(cls) -> GetProducts:
        return cls()

    @classmethod
    def matching(cls, query: str) -> GetProducts:
        return cls(query=query)

    def with_limit(self, limit: int) -> GetProducts:
        return replace(self, limit=limit)

    def with_skip(self, skip: int) -> GetProducts:
        return replace(self, skip=skip)

    def _request(self) -> tuple[str, dict[str, Any]]:
        if self.query:
            return "/products/search", {"q": self.query}
        return "/products", {"limit": self.limit, "skip": self.skip}

    async def perform_as(self, actor: Actor) -> None:
        endpoint, params = self._request()
        response = await actor.api.get(endpoint, params=params)

        if not response.ok:
            raise UpstreamFailureError(
                message=f"Get products failed: {response.status_code} {response.text}",
                status_code=response.status_code,
                body_text=response.text,
                context=ErrorContext(
                    actor_name=actor.name,
                    task_name=str(self),
                    request={"method": "GET", "url": endpoint},
                    response={"status": response.status_code, "body": response.text},
                ),
            )

        data = response.json()
        products = data.get("products", [])

        actor.remember(PRODUCTS_RESPONSE, data)
        if isinstance(actor, ApiUser):
            actor.remember_products(products)
        else:
            actor.remember(PRODUCTS, products)
        actor.remember(LAST_API_RESPONSE, response)

    def __str__(self) -> str:
        if self.query:
            return f"search products matching {self.query!r}"
        return "get products"
