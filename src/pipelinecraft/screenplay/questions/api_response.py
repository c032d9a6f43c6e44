"""Questions about the most recent API response.

These read the ``LAST_API_RESPONSE`` slot, so they only make sense after an
ApiRequest, AuthenticateUser, GetProducts or ManageCart task. Asked before
any of them, they raise UnknownMemoryKeyError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pipelinecraft.screenplay.actors.base import Question
from pipelinecraft.screenplay.memory import LAST_API_RESPONSE

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


class ApiResponse:
    @staticmethod
    def status() -> Question[int]:
        async def answer(actor: Actor) -> int:
            return actor.recall(LAST_API_RESPONSE).status_code

        return Question("the last response status", answer)

    @staticmethod
    def body() -> Question[Any]:
        async def answer(actor: Actor) -> Any:
            return actor.recall(LAST_API_RESPONSE).json()

        return Question("the last response body", answer)

    @staticmethod
    def headers() -> Question[dict[str, str]]:
        async def answer(actor: Actor) -> dict[str, str]:
            return dict(actor.recall(LAST_API_RESPONSE).headers)

        return Question("the last response headers", answer)

    @staticmethod
    def is_ok() -> Question[bool]:
        async def answer(actor: Actor) -> bool:
            return actor.recall(LAST_API_RESPONSE).ok

        return Question("whether the last response was ok", answer)

    @staticmethod
    def text() -> Question[str]:
        async def answer(actor: Actor) -> str:
            return actor.recall(LAST_API_RESPONSE).text

        return Question("the last response text", answer)
