"""Questions about the actor's own memory."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from pipelinecraft.screenplay.actors.base import Question
from pipelinecraft.screenplay.memory import MemoryKey, key_name

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor

T = TypeVar("T")


class Remembered:
    @staticmethod
    def value(key: str | MemoryKey[T]) -> Question[T]:
        async def answer(actor: Actor) -> Any:
            return actor.recall(key)

        return Question(f"the remembered {key_name(key)}", answer)

    @staticmethod
    def exists(key: str | MemoryKey[Any]) -> Question[bool]:
        async def answer(actor: Actor) -> bool:
            return actor.has_remembered(key)

        return Question(f"whether {key_name(key)} was remembered", answer)
