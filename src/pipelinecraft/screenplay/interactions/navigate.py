"""Navigate interaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipelinecraft.screenplay.actors.base import Task

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


@dataclass(frozen=True)
class Navigate(Task):
    url: str

    @classmethod
    def to(cls, url: str) -> Navigate:
        return cls(url)

    async def perform_as(self, actor: Actor) -> None:
        await actor.page.goto(self.url)

    def __str__(self) -> str:
        return f"navigate to {self.url}"
