"""Click interaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipelinecraft.screenplay.actors.base import Task

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


@dataclass(frozen=True)
class Click(Task):
    selector: str

    @classmethod
    def on(cls, selector: str) -> Click:
        return cls(selector)

    async def perform_as(self, actor: Actor) -> None:
        await actor.page.click(self.selector)

    def __str__(self) -> str:
        return f"click on {self.selector}"
