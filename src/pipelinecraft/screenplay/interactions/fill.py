"""Fill interaction - types a value into a form field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipelinecraft.screenplay.actors.base import Task

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


@dataclass(frozen=True)
class Fill(Task):
    """Fill a field with a value.

    Built in two steps so scenarios read naturally::

        Fill.field("#user-name").with_value("standard_user")
    """

    selector: str
    value: str

    @staticmethod
    def field(selector: str) -> FillBuilder:
        return FillBuilder(selector)

    async def perform_as(self, actor: Actor) -> None:
        await actor.page.fill(self.selector, self.value)

    def __str__(self) -> str:
        return f"fill {self.selector}"


@dataclass(frozen=True)
class FillBuilder:
    selector: str

    def with_value(self, value: str) -> Fill:
        return Fill(self.selector, value)
