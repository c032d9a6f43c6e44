"""Wait interaction - waits for an element state or a fixed delay.

The two modes are separate condition types, so a Wait always has exactly
one of them::

    Wait.for_element(".inventory_list").to_be_visible(timeout_ms=10_000)
    Wait.for_duration(500)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Union

from pipelinecraft.screenplay.actors.base import Task

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor

ElementState = Literal["visible", "hidden", "attached", "detached"]


@dataclass(frozen=True)
class UntilElement:
    selector: str
    state: ElementState
    timeout_ms: float | None = None


@dataclass(frozen=True)
class FixedDelay:
    milliseconds: float


WaitCondition = Union[UntilElement, FixedDelay]


@dataclass(frozen=True)
class Wait(Task):
    condition: WaitCondition

    @staticmethod
    def for_element(selector: str) -> WaitBuilder:
        return WaitBuilder(selector)

    @classmethod
    def for_duration(cls, milliseconds: float) -> Wait:
        return cls(FixedDelay(milliseconds))

    async def perform_as(self, actor: Actor) -> None:
        page = actor.page
        condition = self.condition
        if isinstance(condition, UntilElement):
            await page.wait_for_selector(
                condition.selector,
                state=condition.state,
                timeout=condition.timeout_ms,
            )
        else:
            await page.wait_for_timeout(condition.milliseconds)

    def __str__(self) -> str:
        condition = self.condition
        if isinstance(condition, UntilElement):
            return f"wait for {condition.selector} to be {condition.state}"
        return f"wait {condition.milliseconds}ms"


@dataclass(frozen=True)
class WaitBuilder:
    selector: str

    def to_be_visible(self, timeout_ms: float | None = None) -> Wait:
        return Wait(UntilElement(self.selector, "visible", timeout_ms))

    def to_be_hidden(self, timeout_ms: float | None = None) -> Wait:
        return Wait(UntilElement(self.selector, "hidden", timeout_ms))

    def to_be_attached(self, timeout_ms: float | None = None) -> Wait:
        return Wait(UntilElement(self.selector, "attached", timeout_ms))

    def to_be_detached(self, timeout_ms: float | None = None) -> Wait:
        return Wait(UntilElement(self.selector, "detached", timeout_ms))
