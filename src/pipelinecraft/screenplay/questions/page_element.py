"""Questions about elements on the current page.

Each answer queries the live page; nothing is cached between asks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pipelinecraft.screenplay.actors.base import Question

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


class PageElement:
    @staticmethod
    def text(selector: str) -> Question[str]:
        async def answer(actor: Actor) -> str:
            return await actor.page.text_content(selector) or ""

        return Question(f"the text of {selector}", answer)

    @staticmethod
    def is_visible(selector: str) -> Question[bool]:
        async def answer(actor: Actor) -> bool:
            return await actor.page.is_visible(selector)

        return Question(f"whether {selector} is visible", answer)

    @staticmethod
    def count(selector: str) -> Question[int]:
        async def answer(actor: Actor) -> int:
            return await actor.page.locator(selector).count()

        return Question(f"the number of {selector}", answer)

    @staticmethod
    def attribute(selector: str, attribute_name: str) -> Question[str | None]:
        async def answer(actor: Actor) -> str | None:
            return await actor.page.get_attribute(selector, attribute_name)

        return Question(f"the {attribute_name} attribute of {selector}", answer)
