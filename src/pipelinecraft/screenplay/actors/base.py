"""Actor, Task and Question: the core of the Screenplay layer.

An Actor is granted Abilities, attempts Tasks and asks Questions:

    actor = Actor.named("Emily", api=api).who_can(CallAnApi())
    await actor.attempts_to(ApiRequest.get("/products").remembered_as("catalog"))
    status = await actor.asks(ApiResponse.status())

Tasks run one at a time in the order given. A failing task stops the
sequence and its error reaches the caller unchanged.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pipelinecraft.errors import MissingAbilityError
from pipelinecraft.screenplay.abilities import Ability, AbilityKind
from pipelinecraft.screenplay.memory import Memory, MemoryKey

if TYPE_CHECKING:
    from playwright.async_api import Page

    from pipelinecraft.http import ApiClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Task(ABC):
    """A side-effecting interaction an actor can perform."""

    @abstractmethod
    async def perform_as(self, actor: Actor) -> None:
        """Perform this task on behalf of the actor."""

    def __str__(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Question(Generic[T]):
    """A read-only probe answered by an actor.

    Answering must not change the actor's memory or the system under test.
    """

    description: str
    answer: Callable[[Actor], Awaitable[T]]

    async def answered_by(self, actor: Actor) -> T:
        return await self.answer(actor)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return f"Question({self.description!r})"


class Actor:
    """A user of the system under test.

    Attributes:
        name: Display name used in error messages and logs.
        memory: Scratch space shared by the tasks this actor performs.
    """

    def __init__(
        self,
        name: str,
        page: Page | None = None,
        api: ApiClient | None = None,
    ) -> None:
        self.name = name
        self.memory = Memory(owner=name)
        self._abilities: dict[str, Ability] = {}
        self._page = page
        self._api = api

    @classmethod
    def named(cls, name: str, page: Page | None = None, api: ApiClient | None = None) -> Actor:
        return cls(name, page=page, api=api)

    # Abilities

    def grant(self, *abilities: Ability) -> Actor:
        """Give the actor abilities.

        An ability replaces any previously granted one with the same name or
        the same kind.
        """
        for ability in abilities:
            stale = [
                name
                for name, existing in self._abilities.items()
                if name == ability.name or existing.kind is ability.kind
            ]
            for name in stale:
                del self._abilities[name]
            self._abilities[ability.name] = ability
        return self

    who_can = grant

    def ability_of(self, kind: AbilityKind) -> Ability:
        """Return the granted ability of the given kind.

        Raises:
            MissingAbilityError: If no ability of that kind was granted.
        """
        for ability in self._abilities.values():
            if ability.kind is kind:
                return ability
        raise MissingAbilityError(
            message=f"Actor {self.name} does not have the ability {kind.value}",
            actor_name=self.name,
            ability=kind.value,
        )

    def can(self, kind: AbilityKind) -> bool:
        return any(ability.kind is kind for ability in self._abilities.values())

    @property
    def abilities(self) -> list[Ability]:
        return list(self._abilities.values())

    # Tasks and questions

    async def attempts_to(self, *tasks: Task) -> None:
        """Perform tasks one after another, stopping at the first failure."""
        for task in tasks:
            logger.debug(f"{self.name} attempts to {task}")
            await task.perform_as(self)

    async def asks(self, question: Question[T]) -> T:
        """Answer a question from this actor's point of view."""
        logger.debug(f"{self.name} asks {question}")
        return await question.answered_by(self)

    # Memory

    def remember(self, key: str | MemoryKey[Any], value: Any) -> None:
        self.memory.remember(key, value)

    def recall(self, key: str | MemoryKey[T]) -> T:
        return self.memory.recall(key)

    def has_remembered(self, key: str | MemoryKey[Any]) -> bool:
        return self.memory.has(key)

    def forget(self, key: str | MemoryKey[Any]) -> None:
        self.memory.forget(key)

    # Handles

    @property
    def page(self) -> Page:
        """The browser page used for UI interactions."""
        if self._page is None:
            raise MissingAbilityError(
                message=f"Actor {self.name} does not have a Page context",
                actor_name=self.name,
                ability=AbilityKind.BROWSE_THE_WEB.value,
            )
        return self._page

    def attach_page(self, page: Page) -> Actor:
        self._page = page
        return self

    @property
    def api(self) -> ApiClient:
        """The API client used for HTTP interactions."""
        if self._api is None:
            raise MissingAbilityError(
                message=f"Actor {self.name} does not have an API context",
                actor_name=self.name,
                ability=AbilityKind.CALL_AN_API.value,
            )
        return self._api

    def attach_api(self, api: ApiClient) -> Actor:
        self._api = api
        return self

    def has_ui_capabilities(self) -> bool:
        return self._page is not None

    def has_api_capabilities(self) -> bool:
        return self._api is not None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"
