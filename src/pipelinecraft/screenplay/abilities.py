"""Abilities an actor can be granted."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AbilityKind(Enum):
    """Capability tags. Abilities are looked up by kind, not by class."""

    BROWSE_THE_WEB = "browse_the_web"
    CALL_AN_API = "call_an_api"


@dataclass(frozen=True)
class Ability:
    """A named capability marker."""

    name: str
    kind: AbilityKind

    def __str__(self) -> str:
        return self.name


def BrowseTheWeb(name: str = "BrowseTheWeb") -> Ability:  # noqa: N802
    """The ability to drive a browser page."""
    return Ability(name=name, kind=AbilityKind.BROWSE_THE_WEB)


def CallAnApi(name: str = "CallAnApi") -> Ability:  # noqa: N802
    """The ability to call the HTTP API."""
    return Ability(name=name, kind=AbilityKind.CALL_AN_API)
