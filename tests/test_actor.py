"""Tests for Actor, abilities, tasks and questions."""

from __future__ import annotations

from dataclasses import dataclass
from unittest.mock import MagicMock

import pytest

from pipelinecraft.errors import MissingAbilityError
from pipelinecraft.screenplay import (
    Ability,
    AbilityKind,
    Actor,
    BrowseTheWeb,
    CallAnApi,
    Question,
    Task,
)


@dataclass(frozen=True)
class Record(Task):
    """Appends its label to a shared log."""

    label: str
    log: list

    async def perform_as(self, actor: Actor) -> None:
        self.log.append(self.label)


@dataclass(frozen=True)
class Explode(Task):
    async def perform_as(self, actor: Actor) -> None:
        raise RuntimeError("boom")


class TestAbilities:
    def test_grant_and_lookup_by_kind(self) -> None:
        actor = Actor.named("Emily").grant(CallAnApi())

        ability = actor.ability_of(AbilityKind.CALL_AN_API)

        assert ability.name == "CallAnApi"
        assert actor.can(AbilityKind.CALL_AN_API)
        assert not actor.can(AbilityKind.BROWSE_THE_WEB)

    def test_missing_ability_raises(self) -> None:
        actor = Actor.named("Emily")

        with pytest.raises(MissingAbilityError) as exc_info:
            actor.ability_of(AbilityKind.BROWSE_THE_WEB)

        assert exc_info.value.actor_name == "Emily"
        assert exc_info.value.ability == "browse_the_web"

    def test_who_can_is_grant(self) -> None:
        actor = Actor.named("Sam").who_can(BrowseTheWeb(), CallAnApi())

        assert {a.kind for a in actor.abilities} == {
            AbilityKind.BROWSE_THE_WEB,
            AbilityKind.CALL_AN_API,
        }

    def test_same_kind_replaces_previous(self) -> None:
        actor = Actor.named("Sam")
        actor.grant(BrowseTheWeb())
        actor.grant(Ability("Chromium", AbilityKind.BROWSE_THE_WEB))

        assert len(actor.abilities) == 1
        assert actor.ability_of(AbilityKind.BROWSE_THE_WEB).name == "Chromium"

    def test_same_name_replaces_previous(self) -> None:
        actor = Actor.named("Sam")
        actor.grant(Ability("Handle", AbilityKind.BROWSE_THE_WEB))
        actor.grant(Ability("Handle", AbilityKind.CALL_AN_API))

        assert len(actor.abilities) == 1
        assert actor.can(AbilityKind.CALL_AN_API)


class TestAttemptsTo:
    @pytest.mark.asyncio
    async def test_tasks_run_in_order(self) -> None:
        log: list[str] = []
        actor = Actor.named("Emily")

        await actor.attempts_to(Record("first", log), Record("second", log), Record("third", log))

        assert log == ["first", "second", "third"]

    @pytest.mark.asyncio
    async def test_failure_stops_the_sequence(self) -> None:
        log: list[str] = []
        actor = Actor.named("Emily")

        with pytest.raises(RuntimeError, match="boom"):
            await actor.attempts_to(Record("before", log), Explode(), Record("after", log))

        assert log == ["before"]

    @pytest.mark.asyncio
    async def test_no_tasks_is_a_no_op(self) -> None:
        actor = Actor.named("Emily")
        await actor.attempts_to()

        assert len(actor.memory) == 0


class TestAsks:
    @pytest.mark.asyncio
    async def test_question_receives_the_actor(self) -> None:
        actor = Actor.named("Emily")
        actor.remember("greeting", "hello")

        async def answer(a: Actor) -> str:
            return f"{a.recall('greeting')} from {a.name}"

        result = await actor.asks(Question("a greeting", answer))

        assert result == "hello from Emily"

    def test_question_str_is_description(self) -> None:
        async def answer(a: Actor) -> int:
            return 1

        assert str(Question("the answer", answer)) == "the answer"


class TestMemoryDelegation:
    def test_falsy_value_round_trip(self) -> None:
        actor = Actor.named("Emily")
        actor.remember("count", 0)

        assert actor.has_remembered("count")
        assert actor.recall("count") == 0

    def test_forget(self) -> None:
        actor = Actor.named("Emily")
        actor.remember("count", 1)
        actor.forget("count")

        assert not actor.has_remembered("count")


class TestHandles:
    def test_page_missing_raises(self) -> None:
        actor = Actor.named("Emily")

        with pytest.raises(MissingAbilityError, match="does not have a Page context"):
            _ = actor.page

    def test_api_missing_raises(self) -> None:
        actor = Actor.named("Sam")

        with pytest.raises(MissingAbilityError, match="does not have an API context"):
            _ = actor.api

    def test_attach_handles(self) -> None:
        page, api = MagicMock(), MagicMock()
        actor = Actor.named("Emily").attach_page(page).attach_api(api)

        assert actor.page is page
        assert actor.api is api
        assert actor.has_ui_capabilities()
        assert actor.has_api_capabilities()

    def test_repr(self) -> None:
        assert repr(Actor.named("Emily")) == "Actor('Emily')"
