"""Login task - signs in through the storefront UI."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from pipelinecraft.config.settings import DEFAULT_BASE_URL, DEFAULT_SHOPPER_CREDENTIALS, Credentials
from pipelinecraft.pages import LoginPage
from pipelinecraft.screenplay.actors.base import Task

if TYPE_CHECKING:
    from pipelinecraft.screenplay.actors.base import Actor


@dataclass(frozen=True)
class Login(Task):
    credentials: Credentials
    base_url: str = DEFAULT_BASE_URL

    @classmethod
    def with_credentials(cls, username: str, password: str) -> Login:
        return cls(Credentials(username, password))

    @classmethod
    def as_standard_user(cls, credentials: Credentials = DEFAULT_SHOPPER_CREDENTIALS) -> Login:
        return cls(credentials)

    def at(self, base_url: str) -> Login:
        return replace(self, base_url=base_url)

    async def perform_as(self, actor: Actor) -> None:
        login_page = LoginPage(actor.page, base_url=self.base_url)
        await login_page.navigate()
        await login_page.login(self.credentials.username, self.credentials.password)

    def __str__(self) -> str:
        return f"log in as {self.credentials.username}"
