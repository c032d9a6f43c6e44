"""AuthenticateUser task - logs in through the API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pipelinecraft.config.settings import DEFAULT_API_CREDENTIALS, Credentials
from pipelinecraft.errors import ErrorContext, UpstreamFailureError
from pipelinecraft.screenplay.actors.api_user import ApiUser
from pipelinecraft.screenplay.actors.base import Task
from pipelinecraft.screenplay.memory import AUTH_RESPONSE, LAST_API_RESPONSE

if TYPE_CHECKING:
    from pipelinecraft.http import HTTPResponse
    from pipelinecraft.screenplay.actors.base import Actor

LOGIN_ENDPOINT = "/auth/login"
TOKEN_LIFETIME_MINS = 30
TOKEN_FIELDS = ("accessToken", "refreshToken", "id")


@dataclass(frozen=True)
class AuthenticateUser(Task):
    """POST credentials to the login endpoint.

    On success an ApiUser remembers its access token, refresh token and user
    id; every actor remembers the parsed body under ``AUTH_RESPONSE``. A
    non-success status, or a body without all three token fields, raises
    UpstreamFailureError and remembers nothing.
    """

    credentials: Credentials

    @classmethod
    def with_credentials(cls, username: str, password: str) -> AuthenticateUser:
        return cls(Credentials(username, password))

    @classmethod
    def as_default_user(
        cls, credentials: Credentials = DEFAULT_API_CREDENTIALS
    ) -> AuthenticateUser:
        return cls(credentials)

    async def perform_as(self, actor: Actor) -> None:
        response = await actor.api.post(
            LOGIN_ENDPOINT,
            json={
                "username": self.credentials.username,
                "password": self.credentials.password,
                "expiresInMins": TOKEN_LIFETIME_MINS,
            },
        )

        if not response.ok:
            raise self._failure(
                actor, response, f"Authentication failed: {response.status_code} {response.text}"
            )

        # All token fields are checked before any slot is written.
        data = response.json()
        missing = [
            name for name in TOKEN_FIELDS if not isinstance(data, dict) or name not in data
        ]
        if missing:
            raise self._failure(
                actor, response, f"Authentication response is missing {', '.join(missing)}"
            )

        if isinstance(actor, ApiUser):
            actor.remember_auth_token(data["accessToken"])
            actor.remember_refresh_token(data["refreshToken"])
            actor.remember_user_id(data["id"])

        actor.remember(AUTH_RESPONSE, data)
        actor.remember(LAST_API_RESPONSE, response)

    def _failure(
        self, actor: Actor, response: HTTPResponse, message: str
    ) -> UpstreamFailureError:
        return UpstreamFailureError(
            message=message,
            status_code=response.status_code,
            body_text=response.text,
            context=ErrorContext(
                actor_name=actor.name,
                task_name=str(self),
                request={"method": "POST", "url": LOGIN_ENDPOINT},
                response={"status": response.status_code, "body": response.text},
            ),
        )

    def __str__(self) -> str:
        return f"authenticate as {self.credentials.username}"
