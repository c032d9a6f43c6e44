"""Exception hierarchy for PipelineCraft.

Every error raised by the Screenplay layer inherits from PipelineCraftError
and carries:
- error_code: an ErrorCode enum value for programmatic handling
- context: ErrorContext naming the actor, task and HTTP exchange involved
- suggestions: actionable hints for fixing the failing scenario

None of these errors are caught inside the Screenplay layer. They surface
through ``Actor.attempts_to`` / ``Actor.asks`` exactly as raised, so the test
runner reports them against the scenario that triggered them.

Example:
    try:
        await actor.attempts_to(ManageCart.update(cart_id=None))
    except MissingRequiredParameterError as e:
        print(e.format_verbose())
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes.

    - E1xx: Ability errors
    - E2xx: Memory errors
    - E3xx: Task configuration errors
    - E4xx: Upstream (system under test) errors
    - E5xx: Transport errors
    - E6xx: Configuration errors
    - E9xx: Unknown/internal errors
    """

    # Ability errors (E1xx)
    MISSING_ABILITY = "E101"

    # Memory errors (E2xx)
    UNKNOWN_MEMORY_KEY = "E201"
    NOT_AUTHENTICATED = "E202"

    # Task configuration errors (E3xx)
    MISSING_REQUIRED_PARAMETER = "E301"

    # Upstream errors (E4xx)
    UPSTREAM_FAILURE = "E401"

    # Transport errors (E5xx)
    CONNECTION_FAILED = "E501"
    REQUEST_TIMEOUT = "E502"

    # Configuration errors (E6xx)
    INVALID_CONFIG = "E601"

    UNKNOWN = "E999"

    @property
    def category(self) -> str:
        """Get the error category name."""
        code_num = int(self.value[1:])
        if code_num < 200:
            return "ability"
        elif code_num < 300:
            return "memory"
        elif code_num < 400:
            return "task"
        elif code_num < 500:
            return "upstream"
        elif code_num < 600:
            return "transport"
        elif code_num < 700:
            return "config"
        else:
            return "unknown"


@dataclass
class ErrorContext:
    """Structured context captured when an error is raised.

    Attributes:
        actor_name: Name of the actor performing the failing interaction
        task_name: Task or question that failed
        request: HTTP request details (method, url)
        response: HTTP response details (status, body)
        extra: Additional context-specific information
        timestamp: When the error occurred
    """

    actor_name: str | None = None
    task_name: str | None = None
    request: dict[str, Any] | None = None
    response: dict[str, Any] | None = None
    extra: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for serialization."""
        result = {
            "actor_name": self.actor_name,
            "task_name": self.task_name,
            "request": self.request,
            "response": self.response,
            "extra": self.extra,
            "timestamp": self.timestamp.isoformat(),
        }
        return {k: v for k, v in result.items() if v is not None}

    def format_location(self) -> str:
        """Format the error location as a readable string."""
        parts = []
        if self.actor_name:
            parts.append(f"actor={self.actor_name}")
        if self.task_name:
            parts.append(f"task={self.task_name}")
        return " > ".join(parts) if parts else "unknown location"


class PipelineCraftError(Exception):
    """Base exception for all PipelineCraft errors.

    Attributes:
        error_code: Unique ErrorCode for this error type
        message: Human-readable error description
        context: ErrorContext with execution details
        suggestions: List of actionable steps to resolve the issue
        cause: The underlying exception (if any)
    """

    error_code: ErrorCode = ErrorCode.UNKNOWN
    default_message: str = "An unexpected error occurred"
    default_suggestions: list[str] = []

    def __init__(
        self,
        message: str | None = None,
        error_code: ErrorCode | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
        suggestions: list[str] | None = None,
        **extra_context: Any,
    ) -> None:
        self.message = message or self.default_message
        self.error_code = error_code or self.error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self._suggestions = suggestions

        if extra_context:
            self.context.extra.update(extra_context)

        super().__init__(self.message)

    @property
    def suggestions(self) -> list[str]:
        """Get actionable suggestions for resolving this error."""
        if self._suggestions is not None:
            return self._suggestions
        return self.default_suggestions.copy()

    def __str__(self) -> str:
        parts = [f"[{self.error_code.value}] {self.message}"]

        location = self.context.format_location()
        if location != "unknown location":
            parts.append(f"at {location}")

        return " | ".join(parts)

    def format_verbose(self) -> str:
        """Format error with full details including suggestions."""
        lines = [
            f"Error [{self.error_code.value}]: {self.message}",
            "",
        ]

        location = self.context.format_location()
        if location != "unknown location":
            lines.append(f"Location: {location}")

        if self.context.request:
            method = self.context.request.get("method", "?")
            url = self.context.request.get("url", "?")
            lines.append(f"Request: {method} {url}")

        if self.context.response:
            status = self.context.response.get("status", "?")
            lines.append(f"Response: HTTP {status}")

        if self.suggestions:
            lines.append("")
            lines.append("Suggestions:")
            for suggestion in self.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_code": self.error_code.value,
            "error_type": self.__class__.__name__,
            "message": self.message,
            "suggestions": self.suggestions,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


class MissingAbilityError(PipelineCraftError):
    """Actor lacks the ability or handle an interaction requires.

    Raised when a UI task is attempted by an actor with no page attached,
    an API task by an actor with no API client, or when ``ability_of`` is
    asked for a kind that was never granted.
    """

    error_code = ErrorCode.MISSING_ABILITY
    default_message = "Actor is missing a required ability"
    default_suggestions = [
        "Grant the ability with actor.grant(...) before attempting the task",
        "Use the shopper fixture for UI scenarios and api_user for API scenarios",
    ]

    def __init__(
        self,
        message: str | None = None,
        actor_name: str | None = None,
        ability: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.actor_name = actor_name
        self.ability = ability
        if actor_name is not None:
            kwargs.setdefault("context", ErrorContext(actor_name=actor_name))
        super().__init__(message=message, **kwargs)


class UnknownMemoryKeyError(PipelineCraftError):
    """``recall`` was invoked on a key the actor never remembered."""

    error_code = ErrorCode.UNKNOWN_MEMORY_KEY
    default_message = "Value was never remembered"
    default_suggestions = [
        "Perform the task that stores this value before asking about it",
        "Check for typos in the memory key",
    ]

    def __init__(
        self,
        message: str | None = None,
        actor_name: str | None = None,
        key: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.actor_name = actor_name
        self.key = key
        if message is None and key is not None:
            message = f"Actor {actor_name} cannot recall {key} - it was never remembered"
        if actor_name is not None:
            kwargs.setdefault("context", ErrorContext(actor_name=actor_name))
        super().__init__(message=message, **kwargs)


class NotAuthenticatedError(UnknownMemoryKeyError):
    """An API user asked for an auth header before authenticating."""

    error_code = ErrorCode.NOT_AUTHENTICATED
    default_message = "Actor has not authenticated yet"
    default_suggestions = [
        "Perform AuthenticateUser before building authorized requests",
    ]


class MissingRequiredParameterError(PipelineCraftError):
    """A task was performed without a parameter its operation requires."""

    error_code = ErrorCode.MISSING_REQUIRED_PARAMETER
    default_message = "Required task parameter is missing"
    default_suggestions = [
        "Pass the identifier explicitly when building the task",
        "Perform the task that remembers the identifier first",
    ]

    def __init__(
        self,
        message: str | None = None,
        parameter: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.parameter = parameter
        super().__init__(message=message, **kwargs)


class UpstreamFailureError(PipelineCraftError):
    """The system under test answered with a non-success status.

    Raised only by tasks whose contract requires success. The message embeds
    the status code and response text; both are also kept as attributes.
    """

    error_code = ErrorCode.UPSTREAM_FAILURE
    default_message = "Upstream request failed"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        body_text: str | None = None,
        **kwargs: Any,
    ) -> None:
        self.status_code = status_code
        self.body_text = body_text
        if status_code is not None:
            kwargs.setdefault("suggestions", self._suggestions_for_status(status_code))
        super().__init__(message=message, **kwargs)

    def _suggestions_for_status(self, status_code: int) -> list[str]:
        """Generate suggestions based on HTTP status code."""
        if status_code == 400:
            return [
                "Check request body and credentials match the API contract",
                "Review the response text for the rejected field",
            ]
        elif status_code in (401, 403):
            return [
                "Verify the access token is valid and not expired",
                "Ensure AuthenticateUser runs before authorized requests",
            ]
        elif status_code == 404:
            return [
                "Verify the resource id exists on the demo API",
                "Check api_url in the configuration",
            ]
        elif 500 <= status_code < 600:
            return [
                "The demo API reported a server error - retry later",
            ]
        else:
            return [
                f"Received HTTP {status_code} response",
                "Check response body for error details",
            ]

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status_code"] = self.status_code
        return result


class ConnectionError(PipelineCraftError):
    """The API handle could not reach the system under test."""

    error_code = ErrorCode.CONNECTION_FAILED
    default_message = "Failed to establish connection"
    default_suggestions = [
        "Check api_url in the configuration",
        "Verify network access to the demo API",
    ]


class RequestTimeoutError(ConnectionError):
    """An HTTP request timed out waiting for a response."""

    error_code = ErrorCode.REQUEST_TIMEOUT
    default_message = "Request timed out"
    default_suggestions = [
        "Increase api_timeout in the configuration",
    ]


class ConfigValidationError(PipelineCraftError):
    """Configuration contains an invalid value."""

    error_code = ErrorCode.INVALID_CONFIG
    default_message = "Invalid configuration"
    default_suggestions = [
        "Check pipelinecraft.yaml and PIPELINECRAFT_* environment variables",
        "Run 'pipelinecraft config' to see the effective settings",
    ]

    def __init__(
        self,
        message: str | None = None,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        self.field = field
        self.value = value
        super().__init__(message=message, **kwargs)

    def __str__(self) -> str:
        base = super().__str__()
        if self.field:
            base = f"{base} (field: {self.field})"
        return base
