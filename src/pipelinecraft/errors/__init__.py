"""PipelineCraft error handling.

Provides the exception hierarchy raised by actors, tasks and questions.
"""

from pipelinecraft.errors.base import (
    ConfigValidationError,
    ConnectionError,
    ErrorCode,
    ErrorContext,
    MissingAbilityError,
    MissingRequiredParameterError,
    NotAuthenticatedError,
    PipelineCraftError,
    RequestTimeoutError,
    UnknownMemoryKeyError,
    UpstreamFailureError,
)

__all__ = [
    "PipelineCraftError",
    "ErrorCode",
    "ErrorContext",
    "MissingAbilityError",
    "UnknownMemoryKeyError",
    "NotAuthenticatedError",
    "MissingRequiredParameterError",
    "UpstreamFailureError",
    "ConnectionError",
    "RequestTimeoutError",
    "ConfigValidationError",
]
