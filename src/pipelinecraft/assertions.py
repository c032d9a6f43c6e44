"""Assertions for validating API responses.

Example:
    >>> from pipelinecraft.assertions import assert_status_code, assert_has_fields
    >>> assert_status_code(response, 200)
    >>> assert_has_fields(response, ["id", "accessToken"])
"""

from __future__ import annotations

import re
from typing import Any

JWT_PATTERN = re.compile(r"^[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+\.[A-Za-z0-9\-_]+$")

_TYPE_NAMES: dict[str, type | tuple[type, ...]] = {
    "string": str,
    "number": (int, float),
    "integer": int,
    "boolean": bool,
    "object": dict,
    "array": list,
}


class AssertionFailedError(AssertionError):
    """Raised when an assertion fails."""

    def __init__(self, message: str, actual: Any = None, expected: Any = None):
        self.message = message
        self.actual = actual
        self.expected = expected
        super().__init__(message)


def _body(response: Any) -> Any:
    return response.json() if callable(getattr(response, "json", None)) else response


def assert_status_code(response: Any, expected: int | list[int]) -> None:
    """Assert response has expected status code (or one of several)."""
    actual = getattr(response, "status_code", None)
    acceptable = expected if isinstance(expected, list) else [expected]
    if actual not in acceptable:
        raise AssertionFailedError(
            f"Expected status code {expected}, got {actual}",
            actual=actual,
            expected=expected,
        )


def assert_ok(response: Any) -> None:
    """Assert response status is 2xx."""
    if not getattr(response, "ok", False):
        status = getattr(response, "status_code", None)
        raise AssertionFailedError(
            f"Expected a successful response, got {status}",
            actual=status,
            expected="2xx",
        )


def assert_has_fields(data: Any, fields: list[str]) -> None:
    """Assert a JSON object (or a response's JSON body) has every field."""
    body = _body(data)
    if not isinstance(body, dict):
        raise AssertionFailedError(
            f"Expected a JSON object, got {type(body).__name__}",
            actual=body,
            expected=fields,
        )
    missing = [f for f in fields if f not in body]
    if missing:
        raise AssertionFailedError(
            f"Missing fields: {missing}",
            actual=list(body.keys()),
            expected=fields,
        )


def assert_non_empty_array(data: Any, path: str | None = None) -> None:
    """Assert the body (or the field at ``path``) is a non-empty list."""
    value = extract_value(data, path) if path else _body(data)
    if not isinstance(value, list) or not value:
        raise AssertionFailedError(
            f"Expected a non-empty array at {path or 'body'}",
            actual=value,
            expected="non-empty array",
        )


def assert_jwt_format(token: str) -> None:
    """Assert a token has three base64url segments."""
    if not isinstance(token, str) or not JWT_PATTERN.match(token):
        raise AssertionFailedError(
            f"Value {token!r} is not a JWT",
            actual=token,
            expected="header.payload.signature",
        )


def assert_schema(obj: dict[str, Any], schema: dict[str, str]) -> None:
    """Assert each key exists with the named JSON type.

    Example:
        >>> assert_schema(product, {"id": "number", "title": "string", "tags": "array"})
    """
    for key, type_name in schema.items():
        if key not in obj:
            raise AssertionFailedError(
                f"Missing field {key!r}",
                actual=list(obj.keys()),
                expected=key,
            )
        expected_type = _TYPE_NAMES.get(type_name)
        if expected_type is None:
            raise ValueError(f"Unknown schema type {type_name!r}")
        value = obj[key]
        # bool is an int subclass; keep "number" from accepting True.
        if not isinstance(value, expected_type) or (
            isinstance(value, bool) and type_name != "boolean"
        ):
            raise AssertionFailedError(
                f"Field {key!r} is {type(value).__name__}, expected {type_name}",
                actual=value,
                expected=type_name,
            )


def extract_value(data: Any, path: str) -> Any:
    """Follow a dot path ("user.address.city", "products.0.id") into a body."""
    current = _body(data)
    for part in path.split("."):
        if isinstance(current, list) and part.isdigit():
            index = int(part)
            if index >= len(current):
                raise AssertionFailedError(
                    f"Index {index} out of range at {path!r}",
                    actual=len(current),
                    expected=path,
                )
            current = current[index]
        elif isinstance(current, dict) and part in current:
            current = current[part]
        else:
            raise AssertionFailedError(
                f"Path {path!r} not found",
                actual=current,
                expected=path,
            )
    return current
