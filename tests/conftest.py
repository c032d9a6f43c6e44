"""Pytest fixtures for PipelineCraft unit tests.

The fakes stand in for a Playwright page and for the API client, so the
Screenplay layer can be exercised without a browser or network.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import DEFAULT, AsyncMock, MagicMock

import pytest

from pipelinecraft.http import ApiClient, HTTPResponse
from pipelinecraft.screenplay import ApiUser, Shopper


def make_response(
    status_code: int = 200,
    body: Any = None,
    text: str | None = None,
    headers: dict[str, str] | None = None,
) -> HTTPResponse:
    """Build an HTTPResponse the way ApiClient would for a JSON reply."""
    if text is None:
        text = json.dumps(body) if body is not None else ""
    return HTTPResponse(
        status_code=status_code,
        headers=headers or {"content-type": "application/json"},
        body=body,
        text=text,
    )


class FakeLocator:
    """Locator double whose async methods can be inspected."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        self.wait_for = AsyncMock()
        self.click = AsyncMock()
        self.select_option = AsyncMock()
        self.count = AsyncMock(return_value=0)
        self.all_text_contents = AsyncMock(return_value=[])


class FakePage:
    """Page double recording the calls made by interactions and page objects.

    ``locator(selector)`` returns the same FakeLocator for the same selector,
    so tests can configure it before the code under test asks for it.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.goto = self._recorded("goto")
        self.fill = self._recorded("fill")
        self.click = self._recorded("click")
        self.wait_for_load_state = self._recorded("wait_for_load_state")
        self.wait_for_selector = self._recorded("wait_for_selector")
        self.wait_for_timeout = self._recorded("wait_for_timeout")
        self.text_content = self._recorded("text_content", None)
        self.is_visible = self._recorded("is_visible", False)
        self.get_attribute = self._recorded("get_attribute", None)
        self.locators: dict[str, FakeLocator] = {}
        self.locator = MagicMock(side_effect=self._locator)

    def _recorded(self, name: str, return_value: Any = None) -> AsyncMock:
        def record(*args: Any, **kwargs: Any) -> Any:
            self.calls.append((name, args))
            return DEFAULT

        return AsyncMock(return_value=return_value, side_effect=record)

    def _locator(self, selector: str) -> FakeLocator:
        if selector not in self.locators:
            self.locators[selector] = FakeLocator(selector)
        return self.locators[selector]


@pytest.fixture
def fake_page() -> FakePage:
    return FakePage()


@pytest.fixture
def fake_api() -> AsyncMock:
    """API client double; set ``return_value`` on get/post/put/delete/request."""
    api = AsyncMock(spec=ApiClient)
    api.request.return_value = make_response(200, {})
    api.get.return_value = make_response(200, {})
    api.post.return_value = make_response(200, {})
    api.put.return_value = make_response(200, {})
    api.patch.return_value = make_response(200, {})
    api.delete.return_value = make_response(200, {})
    return api


@pytest.fixture
def fake_shopper(fake_page: FakePage) -> Shopper:
    return Shopper.named("Sam", fake_page)


@pytest.fixture
def fake_api_user(fake_api: AsyncMock) -> ApiUser:
    return ApiUser.named("Emily", fake_api)
