"""pytest fixtures that build actors and their handles.

Every fixture is function-scoped: each test gets its own browser, page,
API client and actor, and they are closed when the test ends. Sharing an
actor between tests is not supported.

Load with ``pytest_plugins = ["pipelinecraft.testing.fixtures"]`` in the
root conftest.py.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from playwright.async_api import Browser, Page, async_playwright

from pipelinecraft.config import Settings, load_settings
from pipelinecraft.http import ApiClient
from pipelinecraft.screenplay import ApiUser, Shopper


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("pipelinecraft", "PipelineCraft options")
    group.addoption(
        "--network",
        action="store_true",
        default=False,
        help="Run tests marked 'network' against the live demo sites",
    )
    group.addoption(
        "--pipelinecraft-config",
        action="store",
        default=None,
        help="Path to a pipelinecraft.yaml settings file",
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "network: needs the live SauceDemo/DummyJSON sites")
    config.addinivalue_line("markers", "smoke: quick checks of the main flows")
    config.addinivalue_line("markers", "regression: full regression suite")
    config.addinivalue_line("markers", "wip: work in progress, excluded by default")


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    if config.getoption("--network"):
        return
    skip_network = pytest.mark.skip(reason="needs --network")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture
def settings(pytestconfig: pytest.Config) -> Settings:
    return load_settings(pytestconfig.getoption("--pipelinecraft-config"))


@pytest_asyncio.fixture
async def api_client(settings: Settings) -> AsyncIterator[ApiClient]:
    async with ApiClient(settings.api_url, timeout=settings.api_timeout) as client:
        yield client


@pytest.fixture
def api_user(api_client: ApiClient) -> ApiUser:
    return ApiUser.named("Emily", api_client)


@pytest_asyncio.fixture
async def browser(settings: Settings) -> AsyncIterator[Browser]:
    async with async_playwright() as p:
        browser_type = getattr(p, settings.browser)
        browser = await browser_type.launch(headless=settings.headless, slow_mo=settings.slow_mo)
        yield browser
        await browser.close()


@pytest_asyncio.fixture
async def page(browser: Browser, settings: Settings) -> AsyncIterator[Page]:
    context = await browser.new_context(base_url=settings.base_url)
    context.set_default_timeout(settings.timeout_ms)
    page = await context.new_page()
    yield page
    await page.close()
    await context.close()


@pytest.fixture
def shopper(page: Page) -> Shopper:
    return Shopper.named("Sam", page)
