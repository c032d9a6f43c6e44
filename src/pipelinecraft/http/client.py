"""HTTP client used as an actor's API handle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from pipelinecraft.errors import ConnectionError, ErrorContext, RequestTimeoutError

logger = logging.getLogger(__name__)

# Distinguishes "no body" from a JSON null body.
_UNSET: Any = object()


@dataclass
class HTTPRequest:
    """Represents an HTTP request."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None

    def __str__(self) -> str:
        return f"{self.method} {self.url}"


@dataclass
class HTTPResponse:
    """Represents an HTTP response.

    ``body`` holds the parsed JSON document when the server sent JSON and the
    raw text otherwise; ``text`` always holds the raw text.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    text: str = ""
    request: HTTPRequest | None = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Return body as JSON (assumes body is already parsed)."""
        return self.body


class ApiClient:
    """Async HTTP client for the API under test.

    Relative endpoints resolve against ``base_url``; absolute URLs are sent
    as given.

    Example::

        async with ApiClient("https://dummyjson.com") as api:
            response = await api.get("/products", params={"limit": 5})
            print(response.status_code, response.json()["total"])
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        headers: dict[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.default_headers = headers or {}
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers=self.default_headers,
            transport=transport,
        )

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        headers: dict[str, str] | None = None,
        json: Any = _UNSET,
        params: dict[str, Any] | None = None,
    ) -> HTTPResponse:
        """Send one request and return the response, whatever its status.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            endpoint: Path relative to base_url, or an absolute URL
            headers: Additional headers merged over the defaults
            json: JSON body; omitted entirely when not given
            params: Query parameters

        Raises:
            RequestTimeoutError: The request timed out.
            ConnectionError: Any other transport failure.
        """
        method = method.upper()
        merged_headers = {**self.default_headers, **(headers or {})}
        request = HTTPRequest(
            method=method,
            url=str(self._client.build_request(method, endpoint, params=params).url),
            headers=merged_headers,
            body=None if json is _UNSET else json,
        )

        kwargs: dict[str, Any] = {"headers": headers, "params": params}
        if json is not _UNSET:
            kwargs["json"] = json

        logger.debug(f"{request}")
        try:
            resp = await self._client.request(method, endpoint, **kwargs)
        except httpx.TimeoutException as e:
            raise RequestTimeoutError(
                message=f"{request} timed out after {self.timeout}s",
                context=ErrorContext(request={"method": method, "url": request.url}),
                cause=e,
            ) from e
        except httpx.RequestError as e:
            raise ConnectionError(
                message=f"{request} failed: {e}",
                context=ErrorContext(request={"method": method, "url": request.url}),
                cause=e,
            ) from e

        if resp.headers.get("content-type", "").startswith("application/json"):
            try:
                body: Any = resp.json()
            except ValueError:
                body = resp.text
        else:
            body = resp.text

        logger.debug(f"{request} -> {resp.status_code}")
        return HTTPResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            body=body,
            text=resp.text,
            request=request,
        )

    async def get(self, endpoint: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("GET", endpoint, **kwargs)

    async def post(self, endpoint: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("POST", endpoint, **kwargs)

    async def put(self, endpoint: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("PUT", endpoint, **kwargs)

    async def patch(self, endpoint: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("PATCH", endpoint, **kwargs)

    async def delete(self, endpoint: str, **kwargs: Any) -> HTTPResponse:
        return await self.request("DELETE", endpoint, **kwargs)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
