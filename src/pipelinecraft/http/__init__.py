"""HTTP API handle."""

from pipelinecraft.http.client import ApiClient, HTTPRequest, HTTPResponse

__all__ = ["ApiClient", "HTTPRequest", "HTTPResponse"]
