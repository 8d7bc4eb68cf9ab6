"""
Transport protocol for the ApiPort client.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from dataclasses import dataclass, field
from typing import Protocol

from multidict import CIMultiDict


@dataclass
class HttpRequest:
    """An outbound HTTP request."""
    method: str
    url: str
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    content: bytes | None = None


@dataclass
class HttpResponse:
    """An inbound HTTP response with its body fully read."""
    status: int
    headers: CIMultiDict[str] = field(default_factory=CIMultiDict)
    body: bytes = b""

    @property
    def content_type(self) -> str | None:
        value = self.headers.get("Content-Type")
        if not value:
            return None
        return value.split(";", 1)[0].strip()

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class RequestHandler(Protocol):
    """Send primitive underneath the transport; swap it out in tests."""

    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request and read the whole response.

        Args:
            request: Fully addressed request

        Returns:
            The response, whatever its status code

        Raises:
            TransportError: If communication fails
            RequestTimeoutError: If the request times out
        """
        ...

    async def close(self) -> None:
        """Close the handler and release pooled connections."""
        ...
