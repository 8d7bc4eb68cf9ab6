"""
Transport adapter bound to one ApiPort service address.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from collections.abc import Mapping

from loguru import logger
from multidict import CIMultiDict

from apiport.client.exceptions import ConfigurationError, TransportError
from apiport.client.models import ProductInformation
from apiport.client.transport.base import HttpRequest, HttpResponse, RequestHandler
from apiport.client.transport.http import AiohttpRequestHandler
from apiport.utils.urls import is_absolute_url

CLIENT_TYPE_HEADER = "Client-Type"
CLIENT_VERSION_HEADER = "Client-Version"


class ServiceTransport:
    """
    Issues GET/POST requests against a fixed base address.
    
    Every request is stamped with ``Client-Type`` and ``Client-Version`` so
    the service can make per-client-generation decisions. Relative paths are
    appended to the base address; absolute URLs are sent as-is.
    
    Example:
        ```python
        async with ServiceTransport("https://portability.dot.net", None, product) as transport:
            response = await transport.get("/api/target")
        ```
    """
    
    def __init__(
        self,
        base_url: str | None,
        handler: RequestHandler | None,
        product: ProductInformation,
        timeout: float = 100.0
    ):
        """
        Initialize the transport.
        
        Args:
            base_url: Absolute base address of the service
            handler: Send primitive; an aiohttp handler is created when None
            product: Client identity stamped onto every request
            timeout: Request timeout for the default handler
        
        Raises:
            ConfigurationError: If base_url is missing, blank or relative
        """
        if base_url is None or not base_url.strip():
            raise ConfigurationError("Service base URL must not be empty")
        
        base_url = base_url.strip()
        if not is_absolute_url(base_url):
            raise ConfigurationError(
                f"Service base URL must be absolute: {base_url!r}",
                details={"base_url": base_url},
            )
        
        self.base_url = base_url.rstrip("/")
        self.product = product
        self._handler = handler or AiohttpRequestHandler(timeout=timeout)
        self._closed = False
    
    @property
    def closed(self) -> bool:
        return self._closed
    
    def resolve(self, path_or_url: str) -> str:
        """Return the URL a request for ``path_or_url`` is sent to."""
        if is_absolute_url(path_or_url):
            return path_or_url
        return f"{self.base_url}/{path_or_url.lstrip('/')}"
    
    def _identity_headers(self, extra: Mapping[str, str] | None) -> CIMultiDict[str]:
        headers = CIMultiDict(extra or {})
        headers[CLIENT_TYPE_HEADER] = self.product.name
        headers[CLIENT_VERSION_HEADER] = self.product.version
        return headers
    
    async def send(self, request: HttpRequest) -> HttpResponse:
        if self._closed:
            raise TransportError("Transport is closed")
        
        logger.debug(f"{request.method} {request.url}")
        response = await self._handler.send(request)
        logger.debug(f"{request.method} {request.url} -> {response.status}")
        return response
    
    def build_request(
        self,
        method: str,
        path_or_url: str,
        content: bytes | None = None,
        headers: Mapping[str, str] | None = None
    ) -> HttpRequest:
        return HttpRequest(
            method=method,
            url=self.resolve(path_or_url),
            headers=self._identity_headers(headers),
            content=content,
        )
    
    async def get(
        self,
        path_or_url: str,
        headers: Mapping[str, str] | None = None
    ) -> HttpResponse:
        return await self.send(self.build_request("GET", path_or_url, headers=headers))
    
    async def post(
        self,
        path_or_url: str,
        content: bytes,
        headers: Mapping[str, str] | None = None
    ) -> HttpResponse:
        return await self.send(
            self.build_request("POST", path_or_url, content=content, headers=headers)
        )
    
    async def close(self) -> None:
        """Release the handler and its pooled connections. Safe to call twice."""
        if self._closed:
            return
        
        self._closed = True
        await self._handler.close()
    
    async def __aenter__(self) -> "ServiceTransport":
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
