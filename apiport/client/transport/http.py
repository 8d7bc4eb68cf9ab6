"""
aiohttp request handler for remote ApiPort service calls.

Author: Yobie Benjamin
Date: 2026-02-28
"""

import asyncio

import aiohttp
from loguru import logger
from multidict import CIMultiDict

from apiport.client.exceptions import RequestTimeoutError, TransportError
from apiport.client.transport.base import HttpRequest, HttpResponse

# Wire-level headers that no longer hold once aiohttp has decoded the body
DECODED_HEADERS = ("Content-Encoding", "Content-Length")


class AiohttpRequestHandler:
    """
    Handler that sends requests over a pooled aiohttp session.
    
    The session is created lazily on first use and shared by every request
    issued through this handler, so concurrent calls reuse connections.
    aiohttp undoes any transport content-coding it advertised in
    Accept-Encoding; the returned headers drop Content-Encoding and
    Content-Length so they describe the decoded body.
    """
    
    def __init__(self, timeout: float = 100.0):
        """
        Initialize the handler.
        
        Args:
            timeout: Total timeout per request in seconds
        """
        self.timeout = timeout
        self._session: aiohttp.ClientSession | None = None
        self._closed = False
    
    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        
        return self._session
    
    async def send(self, request: HttpRequest) -> HttpResponse:
        if self._closed:
            raise TransportError("Transport is closed")
        
        session = await self._get_session()
        
        try:
            async with session.request(
                request.method,
                request.url,
                headers=request.headers,
                data=request.content,
            ) as response:
                body = await response.read()
                headers = CIMultiDict(response.headers)
                for name in DECODED_HEADERS:
                    headers.popall(name, None)
                
                return HttpResponse(
                    status=response.status,
                    headers=headers,
                    body=body,
                )
        
        except aiohttp.ClientError as e:
            raise TransportError(f"HTTP request failed: {str(e)}") from e
        except asyncio.TimeoutError as e:
            raise RequestTimeoutError(f"Request timed out after {self.timeout}s") from e
    
    async def close(self) -> None:
        """Close handler and cleanup resources."""
        self._closed = True
        
        if self._session and not self._session.closed:
            await self._session.close()
            logger.debug("Closed aiohttp session")
