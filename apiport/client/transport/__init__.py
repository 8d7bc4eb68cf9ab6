"""
ApiPort transport layer.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from apiport.client.transport.adapter import (
    CLIENT_TYPE_HEADER,
    CLIENT_VERSION_HEADER,
    ServiceTransport,
)
from apiport.client.transport.base import HttpRequest, HttpResponse, RequestHandler
from apiport.client.transport.http import AiohttpRequestHandler

__all__ = [
    "RequestHandler",
    "HttpRequest",
    "HttpResponse",
    "AiohttpRequestHandler",
    "ServiceTransport",
    "CLIENT_TYPE_HEADER",
    "CLIENT_VERSION_HEADER",
]
