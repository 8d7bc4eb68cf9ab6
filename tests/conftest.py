"""Shared fixtures for ApiPort client tests."""

from typing import Callable
from unittest.mock import Mock

import pytest
from multidict import CIMultiDict

from apiport.client.models import (
    AnalyzeRequest,
    AssemblyInfo,
    MemberInfo,
    ProductInformation,
)
from apiport.client.transport.base import HttpRequest, HttpResponse
from apiport.interfaces.progress import ProgressReporter


def json_response(body: str = "{}", status: int = 200, **headers: str) -> HttpResponse:
    """Build an in-memory JSON response; header kwargs use underscores for dashes."""
    response_headers = CIMultiDict({"Content-Type": "application/json"})
    for name, value in headers.items():
        response_headers[name.replace("_", "-")] = value
    return HttpResponse(status=status, headers=response_headers, body=body.encode("utf-8"))


class FakeHandler:
    """RequestHandler that answers from a callback instead of the network."""

    def __init__(self, converter: Callable[[HttpRequest], HttpResponse]):
        self.converter = converter
        self.requests: list[HttpRequest] = []
        self.close_calls = 0

    async def send(self, request: HttpRequest) -> HttpResponse:
        self.requests.append(request)
        return self.converter(request)

    async def close(self) -> None:
        self.close_calls += 1


@pytest.fixture
def product():
    return ProductInformation(name="ApiPort_Tests", version="1.0.0")


@pytest.fixture
def reporter():
    return Mock(spec=ProgressReporter)


@pytest.fixture
def analyze_request():
    return AnalyzeRequest(
        application_name="name",
        dependencies={
            MemberInfo(member_doc_id="item1"): frozenset({
                AssemblyInfo(assembly_identity="string1"),
                AssemblyInfo(assembly_identity="string2"),
            })
        },
        targets=["target1", "target2"],
        unresolved_assemblies=["assembly1", "assembly2"],
        user_assemblies=[
            AssemblyInfo(assembly_identity="name1"),
            AssemblyInfo(assembly_identity="name2"),
        ],
        version=AnalyzeRequest.CURRENT_VERSION,
    )
