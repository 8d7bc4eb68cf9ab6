"""
ApiPort Client SDK.

Submits an application's dependency surface to the API portability service
and retrieves the finished report.

Author: Yobie Benjamin
Date: 2026-02-28

Example Usage:
    ```python
    from apiport.client import (
        AnalyzeRequest,
        ApiPortService,
        ProductInformation,
        ResultFormat,
        ResultFormatInformation,
    )

    product = ProductInformation(name="ApiPort", version="1.0.0")
    request = AnalyzeRequest(application_name="MyApp", targets=[".NET Core, Version=8.0"])

    async with ApiPortService("https://portability.dot.net", product) as service:
        response = await service.submit_analysis(request)
        report = await service.fetch_report(
            response, ResultFormatInformation.from_format(ResultFormat.JSON)
        )
    ```
"""

from apiport.client.exceptions import (
    ApiPortError,
    AuthenticationError,
    ConfigurationError,
    DecodeError,
    RequestTimeoutError,
    ServiceError,
    TransportError,
    ValidationError,
)
from apiport.client.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    AssemblyInfo,
    AvailableTarget,
    MemberInfo,
    ProductInformation,
    ReportResult,
    ResultFormat,
    ResultFormatInformation,
)
from apiport.client.lifecycle import EndpointStatus, EndpointStatusMonitor
from apiport.client.progress import LoggingProgressReporter
from apiport.client.retry import DEFAULT_RETRY_DELAY, RetryDirective
from apiport.client.service import ApiPortService, Endpoints

__all__ = [
    # Exceptions
    "ApiPortError",
    "ConfigurationError",
    "ValidationError",
    "TransportError",
    "RequestTimeoutError",
    "ServiceError",
    "AuthenticationError",
    "DecodeError",
    # Models
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AssemblyInfo",
    "AvailableTarget",
    "MemberInfo",
    "ProductInformation",
    "ReportResult",
    "ResultFormat",
    "ResultFormatInformation",
    # Service
    "ApiPortService",
    "Endpoints",
    "EndpointStatus",
    "EndpointStatusMonitor",
    "LoggingProgressReporter",
    "RetryDirective",
    "DEFAULT_RETRY_DELAY",
]
