"""
ApiPort service client: analysis submission and report retrieval.

Author: Yobie Benjamin
Date: 2026-02-28

Example Usage:
    ```python
    from apiport.client import ApiPortService, ProductInformation, ResultFormat
    
    product = ProductInformation(name="ApiPort", version="1.0.0")
    
    async with ApiPortService("https://portability.dot.net", product) as service:
        response = await service.submit_analysis(request)
        report = await service.fetch_report(
            response,
            ResultFormatInformation.from_format(ResultFormat.HTML),
        )
    ```
"""

from http import HTTPStatus
from typing import TypeVar

from loguru import logger

from apiport.client import codec
from apiport.client.exceptions import (
    AuthenticationError,
    ConfigurationError,
    ServiceError,
    ValidationError,
)
from apiport.client.lifecycle import EndpointStatusMonitor
from apiport.client.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    AvailableTarget,
    ProductInformation,
    ReportResult,
    ResultFormatInformation,
)
from apiport.client.progress import LoggingProgressReporter
from apiport.client.retry import DEFAULT_RETRY_DELAY, RetryDirective
from apiport.client.transport.adapter import ServiceTransport
from apiport.client.transport.base import HttpRequest, HttpResponse, RequestHandler
from apiport.config.settings import ApiPortSettings
from apiport.interfaces.progress import ProgressReporter
from apiport.resources import LocalizedStrings
from apiport.utils.urls import is_absolute_url

T = TypeVar("T")


class Endpoints:
    """Fixed service paths, relative to the base URL."""
    ANALYZE = "/api/analyze"
    RESULT_FORMATS = "/api/resultformat"
    DEFAULT_RESULT_FORMAT = "/api/resultformat/default"
    TARGETS = "/api/target"


class ApiPortService:
    """
    Client for the remote API portability analysis service.
    
    Submitting an analysis may complete immediately (200) or be deferred
    (202). Deferred responses are re-polled with the same request after the
    delay the service asks for in ``Retry-After``; there is no retry cap, so
    callers needing a deadline cancel the task (e.g. ``asyncio.wait_for``).
    
    Every response, including errors and intermediate 202s, is checked for
    an endpoint deprecation signal, which is forwarded to the progress
    reporter.
    """
    
    def __init__(
        self,
        base_url: str | None,
        product: ProductInformation,
        handler: RequestHandler | None = None,
        reporter: ProgressReporter | None = None,
        default_retry_delay: float = DEFAULT_RETRY_DELAY,
        timeout: float = 100.0
    ):
        """
        Initialize the service client.
        
        Args:
            base_url: Absolute base URL of the service
            product: Client identity sent as Client-Type / Client-Version
            handler: Send primitive (an aiohttp handler when None)
            reporter: Receives deprecation notices (logged when None)
            default_retry_delay: Seconds between polls when the service
                gives no usable Retry-After
            timeout: Per-request timeout for the default handler
        
        Raises:
            ConfigurationError: If base_url or default_retry_delay is invalid
        """
        if default_retry_delay <= 0:
            raise ConfigurationError(
                f"default_retry_delay must be positive, got {default_retry_delay}"
            )
        
        self._transport = ServiceTransport(base_url, handler, product, timeout=timeout)
        self.reporter = reporter or LoggingProgressReporter()
        self.default_retry_delay = default_retry_delay
        self._monitor = EndpointStatusMonitor(self.reporter)
    
    @classmethod
    def from_settings(
        cls,
        product: ProductInformation,
        settings: ApiPortSettings | None = None,
        handler: RequestHandler | None = None,
        reporter: ProgressReporter | None = None
    ) -> "ApiPortService":
        """Build a client from ``ApiPortSettings`` (environment by default)."""
        settings = settings or ApiPortSettings()
        return cls(
            settings.service_url,
            product,
            handler=handler,
            reporter=reporter,
            default_retry_delay=settings.default_retry_delay_seconds,
            timeout=settings.request_timeout_seconds,
        )
    
    @property
    def base_url(self) -> str:
        return self._transport.base_url
    
    async def close(self) -> None:
        await self._transport.close()
    
    async def __aenter__(self) -> "ApiPortService":
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
    
    async def _send(self, request: HttpRequest) -> HttpResponse:
        response = await self._transport.send(request)
        self._monitor.inspect(response)
        return response
    
    async def _send_until_complete(self, request: HttpRequest) -> HttpResponse:
        """Send ``request``, re-sending it while the service answers 202."""
        while True:
            response = await self._send(request)
            if response.status != HTTPStatus.ACCEPTED:
                return self._ensure_success(request, response)
            
            directive = RetryDirective.from_response(response, self.default_retry_delay)
            logger.debug(LocalizedStrings.ANALYSIS_PENDING.format(delay=directive.delay))
            await directive.wait()
    
    @staticmethod
    def _ensure_success(request: HttpRequest, response: HttpResponse) -> HttpResponse:
        if response.is_success:
            return response
        
        message = f"{request.method} {request.url} failed"
        details = {"url": request.url, "method": request.method}
        if response.status in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
            raise AuthenticationError(message, response.status, response.text, details)
        raise ServiceError(message, response.status, response.text, details)
    
    async def _get_json(self, path: str, type_: type[T]) -> T:
        request = self._transport.build_request(
            "GET", path, headers={"Accept": codec.JSON_CONTENT_TYPE}
        )
        response = self._ensure_success(request, await self._send(request))
        return codec.decode_response(response, type_)
    
    async def submit_analysis(self, request: AnalyzeRequest) -> AnalyzeResponse:
        """
        Submit an analysis request and wait for it to complete.
        
        Args:
            request: Dependency surface to analyze
        
        Returns:
            Location (and optional token) of the finished report
        
        Raises:
            ServiceError: On any non-success, non-deferred status
            DecodeError: If the final body is not an AnalyzeResponse
            TransportError: If communication fails
        """
        logger.info(
            f"Submitting analysis for '{request.application_name}' "
            f"({len(request.dependencies)} members, targets: {', '.join(request.targets) or 'default'})"
        )
        
        http_request = self._transport.build_request(
            "POST",
            Endpoints.ANALYZE,
            content=codec.serialize_compress(request),
            headers={
                "Content-Type": codec.JSON_CONTENT_TYPE,
                "Content-Encoding": codec.GZIP_ENCODING,
                "Accept": codec.JSON_CONTENT_TYPE,
            },
        )
        
        response = await self._send_until_complete(http_request)
        return codec.decode_response(response, AnalyzeResponse)
    
    async def get_result_formats(self) -> list[ResultFormatInformation]:
        return await self._get_json(Endpoints.RESULT_FORMATS, list[ResultFormatInformation])
    
    async def get_default_result_format(self) -> ResultFormatInformation:
        return await self._get_json(Endpoints.DEFAULT_RESULT_FORMAT, ResultFormatInformation)
    
    async def get_available_targets(self) -> list[AvailableTarget]:
        """Targets as full objects; bare identifier strings become name-only targets."""
        entries = await self._get_json(Endpoints.TARGETS, list[str | AvailableTarget])
        return [
            AvailableTarget(name=entry) if isinstance(entry, str) else entry
            for entry in entries
        ]
    
    async def get_targets(self) -> list[str]:
        """Identifiers of the platforms the service can analyze against."""
        return [target.identifier for target in await self.get_available_targets()]
    
    async def fetch_report(
        self,
        response: AnalyzeResponse,
        result_format: ResultFormatInformation
    ) -> ReportResult:
        """
        Download the report for a finished analysis.
        
        Args:
            response: Result of :meth:`submit_analysis`
            result_format: Desired representation (sent as Accept)
        
        Returns:
            Report bytes and the content type the service declared
        
        Raises:
            ValidationError: If the result location is empty or relative, or
                the format has no MIME type
            ServiceError: On any non-success, non-deferred status
            DecodeError: If the body carries an unsupported or malformed
                content-coding
        """
        result_url = (response.result_url or "").strip()
        if not result_url or not is_absolute_url(result_url):
            raise ValidationError(
                f"Result location must be an absolute URL: {response.result_url!r}"
            )
        if not result_format.mime_type:
            raise ValidationError("Result format has no MIME type")
        
        headers = {"Accept": result_format.mime_type}
        if response.result_auth_token:
            headers["Authorization"] = f"Bearer {response.result_auth_token}"
        
        request = self._transport.build_request("GET", result_url, headers=headers)
        result = await self._send_until_complete(request)
        
        data = codec.decode_content(result)
        
        logger.info(f"Fetched {len(data)} byte report from {result_url}")
        return ReportResult(data=data, mime_type=result.content_type)
