"""
Endpoint lifecycle signals carried on service responses.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from enum import Enum

from loguru import logger

from apiport.client.transport.base import HttpResponse
from apiport.interfaces.progress import ProgressReporter
from apiport.resources import LocalizedStrings

ENDPOINT_STATUS_HEADER = "EndpointStatus"


class EndpointStatus(str, Enum):
    """Support state of the endpoint that answered a request."""
    NORMAL = "Normal"
    DEPRECATED = "Deprecated"

    @classmethod
    def parse(cls, value: str | None) -> "EndpointStatus | None":
        """Map a header value to a status, ignoring case; None if unknown."""
        if value is None:
            return None

        value = value.strip().lower()
        for status in cls:
            if status.value.lower() == value:
                return status
        return None


class EndpointStatusMonitor:
    """
    Inspects every response for the lifecycle-status header.

    Deprecation is informational: it is forwarded to the progress reporter
    and never interrupts the call that carried it.
    """

    def __init__(self, reporter: ProgressReporter):
        self.reporter = reporter

    def inspect(self, response: HttpResponse) -> EndpointStatus | None:
        raw = response.headers.get(ENDPOINT_STATUS_HEADER)
        if raw is None:
            return None

        status = EndpointStatus.parse(raw)
        if status is None:
            logger.debug(LocalizedStrings.UNKNOWN_ENDPOINT_STATUS.format(status=raw))
        elif status is EndpointStatus.DEPRECATED:
            logger.debug(f"{ENDPOINT_STATUS_HEADER}: {raw}")
            self.reporter.report_issue(LocalizedStrings.SERVER_ENDPOINT_DEPRECATED)

        return status
