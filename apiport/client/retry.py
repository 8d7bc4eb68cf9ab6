"""
Server-directed retry timing for deferred (HTTP 202) responses.

Author: Yobie Benjamin
Date: 2026-02-28
"""

import asyncio
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from apiport.client.transport.base import HttpResponse

DEFAULT_RETRY_DELAY = 1.0
"""Seconds to wait when Retry-After is missing, unparseable or not positive."""


def parse_retry_after(value: str | None, now: datetime | None = None) -> float | None:
    """
    Parse a Retry-After header value into seconds.
    
    Accepts delta-seconds (fractions allowed) or an HTTP-date.
    
    Args:
        value: Raw header value
        now: Reference time for HTTP-date values (defaults to current UTC time)
    
    Returns:
        Delay in seconds, or None if the value cannot be parsed
    """
    if value is None:
        return None
    
    value = value.strip()
    if not value:
        return None
    
    try:
        seconds = float(value)
    except ValueError:
        pass
    else:
        return seconds if math.isfinite(seconds) else None
    
    try:
        when = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    
    if when.tzinfo is None:
        when = when.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)
    return (when - now).total_seconds()


@dataclass(frozen=True)
class RetryDirective:
    """How long to wait before re-polling, taken from one deferred response."""
    delay: float
    
    @classmethod
    def from_response(
        cls,
        response: HttpResponse,
        default_delay: float = DEFAULT_RETRY_DELAY
    ) -> "RetryDirective":
        delay = parse_retry_after(response.headers.get("Retry-After"))
        if delay is None or delay <= 0:
            delay = default_delay
        return cls(delay=delay)
    
    async def wait(self) -> None:
        """Suspend the current task; cancellation interrupts the wait."""
        await asyncio.sleep(self.delay)
