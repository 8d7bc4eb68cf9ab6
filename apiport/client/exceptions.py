"""
ApiPort client exceptions.

Author: Yobie Benjamin
Date: 2026-02-28
"""


class ApiPortError(Exception):
    """Base exception for all ApiPort client errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ApiPortError, ValueError):
    """Raised when the client is misconfigured."""
    pass


class ValidationError(ApiPortError, ValueError):
    """Raised when call arguments are invalid."""
    pass


class TransportError(ApiPortError):
    """Raised when transport/communication fails."""
    pass


class RequestTimeoutError(TransportError):
    """Raised when a request times out."""
    pass


class ServiceError(ApiPortError):
    """Raised when the service answers with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        body: str = "",
        details: dict | None = None
    ):
        super().__init__(message, details)
        self.status_code = status_code
        self.body = body

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


class AuthenticationError(ServiceError):
    """Raised when the service rejects the caller's credentials."""
    pass


class DecodeError(ApiPortError):
    """Raised when structured or compressed content cannot be decoded."""
    pass
