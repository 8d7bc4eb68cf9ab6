"""
Pydantic-based configuration settings for the ApiPort client.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from apiport.utils.urls import is_absolute_url


class ApiPortSettings(BaseSettings):
    """
    Configuration for the ApiPort client.
    
    Configuration can be provided via:
    - Environment variables with APIPORT_ prefix
    - .env file in current directory
    - Direct instantiation with kwargs
    
    Example:
        ```python
        # From environment
        settings = ApiPortSettings()
        
        # Direct configuration
        settings = ApiPortSettings(
            service_url="https://portability.example.com",
            default_retry_delay_seconds=2.0,
        )
        ```
    """
    
    model_config = SettingsConfigDict(
        env_prefix="APIPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    service_url: str = "https://portability.dot.net"
    request_timeout_seconds: float = Field(default=100.0, gt=0)
    default_retry_delay_seconds: float = Field(default=1.0, gt=0)
    
    log_level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_file: Path | None = None
    
    @field_validator("service_url")
    @classmethod
    def validate_service_url(cls, v: str) -> str:
        """Reject blank or relative service URLs early."""
        v = v.strip()
        if not v:
            raise ValueError("service_url must not be empty")
        if not is_absolute_url(v):
            raise ValueError(f"service_url must be an absolute URL: {v!r}")
        return v
    
    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


@lru_cache
def get_settings(env_file: str | None = None) -> ApiPortSettings:
    """
    Get cached settings instance.
    
    To reload settings, clear the cache with `get_settings.cache_clear()`.
    
    Args:
        env_file: Optional path to .env file
    
    Returns:
        Settings instance
    """
    if env_file:
        return ApiPortSettings(_env_file=env_file)
    
    return ApiPortSettings()
