"""
Configuration management for the ApiPort client.

Uses Pydantic BaseSettings for type-safe, validated configuration
with support for environment variables and .env files.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from apiport.config.settings import ApiPortSettings, get_settings

__all__ = [
    "ApiPortSettings",
    "get_settings",
]
