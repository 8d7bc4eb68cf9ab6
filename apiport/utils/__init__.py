"""
Utility functions for the ApiPort client.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from apiport.utils.logging import setup_logging, setup_logging_from_settings
from apiport.utils.urls import is_absolute_url

__all__ = ["setup_logging", "setup_logging_from_settings", "is_absolute_url"]
