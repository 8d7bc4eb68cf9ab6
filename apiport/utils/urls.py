"""
URL helpers shared by configuration and transport.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from yarl import URL


def is_absolute_url(url: str) -> bool:
    try:
        parsed = URL(url)
    except (TypeError, ValueError):
        return False
    return parsed.is_absolute() and bool(parsed.scheme)
