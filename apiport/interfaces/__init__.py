"""
Protocol-based interfaces for ApiPort collaborators.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from apiport.interfaces.progress import ProgressReporter

__all__ = ["ProgressReporter"]
