"""
ApiPort: client for the API portability analysis service.

Packages an application's dependency surface, submits it for analysis,
waits for the service to finish and downloads the report.

Author: Yobie Benjamin
Date: 2026-02-28
"""

__version__ = "1.0.0"
__author__ = "Yobie Benjamin"
__license__ = "MIT"

from apiport.client import (
    AnalyzeRequest,
    AnalyzeResponse,
    ApiPortService,
    ProductInformation,
    ResultFormat,
    ResultFormatInformation,
)
from apiport.interfaces import ProgressReporter

__all__ = [
    "ApiPortService",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "ProductInformation",
    "ResultFormat",
    "ResultFormatInformation",
    "ProgressReporter",
]
