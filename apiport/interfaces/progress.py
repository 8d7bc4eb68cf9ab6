"""
Progress sink protocol.

Author: Yobie Benjamin
Date: 2026-02-28
"""

from typing import Protocol


class ProgressReporter(Protocol):
    """
    Receives human-readable notifications during long operations.

    Implemented by the host application (console, IDE, service log).
    """

    def report_issue(self, message: str) -> None:
        """
        Report an issue the user should see.

        Args:
            message: Localized, human-readable text
        """
        ...
