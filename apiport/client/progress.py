"""
Default progress reporter that writes issues to the log.
"""

from collections import deque

from loguru import logger

MAX_RETAINED_ISSUES = 100


class LoggingProgressReporter:
    """
    Progress reporter used when the caller does not supply one.

    Only the most recent issues are retained; every issue is logged.
    """

    def __init__(self, max_issues: int = MAX_RETAINED_ISSUES):
        self.issues: deque[str] = deque(maxlen=max_issues)

    def report_issue(self, message: str) -> None:
        self.issues.append(message)
        logger.warning(message)
