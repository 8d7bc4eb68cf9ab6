"""
User-facing strings reported by the ApiPort client.
"""


class LocalizedStrings:
    """English (en-US) message catalog."""

    SERVER_ENDPOINT_DEPRECATED = (
        "This version of the tool uses a server endpoint that is deprecated. "
        "Please update to the latest version of the tool."
    )
    UNKNOWN_ENDPOINT_STATUS = "Unrecognized endpoint status from server: {status}"
    ANALYSIS_PENDING = "Analysis in progress, checking again in {delay:.2f}s"
