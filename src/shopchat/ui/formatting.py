"""Text formatting utilities for the TUI and CLI.

Hides the details of how timestamps and failures are presented.
"""

from datetime import datetime


def format_timestamp(timestamp: datetime) -> str:
    """Format a message time as hour and minute, e.g. '3:07 PM'."""
    return timestamp.strftime("%I:%M %p").lstrip("0")


def describe_error(error: BaseException | None = None) -> str:
    """Build the user-facing explanation of a failed completion."""
    if error is not None and str(error):
        return (
            f"I encountered an error while trying to process your request: {error}. "
            "Please try again or contact support if the issue persists."
        )
    return (
        "I encountered an unexpected error while trying to process your request. "
        "Please try again or contact support if the issue persists."
    )
