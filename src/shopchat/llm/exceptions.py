"""Errors raised by completion clients.

None of these are retried; callers turn them into user-facing messages.
"""


class CompletionError(Exception):
    """Base class for completion failures."""


class CompletionHTTPError(CompletionError):
    """The endpoint answered with a non-success status."""

    def __init__(self, status_code: int, message: str | None = None):
        self.status_code = status_code
        self.upstream_message = message or "Unknown error"
        super().__init__(
            f"API request failed with status {status_code}: {self.upstream_message}"
        )


class CompletionResponseError(CompletionError):
    """The endpoint answered but the payload held no usable reply."""


class CompletionTransportError(CompletionError):
    """Network or connection error before a response arrived."""

    def __init__(self, message: str):
        super().__init__(f"Network error: {message}")
