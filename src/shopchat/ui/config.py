"""UI configuration constants.

Centralizes magic numbers and user-facing strings for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Chat panel text
APP_TITLE = "AI Assistant"
ASSISTANT_NAME = "Shop Assistant"
USER_NAME = "You"
INPUT_PLACEHOLDER = "Type your message..."
EMPTY_STATE_TITLE = "No messages yet"
EMPTY_STATE_HINT = (
    "Ask the AI for help with inventory management, sales strategies, "
    "customer service, or any other shop-related questions."
)

# Failure notification
ERROR_TITLE = "Error"
FAILED_RESPONSE_MESSAGE = "Failed to get a response from the AI. Please try again."
ERROR_NOTIFY_TIMEOUT = 5  # Seconds the error toast stays visible

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
