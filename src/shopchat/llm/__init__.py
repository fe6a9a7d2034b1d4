from .base import CompletionClient
from .exceptions import (
    CompletionError,
    CompletionHTTPError,
    CompletionResponseError,
    CompletionTransportError,
)
from .factory import create_completion_client
from .models import ChatMessage, CompletionRequest
from .providers import GeminiCompletionClient, MockCompletionClient, OpenAICompletionClient

__all__ = [
    "CompletionClient",
    "create_completion_client",
    "ChatMessage",
    "CompletionRequest",
    "CompletionError",
    "CompletionHTTPError",
    "CompletionResponseError",
    "CompletionTransportError",
    "GeminiCompletionClient",
    "MockCompletionClient",
    "OpenAICompletionClient",
]
