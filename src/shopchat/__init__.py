"""
Shopchat: a terminal chat assistant for shop management.

A Textual chat panel in front of a single-turn completion client
(OpenAI, Gemini, or canned demo replies).
"""

__version__ = "0.1.0"

from .llm import (
    CompletionClient,
    CompletionError,
    create_completion_client,
)
from .ui.models import Message
from .ui.session import ChatSession

__all__ = [
    "ChatSession",
    "CompletionClient",
    "CompletionError",
    "Message",
    "create_completion_client",
]
