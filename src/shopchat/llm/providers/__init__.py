from .gemini import GeminiCompletionClient
from .mock import MockCompletionClient
from .openai import OpenAICompletionClient

__all__ = ["GeminiCompletionClient", "MockCompletionClient", "OpenAICompletionClient"]
