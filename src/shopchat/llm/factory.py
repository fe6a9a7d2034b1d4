from typing import Any

from .base import CompletionClient
from .providers import GeminiCompletionClient, MockCompletionClient, OpenAICompletionClient

SUPPORTED_PROVIDERS = ("openai", "gemini", "mock")


def create_completion_client(provider: str, **config: Any) -> CompletionClient:
    """Create a completion client instance.

    This factory function hides the instantiation logic for different backends.

    Args:
        provider: Backend type ('openai', 'gemini', 'mock' or its alias 'demo')
        **config: Backend-specific configuration
            For OpenAI:
                - api_key: str | None (None returns a configuration error reply)
                - model: str (default: 'gpt-4o')
                - base_url: str | None
                - timeout: float | None
            For Gemini:
                - api_key: str | None (None answers with canned replies)
                - model: str (default: 'gemini-2.5-flash')
            For mock:
                - delay: float (default: 1.0)

    Returns:
        Initialized completion client

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> client = create_completion_client("openai", api_key="sk-...")

        >>> client = create_completion_client("mock", delay=0)
    """
    provider_lower = provider.lower()

    if provider_lower == "openai":
        return OpenAICompletionClient(**config)

    if provider_lower == "gemini":
        return GeminiCompletionClient(**config)

    if provider_lower in ("mock", "demo"):
        return MockCompletionClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'openai', 'gemini', 'mock'"
    )
