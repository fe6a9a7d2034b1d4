from typing import Any

import openai
from openai import AsyncOpenAI

from ...prompts import get_system_prompt
from ..base import CompletionClient
from ..exceptions import (
    CompletionError,
    CompletionHTTPError,
    CompletionResponseError,
    CompletionTransportError,
)
from ..models import CompletionRequest

DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 500

MISSING_API_KEY_MESSAGE = (
    "Error: API key is not configured. Please check your environment variables."
)


def _upstream_message(error: openai.APIStatusError) -> str | None:
    """Pull the human-readable message out of an OpenAI error body."""
    body = error.body
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None


class OpenAICompletionClient(CompletionClient):
    """OpenAI chat-completions client.

    Hidden design decisions:
    - OpenAI API client initialization (created only when a key is present)
    - Single-turn message construction with the system instruction
    - Mapping of SDK exceptions onto CompletionError subclasses
    - SDK retries disabled; every send is exactly one request
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        system_prompt: str | None = None,
        base_url: str | None = None,
        **client_kwargs: Any
    ):
        """Initialize OpenAI client.

        Args:
            api_key: OpenAI API key. When empty, generate_response returns
                MISSING_API_KEY_MESSAGE without touching the network.
            model: Model name sent with every request
            temperature: Sampling temperature
            max_tokens: Maximum tokens to generate
            system_prompt: System instruction (defaults to prompts/system.txt)
            base_url: Optional custom API base URL
            **client_kwargs: Additional kwargs for AsyncOpenAI client
        """
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._system_prompt = system_prompt or get_system_prompt()
        self._client: AsyncOpenAI | None = None
        if api_key:
            client_kwargs.setdefault("max_retries", 0)
            self._client = AsyncOpenAI(
                api_key=api_key,
                base_url=base_url,
                **client_kwargs
            )

    @property
    def model(self) -> str:
        """Get the model name."""
        return self._model

    @property
    def is_configured(self) -> bool:
        """Whether an API key was supplied."""
        return self._client is not None

    async def generate_response(self, prompt: str) -> str:
        """Generate a reply using the Chat Completions API.

        Args:
            prompt: The user's latest message

        Returns:
            Reply text, or MISSING_API_KEY_MESSAGE if no key is configured

        Raises:
            CompletionHTTPError: Non-success HTTP status
            CompletionResponseError: Response without choices or content
            CompletionTransportError: Connection failure or timeout
        """
        self._debug("info", "LLM", f"Calling OpenAI API with prompt: {prompt[:80]}")

        if self._client is None:
            self._debug("error", "LLM", "OpenAI API key is not defined in environment variables")
            return MISSING_API_KEY_MESSAGE

        request = CompletionRequest(prompt=prompt, system_prompt=self._system_prompt)
        openai_messages = [
            {"role": msg.role, "content": msg.content}
            for msg in request.to_messages()
        ]

        try:
            completion = await self._client.chat.completions.create(
                model=self._model,
                messages=openai_messages,
                temperature=self._temperature,
                max_tokens=self._max_tokens,
            )
        except openai.APIStatusError as e:
            self._debug("error", "LLM", f"OpenAI API error: {e.status_code} {e.body}")
            raise CompletionHTTPError(e.status_code, _upstream_message(e)) from e
        except openai.APIConnectionError as e:
            self._debug("error", "LLM", f"OpenAI API unreachable: {e}")
            raise CompletionTransportError(str(e)) from e
        except openai.APIResponseValidationError as e:
            raise CompletionResponseError("Failed to get a valid response from OpenAI API") from e
        except openai.APIError as e:
            raise CompletionError(str(e)) from e

        # Lenient SDK parsing leaves missing fields unset rather than failing
        choices = getattr(completion, "choices", None)
        if not choices:
            raise CompletionResponseError("Failed to get a valid response from OpenAI API")

        message = getattr(choices[0], "message", None)
        content = getattr(message, "content", None)
        if not content:
            raise CompletionResponseError("Failed to get a valid response from OpenAI API")

        self._debug("debug", "LLM", f"Received {len(content)} characters")
        return content

    async def close(self) -> None:
        """Close the OpenAI client.

        Note: Uses the OpenAI SDK's async close for proper cleanup.
        See: https://github.com/openai/openai-python#async-usage
        """
        if self._client is not None:
            await self._client.close()
