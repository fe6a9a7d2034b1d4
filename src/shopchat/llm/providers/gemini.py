"""Google Gemini completion client.

Uses the official Google GenAI SDK for async content generation.
Reference: https://github.com/googleapis/python-genai

Without an API key every prompt is answered by the fallback client
(canned replies by default), so demos work with no credentials.
"""

from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from ...prompts import get_system_prompt
from ..base import CompletionClient, DebugCallback
from ..exceptions import (
    CompletionHTTPError,
    CompletionResponseError,
    CompletionTransportError,
)
from .mock import MockCompletionClient

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiCompletionClient(CompletionClient):
    """Google Gemini completion client.

    Hidden design decisions:
    - Google GenAI client initialization
    - Fixed sampling configuration (temperature, top-k, top-p, output limit)
    - Delegation to a fallback client when no key is configured
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        top_k: int = 40,
        top_p: float = 0.95,
        max_output_tokens: int = 1024,
        system_prompt: str | None = None,
        fallback: CompletionClient | None = None,
        **client_kwargs: Any
    ):
        """Initialize Gemini client.

        Args:
            api_key: Google AI API key; None routes prompts to the fallback
            model: Model name
            temperature: Sampling temperature
            top_k: Top-k sampling
            top_p: Nucleus sampling
            max_output_tokens: Maximum tokens to generate
            system_prompt: System instruction (defaults to prompts/system.txt)
            fallback: Client used without a key (MockCompletionClient by default)
            **client_kwargs: Additional kwargs for genai.Client
        """
        self._model = model
        self._config = types.GenerateContentConfig(
            temperature=temperature,
            top_k=top_k,
            top_p=top_p,
            max_output_tokens=max_output_tokens,
            system_instruction=system_prompt or get_system_prompt(),
        )
        self._client = genai.Client(api_key=api_key, **client_kwargs) if api_key else None
        self._fallback = fallback or MockCompletionClient()

    @property
    def model(self) -> str:
        return self._model if self._client is not None else self._fallback_model

    @property
    def _fallback_model(self) -> str:
        return getattr(self._fallback, "model", "fallback")

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        super().set_debug_callback(callback)
        self._fallback.set_debug_callback(callback)

    def _extract_content(self, response: types.GenerateContentResponse) -> str:
        """Extract text from the first candidate, or empty string."""
        if response.candidates:
            candidate = response.candidates[0]
            if candidate.content and candidate.content.parts:
                texts = [part.text for part in candidate.content.parts if part.text]
                return "".join(texts)
        return ""

    async def generate_response(self, prompt: str) -> str:
        """Generate a reply using Gemini, or the fallback without a key.

        Raises:
            CompletionHTTPError: Gemini API returned an error status
            CompletionResponseError: No candidate text in the response
            CompletionTransportError: Connection or other request failure
        """
        if self._client is None:
            return await self._fallback.generate_response(prompt)

        self._debug("info", "LLM", f"Calling Gemini API with prompt: {prompt[:80]}")
        try:
            response = await self._client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=self._config,
            )
        except genai_errors.APIError as e:
            self._debug("error", "LLM", f"Gemini API error: {e}")
            raise CompletionHTTPError(e.code, getattr(e, "message", None)) from e
        except Exception as e:
            # The SDK uses aiohttp when it is installed, httpx otherwise
            self._debug("error", "LLM", f"Gemini request failed: {e}")
            raise CompletionTransportError(str(e)) from e

        content = self._extract_content(response)
        if not content:
            raise CompletionResponseError("Failed to get a valid response from Gemini API")
        return content

    async def close(self) -> None:
        await self._fallback.close()
