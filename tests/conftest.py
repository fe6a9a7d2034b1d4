"""Pytest configuration and shared fixtures."""
import os

import pytest

from shopchat.llm import CompletionClient


class StubClient(CompletionClient):
    """Completion client that records prompts and answers from a script."""

    def __init__(self, reply: str = "Reorder weekly.", error: Exception | None = None, reply_fn=None):
        self.prompts: list[str] = []
        self.events: list[str] | None = None
        self.closed = False
        self._reply = reply
        self._error = error
        self._reply_fn = reply_fn

    @property
    def model(self) -> str:
        return "stub"

    async def generate_response(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.events is not None:
            self.events.append("call")
        if self._error is not None:
            raise self._error
        if self._reply_fn is not None:
            return self._reply_fn(prompt)
        return self._reply

    async def close(self) -> None:
        self.closed = True


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "openai": os.getenv("OPENAI_API_KEY"),
        "gemini": os.getenv("GEMINI_API_KEY"),
    }


@pytest.fixture
def stub_client():
    """Return a stub completion client with a fixed reply."""
    return StubClient()


@pytest.fixture
def make_stub():
    """Return the StubClient class for tests that need custom behaviour."""
    return StubClient
