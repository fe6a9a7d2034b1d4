from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

DebugCallback = Callable[[str, str, str], None]


class CompletionClient(ABC):
    """Abstract base class for completion clients.

    This module hides the design decision of which backend answers prompts.
    Implementations must handle backend-specific details like:
    - API client setup and authentication
    - Request/response format conversion
    - Mapping backend failures onto CompletionError

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            reply = await client.generate_response("How do I cut costs?")
        # Automatically cleaned up
    """

    _debug_callback: DebugCallback | None = None

    @abstractmethod
    async def generate_response(self, prompt: str) -> str:
        """Generate an assistant reply for a single prompt.

        Args:
            prompt: The user's latest message

        Returns:
            Reply text

        Raises:
            CompletionError: If the backend fails or returns an unusable payload
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    def set_debug_callback(self, callback: DebugCallback | None) -> None:
        """Set the debug callback for request tracing.

        Args:
            callback: Callable(level: str, component: str, message: str)
                      level: 'debug', 'info', 'warning', 'error'
        """
        self._debug_callback = callback

    def _debug(self, level: str, component: str, message: str) -> None:
        if self._debug_callback:
            self._debug_callback(level, component, message)

    async def __aenter__(self) -> "CompletionClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
