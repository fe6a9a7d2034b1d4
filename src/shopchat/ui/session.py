"""Chat session state.

Hides how the message list and loading flag evolve during a send, so the
same rules apply whether the session is driven by the TUI or by tests.
"""

from collections.abc import Callable

from ..llm import CompletionClient, CompletionError
from .models import Message


class ChatSession:
    """Append-only conversation with a single completion client.

    Callbacks:
        on_message: called with each message right after it is appended
        on_loading: called with the new value whenever the loading flag flips
        on_error: called with the CompletionError of a failed send
    """

    def __init__(
        self,
        client: CompletionClient,
        on_message: Callable[[Message], None] | None = None,
        on_loading: Callable[[bool], None] | None = None,
        on_error: Callable[[CompletionError], None] | None = None,
    ) -> None:
        self._client = client
        self._messages: list[Message] = []
        self._is_loading = False
        self._on_message = on_message
        self._on_loading = on_loading
        self._on_error = on_error

    @property
    def client(self) -> CompletionClient:
        return self._client

    @property
    def messages(self) -> tuple[Message, ...]:
        """Messages in insertion order."""
        return tuple(self._messages)

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    def _append(self, role: str, content: str) -> Message:
        message = Message(role=role, content=content)
        self._messages.append(message)
        if self._on_message:
            self._on_message(message)
        return message

    def _set_loading(self, value: bool) -> None:
        self._is_loading = value
        if self._on_loading:
            self._on_loading(value)

    async def send(self, text: str) -> Message | None:
        """Send user text and append the assistant reply.

        Blank text is ignored. A failed completion leaves only the user
        message behind and is reported through on_error.

        Args:
            text: Raw input text

        Returns:
            The assistant message, or None if nothing was answered
        """
        if not text.strip():
            return None

        self._append("user", text)
        self._set_loading(True)
        try:
            reply = await self._client.generate_response(text)
        except CompletionError as e:
            if self._on_error:
                self._on_error(e)
            return None
        finally:
            self._set_loading(False)

        return self._append("assistant", reply)

    def last_response(self) -> str | None:
        """Get the last assistant response."""
        for message in reversed(self._messages):
            if message.role == "assistant":
                return message.content
        return None
