"""Main Textual TUI application.

Orchestrates the UI components and routes sends through the ChatSession.
"""

import asyncio
import contextlib

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..llm import CompletionClient
from .config import (
    APP_TITLE,
    ERROR_NOTIFY_TIMEOUT,
    ERROR_TITLE,
    FAILED_RESPONSE_MESSAGE,
    LogLevel,
)
from .models import Message
from .session import ChatSession
from .styles import APP_CSS
from .themes import SHOPFRONT_DARK
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel


class ShopChatApp(App):
    """Textual chat panel for the shop assistant."""

    CSS = APP_CSS
    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+r", "copy_last_response", "Copy Response", priority=True),
        Binding("ctrl+d", "toggle_debug", "Debug", priority=True),
    ]

    def __init__(self, client: CompletionClient, log_level: str | None = None) -> None:
        super().__init__()
        self._log_level = log_level
        self.session = ChatSession(
            client,
            on_message=self._on_session_message,
            on_loading=self._on_session_loading,
            on_error=self._on_session_error,
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield ChatHistoryWidget(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(SHOPFRONT_DARK)
        self.theme = "shopfront-dark"

        client = self.session.client
        self.sub_title = f"Powered by {getattr(client, 'model', type(client).__name__)}"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.show()
            log_panel.info("TUI", f"Log panel enabled with level: {self._log_level.upper()}")
        client.set_debug_callback(self._route_debug)

        self.query_one("#chat-input-bar", ChatInputBar).focus_input()

    def _route_debug(self, level: str, component: str, message: str) -> None:
        """Route client debug records to the log panel."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        log_panel.log(component, message, LogLevel.from_string(level))

    def _on_session_message(self, message: Message) -> None:
        self.query_one("#chat-history", ChatHistoryWidget).add_message(message)

    def _on_session_loading(self, loading: bool) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(loading)

    def _on_session_error(self, error: Exception) -> None:
        self.query_one("#debug-panel", DebugPanel).error("TUI", f"Error getting AI response: {error}")
        self.notify(
            FAILED_RESPONSE_MESSAGE,
            title=ERROR_TITLE,
            severity="error",
            timeout=ERROR_NOTIFY_TIMEOUT,
        )

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        """Handle user input submission."""
        self._send(event.value)

    @work(exclusive=True, group="send")
    async def _send(self, text: str) -> None:
        """Run one send as a background async worker."""
        try:
            await self.session.send(text)
        except asyncio.CancelledError:
            self.notify("Cancelled", severity="warning", timeout=2)
        except Exception as e:
            self._on_session_error(e)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy last assistant response to clipboard."""
        response = self.session.last_response()
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_chat_app(client: CompletionClient, log_level: str | None = None) -> None:
    """Run the Textual chat panel.

    Args:
        client: Completion client answering prompts
        log_level: Log level for panel (debug/info/warning/error), None to hide
    """
    app = ShopChatApp(client=client, log_level=log_level)
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(RuntimeError):
            await client.close()
