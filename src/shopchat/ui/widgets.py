"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Enter/Shift+Enter handling in the prompt box
- Busy state of the input bar
- Chat message rendering and the empty-state hint
- Log rendering and level filtering
"""

from datetime import datetime

from rich.text import Text
from textual import events
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message as TextualMessage
from textual.widgets import Button, Markdown, RichLog, Static, TextArea

from .config import (
    ASSISTANT_NAME,
    EMPTY_STATE_HINT,
    EMPTY_STATE_TITLE,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    USER_NAME,
    LogLevel,
)
from .formatting import format_timestamp
from .models import Message


class ClickableMessage(Vertical):
    """A chat message container that copies content when clicked."""

    def __init__(self, content: str, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._content = content

    def on_click(self, event: Click) -> None:
        """Copy message content to the clipboard (OSC 52)."""
        event.stop()
        self.app.copy_to_clipboard(self._content)
        self.app.notify("Copied to clipboard", timeout=2)


class PromptTextArea(TextArea):
    """Multi-line prompt box where Enter submits.

    Shift+Enter inserts a newline. Many terminals do not report the shift
    modifier with Enter, so Ctrl+J inserts a newline as well.
    """

    class SubmitRequested(TextualMessage):
        """Posted when the user presses Enter without Shift."""

    async def _on_key(self, event: events.Key) -> None:
        if event.key == "enter":
            event.stop()
            event.prevent_default()
            self.post_message(self.SubmitRequested())
        elif event.key in ("shift+enter", "ctrl+j"):
            event.stop()
            event.prevent_default()
            self.insert("\n")


class ChatInputBar(Horizontal):
    """Chat input bar with prompt box and Send button."""

    class Submitted(TextualMessage):
        """Message sent when user submits input."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._busy = False

    def compose(self):
        text_area = PromptTextArea(
            id="chat-input",
            show_line_numbers=False,
            placeholder=INPUT_PLACEHOLDER,
        )
        text_area.cursor_blink = False
        yield text_area
        yield Button("Send", id="send-btn", variant="success", disabled=True).with_tooltip(
            "Send message (Enter)"
        )

    def on_mount(self) -> None:
        text_area = self.query_one("#chat-input", PromptTextArea)
        text_area.focus()
        text_area.highlight_cursor_line = False

    @property
    def busy(self) -> bool:
        return self._busy

    def set_busy(self, busy: bool) -> None:
        """Show or hide the busy indicator and lock submission."""
        self._busy = busy
        self.query_one("#send-btn", Button).loading = busy
        self._refresh_send_button()

    @property
    def text(self) -> str:
        return self.query_one("#chat-input", PromptTextArea).text

    def _refresh_send_button(self) -> None:
        button = self.query_one("#send-btn", Button)
        button.disabled = self._busy or not self.text.strip()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            self._submit()

    def on_text_area_changed(self, event: TextArea.Changed) -> None:
        self._refresh_send_button()

    def on_prompt_text_area_submit_requested(
        self, event: PromptTextArea.SubmitRequested
    ) -> None:
        event.stop()
        self._submit()

    def _submit(self) -> None:
        if self._busy:
            return
        text_area = self.query_one("#chat-input", PromptTextArea)
        value = text_area.text
        if not value.strip():
            return
        text_area.text = ""
        self._refresh_send_button()
        self.post_message(self.Submitted(value))

    def focus_input(self) -> None:
        """Focus the text input."""
        self.query_one("#chat-input", PromptTextArea).focus()


class ChatHistoryWidget(VerticalScroll):
    """Scrollable chat history with an empty-state hint."""

    BORDER_TITLE = ASSISTANT_NAME
    BORDER_SUBTITLE = "No messages"
    ALLOW_MAXIMIZE = True

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._message_count = 0

    def compose(self):
        with Vertical(id="empty-state"):
            yield Static(EMPTY_STATE_TITLE, id="empty-state-title")
            yield Static(EMPTY_STATE_HINT, id="empty-state-hint")

    @property
    def message_count(self) -> int:
        return self._message_count

    def add_message(self, message: Message) -> None:
        """Render a message at the bottom of the history."""
        if self._message_count == 0:
            for empty_state in self.query("#empty-state"):
                empty_state.remove()
        self._message_count += 1
        self.border_subtitle = f"{self._message_count} messages"
        self._render_message(message)
        self.scroll_end(animate=False)

    def _render_message(self, message: Message) -> None:
        if message.role == "user":
            header = f"> {USER_NAME} [{format_timestamp(message.timestamp)}]"
            border_class = "user-message"
        else:
            header = f"< {ASSISTANT_NAME} [{format_timestamp(message.timestamp)}]"
            border_class = "assistant-message"

        container = ClickableMessage(
            content=message.content,
            classes=f"chat-message {border_class}",
        )
        container.compose_add_child(Static(Text(header), classes="message-header"))
        if message.role == "assistant":
            container.compose_add_child(Markdown(message.content, classes="message-content"))
        else:
            # User text is shown verbatim, never as markup
            container.compose_add_child(Static(Text(message.content), classes="message-content"))

        self.mount(container)


class DebugPanel(RichLog):
    """Log panel for request tracing with level filtering.

    Shows timestamped log messages from the app and the completion client.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+D.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def log(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, LLM, ...)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_colors = {
            LogLevel.DEBUG: "dim white",
            LogLevel.INFO: "cyan",
            LogLevel.WARNING: "yellow",
            LogLevel.ERROR: "red",
        }
        component_colors = {
            "TUI": "cyan",
            "LLM": "magenta",
        }
        level_color = level_colors.get(level, "white")
        comp_color = component_colors.get(component, "white")

        line = Text.assemble(
            (f"{timestamp} ", "dim"),
            (f"{LogLevel.name(level):<5} ", level_color),
            (f"[{component}] ", comp_color),
            message,
        )
        self.write(line)

    def debug(self, component: str, message: str) -> None:
        """Log a DEBUG level message."""
        self.log(component, message, LogLevel.DEBUG)

    def info(self, component: str, message: str) -> None:
        """Log an INFO level message."""
        self.log(component, message, LogLevel.INFO)

    def warning(self, component: str, message: str) -> None:
        """Log a WARNING level message."""
        self.log(component, message, LogLevel.WARNING)

    def error(self, component: str, message: str) -> None:
        """Log an ERROR level message."""
        self.log(component, message, LogLevel.ERROR)

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self._update_subtitle()

    def toggle(self) -> bool:
        """Toggle visibility. Returns True if now visible."""
        if self.display:
            self.hide()
        else:
            self.show()
        return bool(self.display)
