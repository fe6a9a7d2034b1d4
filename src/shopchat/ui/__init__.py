"""Terminal UI module for shopchat.

Provides a Textual-based chat panel for the shop assistant.

Module structure (each module hides a design decision):
- models.py: Data structures (message representation)
- session.py: Message list and loading flag during a send
- widgets.py: Custom widgets (prompt box, chat history, log panel)
- styles.py: CSS styling (layout decisions)
- themes.py: Color palettes and theme configuration
- formatting.py: Timestamp and error text
- app.py: Application orchestration (user interaction flow)
"""

from .app import ShopChatApp, run_chat_app
from .config import LogLevel
from .models import Message
from .session import ChatSession
from .widgets import ChatHistoryWidget, ChatInputBar, DebugPanel, PromptTextArea

__all__ = [
    "ChatHistoryWidget",
    "ChatInputBar",
    "ChatSession",
    "DebugPanel",
    "LogLevel",
    "Message",
    "PromptTextArea",
    "ShopChatApp",
    "run_chat_app",
]
