"""Data models for the TUI.

Hides the internal representation of chat messages.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

ROLES = ("user", "assistant")


@dataclass(frozen=True)
class Message:
    """A chat message in the conversation. Immutable once created."""

    role: str  # "user" or "assistant"
    content: str
    id: str = field(default_factory=lambda: uuid4().hex)
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"Unknown message role: {self.role!r}")
