"""CSS styles for the TUI.

Hides layout and styling decisions from the application logic.
Uses Textual CSS features: nesting, pseudo-classes, variables.
"""

APP_CSS = """
Screen {
    layout: vertical;
    background: $background;
}

/* ============================================
   Chat History Panel
   ============================================ */
#chat-history {
    height: 1fr;
    background: $panel;
    border: round $primary 60%;
    border-title-color: $primary;
    border-title-style: bold;
    border-title-align: left;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
    scrollbar-gutter: stable;

    &:focus-within {
        border: round $primary;
    }
}

#empty-state {
    height: auto;
    width: 100%;
    align: center middle;
    padding: 2 4;
}

#empty-state-title {
    width: 100%;
    text-align: center;
    text-style: bold;
}

#empty-state-hint {
    width: 100%;
    text-align: center;
    color: $text-muted;
}

.chat-message {
    height: auto;
    padding: 0 1;
    margin: 1 0 0 0;
}

/* User messages sit right, assistant messages left */
.user-message {
    margin-left: 6;
    background: $secondary 10%;
    border-left: thick $secondary;
}

.assistant-message {
    margin-right: 6;
    background: $surface;
    border-left: thick $primary;
}

.message-header {
    color: $text-muted;
    text-style: bold;
}

.message-content {
    height: auto;
    margin: 0;
}

/* ============================================
   Debug/Log Panel
   ============================================ */
#debug-panel {
    display: none;
    height: auto;
    min-height: 6;
    max-height: 12;
    background: $panel;
    border: round $warning 60%;
    border-title-color: $warning;
    border-subtitle-color: $text-muted;
    border-subtitle-align: right;
    padding: 0 1;
}

/* ============================================
   Chat Input Bar - Text Entry + Send
   ============================================ */
ChatInputBar {
    height: 5;
    border: round $primary 60%;
    background: $panel;

    &:focus-within {
        border: round $primary;
    }
}

#chat-input {
    width: 1fr;
    height: 100%;
    border: none;
    padding: 0 1;
    background: transparent;
}

#send-btn {
    width: 10;
    height: 3;
    margin: 0 1;
}
"""
