"""Theme definitions for the TUI.

This module hides the design decisions about:
- Color palettes and visual appearance
- Theme variables (borders, scrollbars, footer)

To add a new theme, define it here and register in the app.
"""

from textual.theme import Theme

# Storefront theme: emerald accents on a slate background
SHOPFRONT_DARK = Theme(
    name="shopfront-dark",
    primary="#34d399",      # Emerald - assistant and focus accents
    secondary="#60a5fa",    # Sky blue - user messages
    accent="#fbbf24",       # Amber - highlights
    foreground="#e2e8f0",
    background="#0f172a",
    success="#4ade80",
    warning="#fb923c",
    error="#f87171",
    surface="#1e293b",
    panel="#111827",
    dark=True,
    variables={
        "border": "#334155",
        "border-blurred": "#1e293b",
        "scrollbar": "#1e293b",
        "scrollbar-hover": "#334155",
        "scrollbar-active": "#34d399",
        "scrollbar-background": "#111827",
        "footer-key-foreground": "#fbbf24",
        "footer-background": "#0f172a",
        "text-muted": "#94a3b8",
        "input-selection-background": "#34d399 30%",
    },
)
