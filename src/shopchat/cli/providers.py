"""Client factory functions for CLI.

Centralizes creation of completion clients from environment variables.
Hides configuration details from command implementations.
"""

import os
from typing import Any

import typer
from rich.console import Console

from ..llm import CompletionClient, create_completion_client
from ..llm.factory import SUPPORTED_PROVIDERS
from ..llm.providers.mock import DEFAULT_DELAY
from ..prompts import get_system_prompt

_console = Console()


def _float_env(name: str, default: float | None) -> float | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise typer.BadParameter(f"{name} must be a number, got {raw!r}") from None


def _system_prompt_env(console: Console) -> str | None:
    path = os.getenv("SHOPCHAT_SYSTEM_PROMPT")
    if not path:
        return None
    try:
        return get_system_prompt(path)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1) from None


def get_completion_client(
    provider: str | None = None,
    console: Console | None = None,
) -> CompletionClient:
    """Create a completion client from environment variables.

    Args:
        provider: Backend override; defaults to SHOPCHAT_PROVIDER
        console: Optional Rich console for output

    Returns:
        Completion client instance

    Raises:
        SystemExit: If the provider is unknown

    Environment variables:
        SHOPCHAT_PROVIDER: Backend (openai, gemini, mock; default: openai)
        OPENAI_API_KEY: OpenAI API key (for openai backend)
        OPENAI_CHAT_MODEL: OpenAI model (default: gpt-4o)
        OPENAI_BASE_URL: Custom OpenAI-compatible base URL
        OPENAI_TIMEOUT: Request timeout in seconds (default: SDK default)
        GEMINI_API_KEY: Gemini API key (for gemini backend; canned replies without it)
        GEMINI_MODEL: Gemini model (default: gemini-2.5-flash)
        SHOPCHAT_MOCK_DELAY: Seconds the mock backend waits (default: 1.0)
        SHOPCHAT_SYSTEM_PROMPT: File replacing the packaged system instruction
    """
    con = console or _console
    name = (provider or os.getenv("SHOPCHAT_PROVIDER", "openai")).lower()

    if name == "openai":
        api_key = os.getenv("OPENAI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: OPENAI_API_KEY not set, replies will report a configuration error[/yellow]")
        config: dict[str, Any] = {
            "api_key": api_key,
            "model": os.getenv("OPENAI_CHAT_MODEL", "gpt-4o"),
            "base_url": os.getenv("OPENAI_BASE_URL") or None,
            "system_prompt": _system_prompt_env(con),
        }
        timeout = _float_env("OPENAI_TIMEOUT", None)
        if timeout is not None:
            config["timeout"] = timeout
        return create_completion_client("openai", **config)

    if name == "gemini":
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            con.print("[yellow]Warning: GEMINI_API_KEY not set, using mock responses[/yellow]")
        return create_completion_client(
            "gemini",
            api_key=api_key,
            model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            system_prompt=_system_prompt_env(con),
            fallback=create_completion_client(
                "mock", delay=_float_env("SHOPCHAT_MOCK_DELAY", DEFAULT_DELAY)
            ),
        )

    if name in ("mock", "demo"):
        return create_completion_client(
            "mock", delay=_float_env("SHOPCHAT_MOCK_DELAY", DEFAULT_DELAY)
        )

    con.print(
        f"[red]Error: Unknown provider: {name}. "
        f"Choose one of: {', '.join(SUPPORTED_PROVIDERS)}[/red]"
    )
    raise typer.Exit(code=1)
