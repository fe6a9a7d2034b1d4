"""Main CLI application using Typer."""
import asyncio
from enum import Enum

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..llm import CompletionError
from ..ui.config import ASSISTANT_NAME
from ..ui.formatting import describe_error
from .providers import get_completion_client

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="shopchat",
    help="Chat with an AI assistant about running your shop",
    no_args_is_help=True,
    add_completion=True,
)

console = Console()


class PanelLogLevel(str, Enum):
    """Levels accepted by --log-level."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@app.command()
def chat(
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="Backend: openai, gemini or mock (default: SHOPCHAT_PROVIDER or openai)"
    ),
    log_level: PanelLogLevel | None = typer.Option(
        None,
        "--log-level",
        "-l",
        case_sensitive=False,
        help="Show the log panel at this level"
    ),
):
    """Open the interactive chat panel."""
    from ..ui import run_chat_app

    client = get_completion_client(provider, console)
    level = log_level.value if log_level is not None else None
    asyncio.run(run_chat_app(client, log_level=level))


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Question for the assistant"),
    provider: str | None = typer.Option(
        None,
        "--provider",
        "-p",
        help="Backend: openai, gemini or mock (default: SHOPCHAT_PROVIDER or openai)"
    ),
):
    """Ask a single question and print the reply."""
    if not prompt.strip():
        console.print("[red]Error: prompt is empty[/red]")
        raise typer.Exit(code=1)

    async def _ask() -> str:
        async with get_completion_client(provider, console) as client:
            return await client.generate_response(prompt)

    try:
        reply = asyncio.run(_ask())
    except CompletionError as e:
        console.print(f"[red]{describe_error(e)}[/red]")
        raise typer.Exit(code=1)

    console.print(Panel(Text(reply), title=ASSISTANT_NAME, title_align="left"))


if __name__ == "__main__":
    app()
