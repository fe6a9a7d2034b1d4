"""System instruction sent with every completion request.

The packaged text lives in system.txt. Deployments can point
SHOPCHAT_SYSTEM_PROMPT at another file to change the assistant's scope
without editing the install.
"""

from pathlib import Path

SYSTEM_PROMPT_FILE = Path(__file__).with_name("system.txt")


def get_system_prompt(path: str | Path | None = None) -> str:
    """Read the system instruction.

    Args:
        path: File to read instead of the packaged system.txt

    Returns:
        Instruction text, stripped of surrounding whitespace

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file holds no text
    """
    source = Path(path) if path else SYSTEM_PROMPT_FILE
    if not source.is_file():
        raise FileNotFoundError(f"System prompt not found: {source}")

    text = source.read_text(encoding="utf-8").strip()
    if not text:
        raise ValueError(f"System prompt is empty: {source}")
    return text


__all__ = [
    "SYSTEM_PROMPT_FILE",
    "get_system_prompt",
]
