"""Tests for the Typer CLI and environment-driven client creation."""
import pytest
from rich.console import Console
from typer.testing import CliRunner

import shopchat.ui
from shopchat.cli import app as cli_app
from shopchat.cli.providers import get_completion_client
from shopchat.llm import (
    CompletionHTTPError,
    GeminiCompletionClient,
    MockCompletionClient,
    OpenAICompletionClient,
)
from shopchat.prompts import SYSTEM_PROMPT_FILE, get_system_prompt

runner = CliRunner()


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Keep rich output on one line per sentence."""
    monkeypatch.setattr(cli_app, "console", Console(width=200))


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "SHOPCHAT_PROVIDER",
        "OPENAI_API_KEY",
        "OPENAI_CHAT_MODEL",
        "OPENAI_BASE_URL",
        "OPENAI_TIMEOUT",
        "GEMINI_API_KEY",
        "GEMINI_MODEL",
        "SHOPCHAT_SYSTEM_PROMPT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SHOPCHAT_MOCK_DELAY", "0")


class TestAskCommand:
    """Tests for `shopchat ask`."""

    def test_ask_with_mock_provider(self, clean_env):
        result = runner.invoke(cli_app.app, ["ask", "How should I manage inventory?", "--provider", "mock"])

        assert result.exit_code == 0
        assert "just-in-time" in result.output
        assert "Shop Assistant" in result.output

    def test_ask_uses_provider_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("SHOPCHAT_PROVIDER", "demo")

        result = runner.invoke(cli_app.app, ["ask", "Any marketing ideas?"])

        assert result.exit_code == 0
        assert "localized marketing" in result.output

    def test_ask_without_openai_key_reports_configuration_error(self, clean_env):
        result = runner.invoke(cli_app.app, ["ask", "hi", "--provider", "openai"])

        assert result.exit_code == 0
        assert "OPENAI_API_KEY not set" in result.output
        assert "API key is not configured" in result.output

    def test_ask_gemini_without_key_uses_mock(self, clean_env):
        result = runner.invoke(cli_app.app, ["ask", "Cut my expenses", "-p", "gemini"])

        assert result.exit_code == 0
        assert "packaging costs" in result.output

    def test_ask_empty_prompt(self, clean_env):
        result = runner.invoke(cli_app.app, ["ask", "   ", "-p", "mock"])

        assert result.exit_code == 1
        assert "prompt is empty" in result.output

    def test_ask_unknown_provider(self, clean_env):
        result = runner.invoke(cli_app.app, ["ask", "hi", "-p", "nope"])

        assert result.exit_code == 1
        assert "Unknown provider" in result.output

    def test_ask_reports_completion_error(self, clean_env, monkeypatch, make_stub):
        client = make_stub(error=CompletionHTTPError(500, "boom"))
        monkeypatch.setattr(cli_app, "get_completion_client", lambda *args, **kwargs: client)

        result = runner.invoke(cli_app.app, ["ask", "hi"])

        assert result.exit_code == 1
        assert "I encountered an error while trying to process your request" in result.output
        assert "API request failed with status 500: boom" in result.output
        assert client.prompts == ["hi"]
        assert client.closed


class TestChatCommand:
    """Tests for `shopchat chat` option handling."""

    @pytest.fixture
    def launched(self, monkeypatch, stub_client):
        calls = []

        async def fake_run_chat_app(client, log_level=None):
            calls.append((client, log_level))

        monkeypatch.setattr(cli_app, "get_completion_client", lambda *args, **kwargs: stub_client)
        monkeypatch.setattr(shopchat.ui, "run_chat_app", fake_run_chat_app)
        return calls

    @pytest.mark.parametrize(("value", "expected"), [("info", "info"), ("WARNING", "warning")])
    def test_log_level_is_passed_to_app(self, launched, stub_client, value, expected):
        result = runner.invoke(cli_app.app, ["chat", "--log-level", value])

        assert result.exit_code == 0
        assert launched == [(stub_client, expected)]

    def test_log_panel_hidden_by_default(self, launched, stub_client):
        result = runner.invoke(cli_app.app, ["chat"])

        assert result.exit_code == 0
        assert launched == [(stub_client, None)]

    def test_unknown_log_level_rejected(self, launched):
        result = runner.invoke(cli_app.app, ["chat", "--log-level", "loud"])

        assert result.exit_code == 2
        assert launched == []


class TestGetCompletionClient:
    """Tests for environment-driven client creation."""

    def test_default_is_openai(self, clean_env):
        client = get_completion_client(console=Console(width=200))

        assert isinstance(client, OpenAICompletionClient)
        assert client.model == "gpt-4o"
        assert not client.is_configured

    def test_openai_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("OPENAI_CHAT_MODEL", "gpt-4o-mini")
        monkeypatch.setenv("OPENAI_TIMEOUT", "30")

        client = get_completion_client("openai")

        assert isinstance(client, OpenAICompletionClient)
        assert client.is_configured
        assert client.model == "gpt-4o-mini"

    def test_gemini_from_env(self, clean_env, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        client = get_completion_client("gemini")

        assert isinstance(client, GeminiCompletionClient)
        assert client.model == "gemini-2.5-flash"

    def test_mock_delay_from_env(self, clean_env):
        client = get_completion_client("mock")

        assert isinstance(client, MockCompletionClient)


class TestSystemPrompt:
    """Tests for the system instruction and its override."""

    def test_packaged_prompt(self):
        prompt = get_system_prompt()

        assert prompt.startswith("You are a helpful AI assistant for a shop management system.")
        assert "2-3 paragraphs" in prompt
        assert prompt == SYSTEM_PROMPT_FILE.read_text(encoding="utf-8").strip()

    def test_override_file(self, tmp_path):
        path = tmp_path / "bikes.txt"
        path.write_text("Only talk about bikes.\n", encoding="utf-8")

        assert get_system_prompt(path) == "Only talk about bikes."

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="not found"):
            get_system_prompt(tmp_path / "missing.txt")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("  \n", encoding="utf-8")

        with pytest.raises(ValueError, match="empty"):
            get_system_prompt(path)

    def test_env_override_reaches_clients(self, clean_env, monkeypatch, tmp_path):
        path = tmp_path / "system.txt"
        path.write_text("Only talk about bikes.", encoding="utf-8")
        monkeypatch.setenv("SHOPCHAT_SYSTEM_PROMPT", str(path))
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("GEMINI_API_KEY", "test-key")

        openai_client = get_completion_client("openai")
        gemini_client = get_completion_client("gemini")

        assert openai_client._system_prompt == "Only talk about bikes."
        assert gemini_client._config.system_instruction == "Only talk about bikes."

    def test_env_override_missing_file_exits(self, clean_env, monkeypatch, tmp_path):
        monkeypatch.setenv("SHOPCHAT_SYSTEM_PROMPT", str(tmp_path / "missing.txt"))

        result = runner.invoke(cli_app.app, ["ask", "hi", "-p", "openai"])

        assert result.exit_code == 1
        assert "System prompt not found" in result.output
