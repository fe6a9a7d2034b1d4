"""Tests for the Textual chat panel, driven through the Pilot API."""
import pytest

from shopchat.llm import CompletionHTTPError
from shopchat.ui import ChatHistoryWidget, ChatInputBar, DebugPanel, PromptTextArea, ShopChatApp


async def _settle(app: ShopChatApp, pilot) -> None:
    """Let posted messages run and wait for the send worker."""
    await pilot.pause()
    await app.workers.wait_for_complete()
    await pilot.pause()


class TestShopChatApp:
    """Tests for ShopChatApp interaction flow."""

    @pytest.mark.asyncio
    async def test_starts_with_empty_state(self, stub_client):
        app = ShopChatApp(stub_client)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert len(app.query("#empty-state")) == 1
            assert app.query_one("#send-btn").disabled

    @pytest.mark.asyncio
    async def test_enter_submits(self, stub_client):
        app = ShopChatApp(stub_client)
        async with app.run_test() as pilot:
            await pilot.press("h", "i")
            await pilot.press("enter")
            await _settle(app, pilot)

            assert stub_client.prompts == ["hi"]
            assert [m.role for m in app.session.messages] == ["user", "assistant"]
            assert app.query_one("#chat-history", ChatHistoryWidget).message_count == 2
            assert len(app.query("#empty-state")) == 0
            assert app.query_one("#chat-input", PromptTextArea).text == ""

    @pytest.mark.asyncio
    async def test_shift_enter_inserts_newline(self, stub_client):
        app = ShopChatApp(stub_client)
        async with app.run_test() as pilot:
            await pilot.press("h", "i", "shift+enter")
            await _settle(app, pilot)

            assert stub_client.prompts == []
            assert app.session.messages == ()
            assert "\n" in app.query_one("#chat-input", PromptTextArea).text

    @pytest.mark.asyncio
    async def test_multiline_prompt_is_sent(self, stub_client):
        app = ShopChatApp(stub_client)
        async with app.run_test() as pilot:
            await pilot.press("a", "shift+enter", "b", "enter")
            await _settle(app, pilot)

            assert stub_client.prompts == ["a\nb"]

    @pytest.mark.asyncio
    async def test_whitespace_is_not_sent(self, stub_client):
        app = ShopChatApp(stub_client)
        async with app.run_test() as pilot:
            await pilot.press("space", "space", "enter")
            await _settle(app, pilot)

            assert stub_client.prompts == []
            assert app.session.messages == ()

    @pytest.mark.asyncio
    async def test_send_button_submits(self, stub_client):
        app = ShopChatApp(stub_client)
        async with app.run_test() as pilot:
            await pilot.press("o", "k")
            await pilot.pause()
            assert not app.query_one("#send-btn").disabled

            await pilot.click("#send-btn")
            await _settle(app, pilot)

            assert stub_client.prompts == ["ok"]

    @pytest.mark.asyncio
    async def test_failure_adds_no_assistant_message(self, make_stub):
        client = make_stub(error=CompletionHTTPError(500, "boom"))
        app = ShopChatApp(client)
        async with app.run_test() as pilot:
            await pilot.press("h", "i", "enter")
            await _settle(app, pilot)

            assert [m.role for m in app.session.messages] == ["user"]
            assert app.query_one("#chat-history", ChatHistoryWidget).message_count == 1
            assert not app.query_one("#chat-input-bar", ChatInputBar).busy

    @pytest.mark.asyncio
    async def test_unexpected_error_shows_toast_and_keeps_running(self, make_stub):
        client = make_stub(error=ValueError("unexpected payload"))
        app = ShopChatApp(client)
        notifications = []
        async with app.run_test() as pilot:
            app.notify = lambda message, **kwargs: notifications.append((message, kwargs))
            await pilot.press("h", "i", "enter")
            await _settle(app, pilot)

            assert app.is_running
            assert [m.role for m in app.session.messages] == ["user"]
            assert not app.query_one("#chat-input-bar", ChatInputBar).busy
            assert notifications == [
                (
                    "Failed to get a response from the AI. Please try again.",
                    {"title": "Error", "severity": "error", "timeout": 5},
                )
            ]

            # The panel still accepts the next message
            client._error = None
            await pilot.press("o", "k", "enter")
            await _settle(app, pilot)
            assert [m.role for m in app.session.messages] == ["user", "user", "assistant"]

    @pytest.mark.asyncio
    async def test_log_level_shows_debug_panel(self, stub_client):
        app = ShopChatApp(stub_client, log_level="info")
        async with app.run_test() as pilot:
            await pilot.pause()
            panel = app.query_one("#debug-panel", DebugPanel)
            assert panel.display
            assert panel.border_subtitle == "Level: INFO"

    @pytest.mark.asyncio
    async def test_toggle_debug_panel(self, stub_client):
        app = ShopChatApp(stub_client)
        async with app.run_test() as pilot:
            panel = app.query_one("#debug-panel", DebugPanel)
            assert not panel.display

            await pilot.press("ctrl+d")
            await pilot.pause()
            assert panel.display
