"""Tests for the console chat loop."""
import asyncio
import builtins
import main


class TestConsoleChat:

    def test_chat_reads_input_and_replies(self, monkeypatch, capsys):
        answers = iter(["hello", "   ", "thank you", "exit"])
        monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))

        asyncio.run(main.chat(None, (0.0, 0.0)))

        out = capsys.readouterr().out
        assert out.count("MindEase is typing...") == 3
        assert "[4/4 closing]" in out
        assert "Take care of yourself" in out

    def test_chat_discards_its_session(self, monkeypatch):
        monkeypatch.setattr(builtins, "input", lambda prompt="": "quit")
        service = main.get_session_service()
        before = len(service.list_sessions())

        asyncio.run(main.chat("sad", (0.0, 0.0)))

        assert len(service.list_sessions()) == before
