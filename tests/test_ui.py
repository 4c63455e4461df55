import pytest

from rustdrill.ui import emoji_enabled, success, warn


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")


def test_emoji_enabled_follows_environment(monkeypatch):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    assert emoji_enabled() is True
    monkeypatch.setenv("NO_EMOJI", "1")
    assert emoji_enabled() is False


def test_warn_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("Ran exercises/a.rs with errors")
    assert capsys.readouterr().out == "! Ran exercises/a.rs with errors\n"


def test_success_without_emoji(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    success("Successfully ran exercises/a.rs")
    assert capsys.readouterr().out == "✓ Successfully ran exercises/a.rs\n"


def test_warn_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    warn("broken")
    out = capsys.readouterr().out
    assert out.startswith("⚠️")
    assert out.rstrip("\n").endswith(" broken")


def test_success_with_emoji(monkeypatch, capsys):
    monkeypatch.delenv("NO_EMOJI", raising=False)
    success("fine")
    assert capsys.readouterr().out.startswith("✅ fine")


def test_brackets_are_printed_literally(monkeypatch, capsys):
    monkeypatch.setenv("NO_EMOJI", "1")
    warn("[bold]x[/bold] :smile:")
    assert capsys.readouterr().out == "! [bold]x[/bold] :smile:\n"