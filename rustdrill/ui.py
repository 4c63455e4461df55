"""Coloured status messages for the terminal."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text


def emoji_enabled() -> bool:
    """Emoji are shown unless NO_EMOJI is set."""
    return "NO_EMOJI" not in os.environ


def _emit(symbol: str, message: str, colour: str) -> None:
    text = Text.assemble((symbol, colour), " ", (message, colour))
    Console(highlight=False, soft_wrap=True).print(text)


def warn(message: str) -> None:
    """Print a red warning line."""
    _emit("⚠️ " if emoji_enabled() else "!", message, "red")


def success(message: str) -> None:
    """Print a green success line."""
    _emit("✅" if emoji_enabled() else "✓", message, "green")