"""Coloured status lines for warnings and successes."""

from __future__ import annotations

import os

from rich.console import Console
from rich.text import Text

_WARN_EMOJI = "⚠️ "
_WARN_FALLBACK = "!"
_SUCCESS_EMOJI = "✅"
_SUCCESS_FALLBACK = "✓"


def no_emoji() -> bool:
    """Return True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def _announce(message: str, style: str, emoji: str, fallback: str) -> None:
    prefix = fallback if no_emoji() else emoji
    console = Console(highlight=False, soft_wrap=True)
    console.print(Text.assemble((prefix, style), " ", (str(message), style)))


def warn(message: str) -> None:
    """Print a red warning line."""
    _announce(message, "red", _WARN_EMOJI, _WARN_FALLBACK)


def success(message: str) -> None:
    """Print a green success line."""
    _announce(message, "green", _SUCCESS_EMOJI, _SUCCESS_FALLBACK)