"""Coloured status lines for the terminal."""

import os
import sys

_RESET = "\x1b[0m"
_BOLD = "1"
_RED = "31"
_GREEN = "32"
_BLUE = "34"


def _colour_enabled() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


def _paint(text: object, *codes: str) -> str:
    """Wrap ``text`` in ANSI codes when standard output is a terminal."""
    rendered = str(text)
    if not codes or not _colour_enabled():
        return rendered
    return f"\x1b[{';'.join(codes)}m{rendered}{_RESET}"


def _no_emoji() -> bool:
    return "NO_EMOJI" in os.environ


def warn(message: str) -> str:
    """Print a red warning line and return it."""
    symbol = "!" if _no_emoji() else "⚠️ "
    line = f"{_paint(symbol, _RED)} {_paint(message, _RED)}"
    print(line)
    return line


def success(message: str) -> str:
    """Print a green success line and return it."""
    symbol = "✓" if _no_emoji() else "✅"
    line = f"{_paint(symbol, _GREEN)} {_paint(message, _GREEN)}"
    print(line)
    return line


def bold(text: object) -> str:
    """Return ``text`` rendered in bold when writing to a terminal."""
    return _paint(text, _BOLD)