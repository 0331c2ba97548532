"""Interactive prompts read from standard input."""

from __future__ import annotations

import sys
from typing import Any, Iterable

from .cli import _paint, _should_colorize

GREEN = "32"
CYAN = "36"


def _style(text: str, color: str, bold: bool = False) -> str:
    return _paint(text, color, bold) if _should_colorize() else text


def minimal(msg: Any) -> str:
    """Show ``msg`` followed by a colon and return the trimmed reply."""
    sys.stdout.write(f"{msg}: ")
    sys.stdout.flush()
    return sys.stdin.readline().strip()


def default(msg: Any, default: str | None = None, default_color: str | None = None) -> str:
    """Prompt with an optional default that an empty reply falls back to."""
    if default is not None:
        shown = _style(default, default_color, bold=True) if default_color else default
        response = minimal(f"{msg} ({shown})")
    else:
        response = minimal(msg)
    if not response and default is not None:
        return default
    return response


def yes_no(msg: Any, default: bool | None = None) -> bool | None:
    """Ask a yes/no question; return ``None`` for an answer that is neither."""
    hint = {True: "[Y/n]", False: "[y/N]", None: "[y/n]"}[default]
    response = minimal(f"{msg} {hint}")
    if response.lower() == "y":
        return True
    if response.lower() == "n":
        return False
    if not response:
        return default
    print("That was neither a Y nor an N! You're pretty silly.")
    return None


def list_display_only(choices: Iterable[Any]) -> None:
    """Print the choices as an indexed list."""
    choices = list(choices)
    if not choices:
        print("  -- none --")
        return
    for index, choice in enumerate(choices):
        print(f"  [{_style(str(index), GREEN)}] {choice}")


def select(
    header: Any,
    choices: Iterable[Any],
    noun: Any,
    alternative: str | None,
    msg: Any,
) -> int:
    """Show indexed choices and keep asking until a valid index is entered."""
    choices = list(choices)
    print(f"{header}:")
    list_display_only(choices)
    index_word = _style("index", GREEN)
    if alternative is not None:
        print(
            f"  Enter an {index_word} for a {noun} above, "
            f"or enter a {_style(alternative, CYAN)} manually."
        )
    else:
        print(f"  Enter an {index_word} for a {noun} above.")
    count = len(choices)
    while True:
        response = default(msg, "0" if count == 1 else None, GREEN)
        if not response:
            print("Not to be pushy, but you need to pick a device.")
            continue
        if not response.isascii() or not response.isdigit():
            print("Hey, that wasn't a number! You're silly.")
            continue
        index = int(response)
        if index < count:
            return index
        print("There's no device with an index that high.")