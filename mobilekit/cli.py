"""Terminal output: text wrapping and labelled reports."""

from __future__ import annotations

import enum
import os
import shutil
import sys
import textwrap
from dataclasses import dataclass, field, replace

COLOR_ERROR = "91"
COLOR_WARNING = "93"
COLOR_ACTION_REQUEST = "95"
COLOR_VICTORY = "92"

_INDENT = "    "


def _paint(text: str, color: str, bold: bool = False) -> str:
    codes = f"1;{color}" if bold else color
    return f"\x1b[{codes}m{text}\x1b[0m"


def _should_colorize() -> bool:
    force = os.environ.get("CLICOLOR_FORCE")
    if force is not None and force != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False
    if os.environ.get("CLICOLOR") == "0":
        return False
    return sys.stdout.isatty()


def _terminal_width() -> int:
    return shutil.get_terminal_size().columns


@dataclass(frozen=True)
class TextWrapper:
    """Wraps text to a width without splitting words at hyphens."""

    width: int = field(default_factory=_terminal_width)
    initial_indent: str = ""
    subsequent_indent: str = ""

    def fill(self, text: str) -> str:
        """Wrap each line of ``text``, keeping existing line breaks."""
        out = []
        for line in text.split("\n"):
            wrapper = textwrap.TextWrapper(
                width=self.width,
                initial_indent=self.subsequent_indent if out else self.initial_indent,
                subsequent_indent=self.subsequent_indent,
                break_on_hyphens=False,
            )
            out.append(wrapper.fill(line))
        return "\n".join(out)

    def indented(self, indent: str) -> TextWrapper:
        """Return a copy that indents every line with ``indent``."""
        return replace(self, initial_indent=indent, subsequent_indent=indent)


class Label(enum.Enum):
    ERROR = "error"
    ACTION_REQUEST = "action request"
    VICTORY = "victory"

    def __str__(self) -> str:
        return self.value

    def color(self) -> str:
        """Return the ANSI colour code used for this label."""
        return {
            Label.ERROR: COLOR_ERROR,
            Label.ACTION_REQUEST: COLOR_ACTION_REQUEST,
            Label.VICTORY: COLOR_VICTORY,
        }[self]

    def exit_code(self) -> int:
        return 0 if self is Label.VICTORY else 1


@dataclass(frozen=True)
class Report:
    """A labelled message with details, printed at the end of a command."""

    label: Label
    msg: str
    details: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "msg", str(self.msg))
        object.__setattr__(self, "details", str(self.details))

    @classmethod
    def error(cls, msg: object, details: object) -> Report:
        return cls(Label.ERROR, msg, details)

    @classmethod
    def action_request(cls, msg: object, details: object) -> Report:
        return cls(Label.ACTION_REQUEST, msg, details)

    @classmethod
    def victory(cls, msg: object, details: object) -> Report:
        return cls(Label.VICTORY, msg, details)

    def exit_code(self) -> int:
        return self.label.exit_code()

    def format(self, wrapper: TextWrapper, colorize: bool | None = None) -> str:
        """Render the report: a wrapped head line and indented details."""
        if colorize is None:
            colorize = _should_colorize()
        if colorize:
            color = self.label.color()
            head = wrapper.fill(
                f"{_paint(f'{self.label.value}:', color, bold=True)} "
                f"{_paint(self.msg, color)}"
            )
        else:
            head = wrapper.fill(f"{self.label.value}: {self.msg}")
        details = wrapper.indented(_INDENT).fill(self.details)
        return f"{head}\n{details}\n"

    def print(self, wrapper: TextWrapper) -> None:
        """Write the report to stderr for errors, stdout otherwise."""
        stream = sys.stderr if self.label is Label.ERROR else sys.stdout
        stream.write(self.format(wrapper))
        stream.flush()