"""General helpers shared across the tool."""

from __future__ import annotations

import contextlib
import logging
import os
import re
from pathlib import Path
from typing import Any, Iterator, Sequence

from .paths import install_dir

log = logging.getLogger(__name__)

_HOST_TRIPLE_RE = re.compile(r"host: ([\w-]+)")
_HOST_TRIPLE_COMMAND = "rustc --verbose --version"


def _debug_quote(text: str) -> str:
    """Quote ``text`` with escapes, the way debug output shows strings."""
    escapes = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}
    pieces = []
    for ch in text:
        if ch in escapes:
            pieces.append(escapes[ch])
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            pieces.append(f"\\u{{{ord(ch):x}}}")
        else:
            pieces.append(ch)
    return '"' + "".join(pieces) + '"'


class SearchFailed(ValueError):
    """A command's output did not match the expected pattern."""

    def __init__(self, command: str, output: str) -> None:
        self.command = command
        self.output = output
        super().__init__(
            f"{_debug_quote(command)} output failed to match regex: {_debug_quote(output)}"
        )


class CaptureGroupError(LookupError):
    """A named capture group was missing from a match."""

    def __init__(self, group: str, string: str) -> None:
        self.group = group
        self.string = string
        super().__init__(
            f"Capture group {_debug_quote(group)} missing from string {_debug_quote(string)}"
        )


class InstalledCommitMsgError(OSError):
    """The installed commit message could not be read."""

    def __init__(self, path: Path, source: BaseException) -> None:
        self.path = path
        self.source = source
        super().__init__(f'Failed to read version info from "{path}": {source}')


class WorkingDirError(OSError):
    """The working directory could not be read or changed."""

    def __init__(self, source: BaseException, path: Path | None = None) -> None:
        self.path = path
        self.source = source
        if path is None:
            message = f"Failed to get current directory: {source}"
        else:
            message = f'Failed to set working directory "{path}": {source}'
        super().__init__(message)


def list_display(items: Sequence[Any]) -> str:
    """Join items into an English list: ``a``, ``a and b``, ``a, b, and c``."""
    items = [str(item) for item in items]
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    if not items:
        return ""
    return "".join(f"{item}, " for item in items[:-1]) + f"and {items[-1]}"


def reverse_domain(domain: str) -> str:
    """Reverse the dot-separated labels of a domain name."""
    return ".".join(reversed(domain.split(".")))


def parse_host_target_triple(output: str) -> str:
    """Extract the host target triple from verbose compiler version output."""
    match = _HOST_TRIPLE_RE.search(output)
    if match is None:
        raise SearchFailed(_HOST_TRIPLE_COMMAND, output)
    triple = match.group(1)
    log.info("detected host target triple %r", triple)
    return triple


def prepend_to_path(path: Any, base_path: Any) -> str:
    return f"{path}:{base_path}"


def get_string_for_group(match: re.Match, group: str, string: str) -> str:
    """Return the text captured by ``group``, raising if it didn't participate."""
    try:
        value = match.group(group)
    except IndexError:
        value = None
    if value is None:
        raise CaptureGroupError(group, string)
    return value


def installed_commit_msg() -> str | None:
    """Return the recorded commit message of the installed version, if any."""
    path = install_dir() / "commit"
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as source:
        raise InstalledCommitMsgError(path, source) from source


def format_commit_msg(msg: str) -> str:
    return f"Contains commits up to {_debug_quote(msg)}"


@contextlib.contextmanager
def with_working_dir(working_dir: str | os.PathLike) -> Iterator[Path]:
    """Run the enclosed block inside ``working_dir``, then change back."""
    working_dir = Path(working_dir)
    try:
        current_dir = Path.cwd()
    except OSError as source:
        raise WorkingDirError(source) from source
    try:
        os.chdir(working_dir)
    except OSError as source:
        raise WorkingDirError(source, working_dir) from source
    try:
        yield working_dir
    finally:
        try:
            os.chdir(current_dir)
        except OSError as source:
            raise WorkingDirError(source, current_dir) from source


def one_or_many(value: Any) -> list:
    """Turn a single value or a list of values into a list."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]