"""Path helpers: home directory handling, prefixing and relativizing paths."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath, PureWindowsPath

log = logging.getLogger(__name__)

_INSTALL_DIR_NAME = ".mobilekit"
_VERBATIM_PREFIX = "\\\\?\\"


class NoHomeDir(OSError):
    """The user's home directory could not be determined."""

    def __init__(self) -> None:
        super().__init__("Failed to get user's home directory!")


class ContractHomeError(ValueError):
    """A path or the home directory could not be represented as UTF-8 text."""


class PathNotPrefixed(ValueError):
    """A path did not start with the expected prefix."""

    def __init__(self, path: PurePath, prefix: PurePath) -> None:
        self.path = path
        self.prefix = prefix
        super().__init__(f'Path "{path}" didn\'t have prefix "{prefix}".')


class NormalizationError(OSError):
    """A path could not be canonicalized or made absolute."""

    def __init__(self, path: PurePath, cause: BaseException, existing: bool) -> None:
        self.path = path
        self.cause = cause
        self.existing = existing
        if existing:
            message = f'Failed to canonicalize existing path "{path}": {cause}'
        else:
            message = f'Failed to normalize non-existent path "{path}": {cause}'
        super().__init__(message)


def home_dir() -> Path:
    """Return the user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as err:
        raise NoHomeDir() from err


def expand_home(path: str | os.PathLike) -> Path:
    """Replace a leading ``~`` component with the home directory."""
    home = home_dir()
    path = Path(path)
    if path.parts and path.parts[0] == "~":
        return home.joinpath(*path.parts[1:])
    return path


def _is_utf8(text: str) -> bool:
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def contract_home(path: str | os.PathLike) -> str:
    """Replace occurrences of the home directory in ``path`` with ``~``."""
    text = os.fspath(path)
    if not _is_utf8(text):
        raise ContractHomeError("Supplied path wasn't valid UTF-8.")
    if os.name == "nt":
        return text
    home = os.fspath(home_dir())
    if not _is_utf8(home):
        raise ContractHomeError("User's home directory path wasn't valid UTF-8.")
    return text.replace(home, "~")


def install_dir() -> Path:
    """Return the directory the tool keeps its installation data in."""
    cargo_home = os.environ.get("CARGO_HOME")
    if cargo_home is not None:
        return Path(cargo_home) / _INSTALL_DIR_NAME
    return home_dir() / ".cargo" / _INSTALL_DIR_NAME


def checkouts_dir() -> Path:
    return install_dir() / "checkouts"


def tools_dir() -> Path:
    return install_dir() / "tools"


def prefix_path(root: str | os.PathLike, path: str | os.PathLike) -> PurePath:
    """Join ``path`` onto ``root``, resolving components for verbatim roots.

    Verbatim (``\\\\?\\``) Windows roots don't accept ``.`` or ``..``
    components, so those are resolved lexically instead of being joined.
    """
    root_text = os.fspath(root)
    if not root_text.startswith(_VERBATIM_PREFIX):
        return Path(root) / path

    buf = list(PureWindowsPath(root_text).parts)
    rel = PureWindowsPath(os.fspath(path))
    parts = list(rel.parts)
    if rel.anchor:
        parts = parts[1:]
        if rel.drive:
            buf = [rel.anchor]
        else:
            del buf[1:]
    for part in parts:
        if part == "..":
            if buf:
                buf.pop()
        else:
            buf.append(part)
    path_type = Path if os.name == "nt" else PureWindowsPath
    return path_type(*buf)


def unprefix_path(root: str | os.PathLike, path: str | os.PathLike) -> Path:
    """Strip ``root`` from the front of ``path``."""
    root, path = Path(root), Path(path)
    try:
        return path.relative_to(root)
    except ValueError:
        raise PathNotPrefixed(path, root) from None


def relativize_path(
    abs_path: str | os.PathLike, abs_relative_to: str | os.PathLike
) -> Path:
    """Express the absolute ``abs_path`` relative to ``abs_relative_to``."""
    path, relative_to = Path(abs_path), Path(abs_relative_to)
    if not path.is_absolute():
        raise ValueError(f'"{path}" is not an absolute path')
    if not relative_to.is_absolute():
        raise ValueError(f'"{relative_to}" is not an absolute path')
    common = next(
        (c for c in (relative_to, *relative_to.parents) if path.is_relative_to(c)),
        None,
    )
    if common is None:
        raise ValueError(f'"{path}" and "{relative_to}" have no common root')
    ups = len(relative_to.relative_to(common).parts)
    rel_path = Path(*([".."] * ups)) / path.relative_to(common)
    log.info('"%s" relative to "%s" is "%s"', path, relative_to, rel_path)
    return rel_path


def normalize_path(path: str | os.PathLike) -> Path:
    """Canonicalize an existing path, or make a missing one absolute."""
    path = Path(path)
    if path.exists():
        try:
            return path.resolve(strict=True)
        except OSError as cause:
            raise NormalizationError(path, cause, existing=True) from cause
    try:
        return Path(os.path.abspath(path))
    except OSError as cause:
        raise NormalizationError(path, cause, existing=False) from cause


def under_root(path: str | os.PathLike, root: str | os.PathLike) -> bool:
    """Tell whether ``root / path`` stays inside ``root`` once normalized."""
    root = Path(root)
    return normalize_path(root / path).is_relative_to(root)


def _mtime(path: Path) -> float:
    try:
        return path.stat().st_mtime
    except OSError:
        return 0.0


def last_modified(first: str | os.PathLike, second: str | os.PathLike) -> Path:
    """Return whichever path was modified more recently, preferring ``first`` on ties."""
    first, second = Path(first), Path(second)
    return second if _mtime(first) < _mtime(second) else first