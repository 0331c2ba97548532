"""Creating hard and symbolic links, optionally replacing what is in the way."""

from __future__ import annotations

import enum
import os
import shutil
from dataclasses import dataclass, field
from pathlib import Path

from .paths import relativize_path

_ERROR_PRIVILEGE_NOT_HELD = 1314


class LinkType(enum.Enum):
    HARD = "hard"
    SYMBOLIC = "symbolic"

    def __str__(self) -> str:
        return self.value


class Clobber(enum.Enum):
    NEVER = "clobbering disabled"
    FILE_ONLY = "file clobbering enabled"
    FILE_OR_DIRECTORY = "file and directory clobbering enabled"

    def __str__(self) -> str:
        return self.value


class TargetStyle(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"

    def __str__(self) -> str:
        return self.value


class ErrorCause(enum.Enum):
    MISSING_FILE_NAME = "missing file name"
    LINK_FAILED = "link failed"
    IO_ERROR = "io error"
    SYMLINK_NOT_ALLOWED = "symlink not allowed"

    def describe(self, error: BaseException | None) -> str:
        if self is ErrorCause.MISSING_FILE_NAME:
            return "Neither the source nor target contained a file name."
        if self is ErrorCause.LINK_FAILED:
            return f"Failed to create link: {error}"
        if self is ErrorCause.IO_ERROR:
            return f"IO error: {error}"
        return (
            "\nCreation symbolic link is not allowed for this system.\n\n"
            "For Windows 10 or newer:\nYou should use developer mode.\n\n"
            "For Window 8.1 or older:\n"
            "You need `SeCreateSymbolicLinkPrivilege` security policy."
        )


class LinkError(OSError):
    """A link could not be created."""

    def __init__(
        self,
        link_type: LinkType,
        force: Clobber,
        source: Path,
        target: Path,
        target_style: TargetStyle,
        cause: ErrorCause,
        error: BaseException | None = None,
    ) -> None:
        self.link_type = link_type
        self.force = force
        self.source = Path(source)
        self.target = Path(target)
        self.target_style = target_style
        self.cause = cause
        self.error = error
        super().__init__(
            f'Failed to create a {link_type} link from "{source}" to {target_style} '
            f'"{target}" ({force}): {cause.describe(error)}'
        )


def _has_file_name(path: Path) -> bool:
    return path.name not in ("", ".", "..")


def _remove(path: Path) -> None:
    if path.is_symlink() or not path.is_dir():
        path.unlink()
    else:
        shutil.rmtree(path)


@dataclass
class Call:
    """One link to create, checked for a usable link name on construction."""

    link_type: LinkType
    force: Clobber
    source: Path
    target: Path
    target_style: TargetStyle
    target_override: Path = field(init=False)

    def __post_init__(self) -> None:
        self.source = Path(self.source)
        self.target = Path(self.target)
        if self.target_style is TargetStyle.DIRECTORY:
            # Linking into a directory takes the link name from the source.
            if not _has_file_name(self.source):
                raise self._error(ErrorCause.MISSING_FILE_NAME)
            self.target_override = self.target / self.source.name
        else:
            self.target_override = self.target

    def _error(self, cause: ErrorCause, error: BaseException | None = None) -> LinkError:
        return LinkError(
            self.link_type,
            self.force,
            self.source,
            self.target,
            self.target_style,
            cause,
            error,
        )

    def exec(self) -> None:
        """Create the link, replacing existing entries as ``force`` allows."""
        dest = self.target_override
        if self.force is Clobber.FILE_OR_DIRECTORY and dest.is_dir():
            try:
                _remove(dest)
            except OSError as err:
                raise self._error(ErrorCause.IO_ERROR, err) from err
        # A real directory in the way receives the link inside it.
        if dest.is_dir() and not dest.is_symlink():
            dest = dest / self.source.name
        try:
            if os.path.lexists(dest):
                if self.force is Clobber.NEVER:
                    raise FileExistsError(f'"{dest}" already exists')
                if dest.is_dir() and not dest.is_symlink():
                    raise IsADirectoryError(f'cannot overwrite directory "{dest}"')
                dest.unlink()
            if self.link_type is LinkType.SYMBOLIC:
                resolved = dest.parent / self.source
                os.symlink(
                    os.fspath(self.source),
                    dest,
                    target_is_directory=resolved.is_dir(),
                )
            else:
                os.link(self.source, dest)
        except OSError as err:
            if getattr(err, "winerror", None) == _ERROR_PRIVILEGE_NOT_HELD:
                raise self._error(ErrorCause.SYMLINK_NOT_ALLOWED, err) from err
            raise self._error(ErrorCause.LINK_FAILED, err) from err


def force_symlink(
    source: str | os.PathLike,
    target: str | os.PathLike,
    target_style: TargetStyle,
) -> None:
    """Create a symbolic link, replacing any file or directory in the way."""
    Call(LinkType.SYMBOLIC, Clobber.FILE_OR_DIRECTORY, source, target, target_style).exec()


def force_symlink_relative(
    abs_source: str | os.PathLike,
    abs_target: str | os.PathLike,
    target_style: TargetStyle,
) -> None:
    """Like :func:`force_symlink`, but the link stores a relative path."""
    abs_source, abs_target = Path(abs_source), Path(abs_target)
    rel_source = relativize_path(abs_source, abs_target)
    if target_style is TargetStyle.DIRECTORY and not _has_file_name(rel_source):
        if not _has_file_name(abs_source):
            raise LinkError(
                LinkType.SYMBOLIC,
                Clobber.FILE_OR_DIRECTORY,
                rel_source,
                abs_target,
                target_style,
                ErrorCause.MISSING_FILE_NAME,
            )
        force_symlink(rel_source, abs_target / abs_source.name, TargetStyle.FILE)
    else:
        force_symlink(rel_source, abs_target, target_style)