"""Version numbers: generic triples and doubles, and compiler version output."""

from __future__ import annotations

import logging
import re
import sys
from dataclasses import dataclass

from .common import SearchFailed, _debug_quote

log = logging.getLogger(__name__)

_U32_MAX = 2**32 - 1
_RUST_VERSION_COMMAND = "rustc --version"

RUST_VERSION_PATTERN = re.compile(
    r"rustc (?P<version>(?P<major>\d+)\.(?P<minor>\d+)\.(?P<patch>\d+)"
    r"(-(?P<flavor>\w+)(.(?P<candidate>\d+))?)?)"
    r"(?P<details> \((?P<hash>\w{9}) "
    r"(?P<date>(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2}))\))?"
)


def _parse_u32(text: str) -> int:
    """Parse an unsigned 32-bit decimal integer, accepting ASCII digits only."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text.startswith("+") else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U32_MAX:
        raise ValueError("number too large to fit in target type")
    return value


class VersionTripleError(ValueError):
    """A version string could not be parsed as ``major[.minor][.patch]``."""

    def __init__(
        self,
        version: str,
        component: str | None = None,
        source: BaseException | None = None,
    ) -> None:
        self.version = version
        self.component = component
        self.source = source
        if component is None:
            message = (
                f"Failed to parse version string {_debug_quote(version)}: "
                "string must be in format <major>[.minor][.patch]"
            )
        else:
            message = (
                f"Failed to parse {component} version from "
                f"{_debug_quote(version)}: {source}"
            )
        super().__init__(message)


class VersionDoubleError(ValueError):
    """A version string could not be parsed as ``major[.minor]``."""

    def __init__(
        self,
        version: str,
        component: str | None = None,
        source: BaseException | None = None,
    ) -> None:
        self.version = version
        self.component = component
        self.source = source
        if component is None:
            message = (
                f"Failed to parse version string {_debug_quote(version)}: "
                "string must be in format <major>[.minor]"
            )
        else:
            message = (
                f"Failed to parse {component} version from "
                f"{_debug_quote(version)}: {source}"
            )
        super().__init__(message)


def _component(error_type: type, version: str, component: str, text: str) -> int:
    try:
        return _parse_u32(text)
    except ValueError as source:
        raise error_type(version, component, source) from source


@dataclass(frozen=True, order=True)
class VersionTriple:
    """A ``major.minor.patch`` version number."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def parse(cls, text: str) -> VersionTriple:
        """Parse ``major``, ``major.minor`` or ``major.minor.patch``."""
        parts = text.split(".")
        if len(parts) > 3:
            raise VersionTripleError(text)
        names = ("major", "minor", "patch")
        values = [
            _component(VersionTripleError, text, name, part)
            for name, part in zip(names, parts)
        ]
        values.extend([0] * (3 - len(values)))
        return cls(*values)

    @classmethod
    def from_match(cls, match: re.Match) -> tuple[VersionTriple, str]:
        """Build a triple from a match with ``version``/``major``/``minor``/``patch`` groups."""
        version = match.group("version")
        triple = cls(
            *(
                _component(VersionTripleError, version, name, match.group(name))
                for name in ("major", "minor", "patch")
            )
        )
        return triple, version


@dataclass(frozen=True, order=True)
class VersionDouble:
    """A ``major.minor`` version number."""

    major: int = 0
    minor: int = 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    @classmethod
    def parse(cls, text: str) -> VersionDouble:
        """Parse ``major`` or ``major.minor``."""
        parts = text.split(".")
        if len(parts) > 2:
            raise VersionDoubleError(text)
        values = [
            _component(VersionDoubleError, text, name, part)
            for name, part in zip(("major", "minor"), parts)
        ]
        values.extend([0] * (2 - len(values)))
        return cls(*values)


class RustVersionError(ValueError):
    """The compiler version output could not be understood."""


@dataclass(frozen=True)
class RustVersionFlavor:
    flavor: str
    candidate: str | None = None


@dataclass(frozen=True)
class RustVersionDetails:
    hash: str
    date: tuple[int, int, int]


@dataclass(frozen=True)
class RustVersion:
    """A parsed compiler version, with optional channel and build details."""

    triple: VersionTriple
    flavor: RustVersionFlavor | None = None
    # Absent when the compiler wasn't installed through rustup.
    details: RustVersionDetails | None = None

    LAST_GOOD_STABLE = VersionTriple(1, 45, 2)
    NEXT_GOOD_STABLE = VersionTriple(1, 49, 0)
    FIRST_GOOD_NIGHTLY = (2020, 10, 24)

    def __str__(self) -> str:
        text = str(self.triple)
        if self.flavor is not None:
            text += f"-{self.flavor.flavor}"
            if self.flavor.candidate is not None:
                text += f".{self.flavor.candidate}"
        if self.details is not None:
            year, month, day = self.details.date
            text += f" ({self.details.hash} {year}-{month}-{day})"
        return text

    @classmethod
    def parse(cls, output: str) -> RustVersion:
        """Parse the output of ``rustc --version``."""
        match = RUST_VERSION_PATTERN.search(output)
        if match is None:
            err = SearchFailed(_RUST_VERSION_COMMAND, output)
            raise RustVersionError(f"Failed to check rustc version: {err}") from err
        try:
            triple, _version = VersionTriple.from_match(match)
        except VersionTripleError as err:
            raise RustVersionError(str(err)) from err

        flavor = None
        if match.group("flavor") is not None:
            flavor = RustVersionFlavor(match.group("flavor"), match.group("candidate"))

        details = None
        if match.group("details") is not None:
            date = match.group("date")
            parts = []
            for name in ("year", "month", "day"):
                try:
                    parts.append(_parse_u32(match.group(name)))
                except ValueError as source:
                    raise RustVersionError(
                        f"Failed to parse rustc release {name} from "
                        f"{_debug_quote(date)}: {source}"
                    ) from source
            details = RustVersionDetails(match.group("hash"), tuple(parts))

        version = cls(triple, flavor, details)
        log.info("detected rustc version %s", version)
        return version

    def valid(self, is_macos: bool | None = None) -> bool:
        """Tell whether this compiler version is known to work on this platform."""
        if is_macos is None:
            is_macos = sys.platform == "darwin"
        if not is_macos:
            return True
        if self.triple <= self.LAST_GOOD_STABLE:
            return True
        if self.triple < self.NEXT_GOOD_STABLE:
            return False
        if self.details is None:
            log.warning(
                "output of `rustc --version` didn't contain date info; continuing "
                "with the assumption that the release date is at least 2020-10-24"
            )
            return True
        return self.details.date >= self.FIRST_GOOD_NIGHTLY