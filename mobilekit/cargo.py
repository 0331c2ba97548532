"""Building command lines for cargo invocations."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Mapping, Sequence

log = logging.getLogger(__name__)

_TARGET_DIR_VARS = ("CARGO_TARGET_DIR", "CARGO_BUILD_TARGET_DIR")


@dataclass(frozen=True)
class CargoInvocation:
    """A fully described cargo command: arguments and extra environment."""

    args: list[str]
    env: dict[str, str] = field(default_factory=dict)
    program: str = "cargo"

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


@dataclass(frozen=True)
class CargoCommand:
    """Builder for a cargo subcommand invocation."""

    subcommand: str
    verbose: bool = False
    package: str | None = None
    manifest_path: Path | None = None
    target: str | None = None
    no_default_features: bool = False
    features: tuple[str, ...] | None = None
    args: tuple[str, ...] | None = None
    release: bool = False

    def with_verbose(self, verbose: bool) -> CargoCommand:
        return replace(self, verbose=verbose)

    def with_package(self, package: str | None) -> CargoCommand:
        return replace(self, package=package)

    def with_manifest_path(self, manifest_path: str | os.PathLike | None) -> CargoCommand:
        """Set the manifest path, canonicalizing it; it must exist."""
        if manifest_path is not None:
            manifest_path = Path(manifest_path).resolve(strict=True)
        return replace(self, manifest_path=manifest_path)

    def with_target(self, target: str | None) -> CargoCommand:
        return replace(self, target=target)

    def with_no_default_features(self, no_default_features: bool) -> CargoCommand:
        return replace(self, no_default_features=no_default_features)

    def with_features(self, features: Sequence[str] | None) -> CargoCommand:
        return replace(self, features=None if features is None else tuple(features))

    def with_args(self, args: Sequence[str] | None) -> CargoCommand:
        return replace(self, args=None if args is None else tuple(args))

    def with_release(self, release: bool) -> CargoCommand:
        return replace(self, release=release)

    def build(self, env: Mapping[str, str] | None = None) -> CargoInvocation:
        """Assemble the arguments and environment for this command."""
        args = [self.subcommand]
        if self.verbose:
            args.append("-vv")
        if self.package is not None:
            args += ["--package", self.package]
        if self.manifest_path is not None:
            if not self.manifest_path.exists():
                log.error('manifest path "%s" doesn\'t exist!', self.manifest_path)
            args += ["--manifest-path", str(self.manifest_path)]
        if self.target is not None:
            args += ["--target", self.target]
        if self.no_default_features:
            args.append("--no-default-features")
        if self.features is not None:
            args += ["--features", " ".join(self.features)]
        if self.args is not None:
            args.extend(self.args)
        if self.release:
            args.append("--release")
        merged = dict(env or {})
        merged.update(explicit_cargo_env())
        return CargoInvocation(args, merged)


def explicit_cargo_env() -> dict[str, str]:
    """Return the target-directory variables set in the current environment."""
    return {name: os.environ[name] for name in _TARGET_DIR_VARS if name in os.environ}