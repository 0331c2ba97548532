"""Helpers for mobile Rust project tooling: paths, versions, reports, prompts, links and cargo command lines."""

__version__ = "0.1.0"
__all__ = ["cargo", "cli", "common", "ln", "paths", "prompt", "versions"]