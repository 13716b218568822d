"""Guess which shell a command line was written for."""

from __future__ import annotations


def detect_shell(cmd: str) -> str | None:
    """Return the shell a command looks written for, or None if unclear."""
    if "function" in cmd or "setopt" in cmd:
        return "zsh"
    if "export" in cmd or "alias" in cmd:
        return "bash"
    if "set -x" in cmd or "function fish" in cmd:
        return "fish"
    return None