"""Cheap syntax sanity checks for shell commands."""

from __future__ import annotations


def validate_bash(cmd: str) -> bool:
    return ";;" not in cmd


def validate_fish(cmd: str) -> bool:
    return "function()" not in cmd


def validate(cmd: str, shell: str) -> bool:
    """Check a command against the rules of the given shell; unknown shells pass."""
    if shell == "bash":
        return validate_bash(cmd)
    if shell == "fish":
        return validate_fish(cmd)
    return True