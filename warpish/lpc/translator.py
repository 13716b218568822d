"""Rewrite simple commands from one shell's syntax into another's."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from dataclasses import dataclass, field

_ENV_PREFIX = "$env:"


@dataclass
class ShellCommand:
    """A command split into its name and arguments, tagged with its shell."""

    command: str
    args: list[str] = field(default_factory=list)
    shell: str = ""

    def copy(self) -> ShellCommand:
        return dataclasses.replace(self, args=list(self.args))


def _split_assignment(arg: str) -> tuple[str, str] | None:
    parts = arg.split("=")
    if len(parts) != 2:
        return None
    return parts[0], parts[1]


def _bash_to_fish(cmd: ShellCommand) -> ShellCommand:
    translated = cmd.copy()
    if cmd.command == "export" and cmd.args:
        assignment = _split_assignment(cmd.args[0])
        if assignment is not None:
            name, value = assignment
            translated.command = "set"
            translated.args = ["-x", name, value]
            translated.shell = "fish"
    return translated


def _zsh_to_bash(cmd: ShellCommand) -> ShellCommand:
    translated = cmd.copy()
    translated.shell = "bash"
    return translated


def _bash_to_powershell(cmd: ShellCommand) -> ShellCommand:
    translated = cmd.copy()
    if cmd.command == "export" and cmd.args:
        assignment = _split_assignment(cmd.args[0])
        if assignment is not None:
            name, value = assignment
            translated.command = _ENV_PREFIX + name
            translated.args = [value]
            translated.shell = "powershell"
    return translated


def _powershell_to_bash(cmd: ShellCommand) -> ShellCommand:
    translated = cmd.copy()
    if cmd.command.startswith(_ENV_PREFIX) and cmd.args:
        key = cmd.command
        while key.startswith(_ENV_PREFIX):
            key = key[len(_ENV_PREFIX):]
        translated.command = "export"
        translated.args = [f"{key}={cmd.args[0]}"]
        translated.shell = "bash"
    return translated


class ShellTranslator:
    """Applies the rule registered for a source-to-target shell pair."""

    def __init__(self) -> None:
        self._rules: dict[str, Callable[[ShellCommand], ShellCommand]] = {
            "bash_to_fish": _bash_to_fish,
            "zsh_to_bash": _zsh_to_bash,
            "powershell_to_bash": _powershell_to_bash,
            "bash_to_powershell": _bash_to_powershell,
        }

    def translate(self, cmd: ShellCommand, target_shell: str) -> ShellCommand:
        """Return a translated copy; unknown pairs yield an unchanged copy."""
        rule = self._rules.get(f"{cmd.shell}_to_{target_shell}")
        return rule(cmd) if rule is not None else cmd.copy()