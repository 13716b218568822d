"""Detect, validate and translate a command line in one step."""

from __future__ import annotations

import sys

from warpish.lpc.detector import detect_shell
from warpish.lpc.translator import ShellCommand, ShellTranslator
from warpish.lpc.validator import validate


def process_command(text: str, current_shell: str, target_shell: str) -> str | None:
    """Translate a command line into the target shell.

    Returns None, after reporting on stderr, when the command fails the
    syntax check for the shell it was detected as.
    """
    detected = detect_shell(text) or current_shell
    if not validate(text, detected):
        print(f"Invalid syntax for shell: {detected}", file=sys.stderr)
        return None

    words = text.split()
    command = words[0] if words else ""
    shell_cmd = ShellCommand(command=command, args=words[1:], shell=detected)

    translated = ShellTranslator().translate(shell_cmd, target_shell)
    return f"{translated.command} {' '.join(translated.args)}"