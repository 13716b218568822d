"""AI rules loaded from a YAML file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Any

import yaml


class RuleError(Exception):
    """Raised when a rules file cannot be read or has the wrong shape."""


class RuleActionKind(Enum):
    RUN_COMMAND = "RunCommand"
    SUGGEST_FIX = "SuggestFix"
    OPEN_URL = "OpenUrl"


@dataclass(frozen=True)
class RuleAction:
    """What a rule does, with its argument (command, fix or URL)."""

    kind: RuleActionKind
    value: str


@dataclass
class Rule:
    name: str
    trigger_phrase: str
    action: RuleAction


def _field(node: Any, key: str) -> Any:
    return node.get(key) if isinstance(node, dict) else None


def _parse_rule(node: Any) -> Rule:
    name = _field(node, "name")
    if not isinstance(name, str):
        raise RuleError("Rule format is invalid: Missing 'name' field")
    trigger_phrase = _field(node, "trigger_phrase")
    if not isinstance(trigger_phrase, str):
        raise RuleError("Rule format is invalid: Missing 'trigger_phrase' field")

    action_node = _field(node, "action")
    for kind in RuleActionKind:
        value = _field(action_node, kind.value)
        if isinstance(value, str):
            return Rule(name, trigger_phrase, RuleAction(kind, value))
    raise RuleError(
        f"Rule format is invalid: Invalid or missing action for rule '{name}'"
    )


def load_rules_from_yaml(path: str | PathLike[str]) -> list[Rule]:
    """Read a YAML list of rules from the given file."""
    try:
        with open(path, encoding="utf-8") as handle:
            content = handle.read()
    except OSError as exc:
        raise RuleError(f"File I/O error: {exc}") from exc

    try:
        docs = list(yaml.safe_load_all(content))
    except yaml.YAMLError as exc:
        raise RuleError(f"YAML parsing error: {exc}") from exc

    if not docs:
        raise RuleError("Rule format is invalid: YAML file is empty")
    doc = docs[0]
    if not isinstance(doc, list):
        raise RuleError(
            "Rule format is invalid: Expected top-level YAML element to be an array"
        )
    return [_parse_rule(node) for node in doc]