"""Keyboard shortcuts mapped to named actions, loaded from YAML."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from os import PathLike

import yaml

logger = logging.getLogger(__name__)


class KeyCode(enum.Enum):
    A = "KeyA"
    B = "KeyB"
    C = "KeyC"
    D = "KeyD"
    E = "KeyE"
    F = "KeyF"


class Modifiers(enum.Flag):
    CONTROL = enum.auto()
    SHIFT = enum.auto()
    ALT = enum.auto()
    SUPER = enum.auto()


_MODIFIER_NAMES = {
    "ctrl": Modifiers.CONTROL,
    "shift": Modifiers.SHIFT,
    "alt": Modifiers.ALT,
    "meta": Modifiers.SUPER,
    "super": Modifiers.SUPER,
}

_KEY_NAMES = {code.name.lower(): code for code in KeyCode}


@dataclass(frozen=True)
class KeyBinding:
    key: KeyCode
    mods: Modifiers = Modifiers(0)


@dataclass
class Keymap:
    """Lookup table from key bindings to action names."""

    bindings: dict[KeyBinding, str] = field(default_factory=dict)

    def get(self, binding: KeyBinding) -> str | None:
        return self.bindings.get(binding)

    def __len__(self) -> int:
        return len(self.bindings)

    def __contains__(self, binding: object) -> bool:
        return binding in self.bindings


def parse_keybinding_string(text: str) -> KeyBinding | None:
    """Parse text such as "ctrl-shift-a"; None if the key is not known.

    The last part that is not a modifier names the key.
    """
    mods = Modifiers(0)
    key_name = ""
    for part in text.split("-"):
        lowered = part.lower()
        modifier = _MODIFIER_NAMES.get(lowered)
        if modifier is not None:
            mods |= modifier
        else:
            key_name = lowered
    key = _KEY_NAMES.get(key_name)
    return KeyBinding(key, mods) if key is not None else None


def load_keymap_from_yaml(path: str | PathLike[str]) -> Keymap:
    """Load a mapping of action name to key string from a YAML file.

    Raises OSError if the file cannot be read and ValueError if it is not
    a mapping of strings. Unparseable key strings are logged and skipped.
    """
    with open(path, encoding="utf-8") as handle:
        content = handle.read()
    try:
        docs = list(yaml.safe_load_all(content))
    except yaml.YAMLError as exc:
        raise ValueError(str(exc)) from exc
    if not docs:
        raise ValueError("YAML file is empty")
    doc = docs[0]
    if not isinstance(doc, dict):
        raise ValueError("Expected top-level YAML to be a map")

    keymap = Keymap()
    for action, key_string in doc.items():
        if not isinstance(action, str):
            raise ValueError("Action key must be a string")
        if not isinstance(key_string, str):
            raise ValueError("Keybinding must be a string")
        binding = parse_keybinding_string(key_string)
        if binding is None:
            logger.warning("Failed to parse keybinding: %s", key_string)
            continue
        keymap.bindings[binding] = action
    return keymap