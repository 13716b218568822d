import logging

import pytest

from warpish.keybindings import (
    KeyBinding,
    KeyCode,
    Keymap,
    Modifiers,
    load_keymap_from_yaml,
    parse_keybinding_string,
)


def test_parse_with_modifiers():
    binding = parse_keybinding_string("ctrl-shift-a")
    assert binding == KeyBinding(KeyCode.A, Modifiers.CONTROL | Modifiers.SHIFT)


def test_parse_is_case_insensitive():
    assert parse_keybinding_string("CTRL-C") == parse_keybinding_string("ctrl-c")


@pytest.mark.parametrize("name", ["meta", "super"])
def test_meta_and_super_are_same_modifier(name):
    binding = parse_keybinding_string(f"{name}-b")
    assert binding.mods == Modifiers.SUPER
    assert binding.key is KeyCode.B


def test_plain_key_has_no_modifiers():
    assert parse_keybinding_string("f") == KeyBinding(KeyCode.F, Modifiers(0))


@pytest.mark.parametrize("text", ["ctrl-z", "ctrl", "", "alt-shift"])
def test_unknown_or_missing_key(text):
    assert parse_keybinding_string(text) is None


def test_keymap_get_missing():
    assert Keymap().get(KeyBinding(KeyCode.A)) is None


def _write(tmp_path, text):
    path = tmp_path / "keys.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_load_keymap(tmp_path, caplog):
    path = _write(tmp_path, "copy: ctrl-c\npaste: ctrl-shift-d\nundo: ctrl-z\n")
    with caplog.at_level(logging.WARNING):
        keymap = load_keymap_from_yaml(path)
    assert len(keymap) == 2
    assert keymap.get(KeyBinding(KeyCode.C, Modifiers.CONTROL)) == "copy"
    assert keymap.get(KeyBinding(KeyCode.D, Modifiers.CONTROL | Modifiers.SHIFT)) == "paste"
    assert "Failed to parse keybinding: ctrl-z" in caplog.text


def test_load_empty_file(tmp_path):
    with pytest.raises(ValueError, match="YAML file is empty"):
        load_keymap_from_yaml(_write(tmp_path, ""))


def test_load_non_map(tmp_path):
    with pytest.raises(ValueError, match="top-level YAML to be a map"):
        load_keymap_from_yaml(_write(tmp_path, "- ctrl-a\n"))


def test_load_non_string_binding(tmp_path):
    with pytest.raises(ValueError, match="Keybinding must be a string"):
        load_keymap_from_yaml(_write(tmp_path, "copy: 3\n"))


def test_load_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_keymap_from_yaml(tmp_path / "absent.yaml")