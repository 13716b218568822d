from warpish.lpc.validator import validate, validate_bash, validate_fish


def test_bash_rejects_double_semicolon():
    assert validate_bash("case $x in a) echo a ;; esac") is False


def test_bash_accepts_plain_command():
    assert validate_bash("echo a; echo b") is True


def test_fish_rejects_empty_parens_function():
    assert validate_fish("function() end") is False


def test_fish_accepts_plain_command():
    assert validate_fish("function greet; end") is True


def test_validate_dispatches_by_shell():
    assert validate("a ;; b", "bash") is False
    assert validate("a ;; b", "fish") is True
    assert validate("function()", "fish") is False
    assert validate("function()", "bash") is True


def test_unknown_shell_always_valid():
    assert validate("a ;; function()", "zsh") is True