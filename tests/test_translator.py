from warpish.lpc.translator import ShellCommand, ShellTranslator


def test_bash_export_to_fish():
    cmd = ShellCommand("export", ["FOO=bar"], "bash")
    result = ShellTranslator().translate(cmd, "fish")
    assert result == ShellCommand("set", ["-x", "FOO", "bar"], "fish")


def test_bash_export_to_powershell():
    cmd = ShellCommand("export", ["FOO=bar"], "bash")
    result = ShellTranslator().translate(cmd, "powershell")
    assert result == ShellCommand("$env:FOO", ["bar"], "powershell")


def test_powershell_bash_round_trip():
    translator = ShellTranslator()
    original = ShellCommand("export", ["FOO=bar"], "bash")
    there = translator.translate(original, "powershell")
    back = translator.translate(there, "bash")
    assert back == original


def test_zsh_to_bash_only_changes_shell():
    cmd = ShellCommand("echo", ["hi"], "zsh")
    result = ShellTranslator().translate(cmd, "bash")
    assert result.shell == "bash"
    assert (result.command, result.args) == (cmd.command, cmd.args)
    assert cmd.shell == "zsh"


def test_unknown_pair_returns_equal_copy():
    cmd = ShellCommand("ls", ["-la"], "bash")
    result = ShellTranslator().translate(cmd, "zsh")
    assert result == cmd
    assert result is not cmd
    result.args.append("x")
    assert cmd.args == ["-la"]


def test_export_with_two_equals_is_untouched():
    cmd = ShellCommand("export", ["A=B=C"], "bash")
    result = ShellTranslator().translate(cmd, "fish")
    assert result == cmd


def test_export_without_args_is_untouched():
    cmd = ShellCommand("export", [], "bash")
    assert ShellTranslator().translate(cmd, "powershell") == cmd


def test_powershell_non_env_command_untouched():
    cmd = ShellCommand("Get-ChildItem", ["."], "powershell")
    assert ShellTranslator().translate(cmd, "bash") == cmd