import pytest

from warpish.markdown.themes import MarkdownTheme


def test_default_theme():
    theme = MarkdownTheme.default()
    assert theme.name == "default"
    assert len(theme.heading_colors) == 6


def test_theme_by_name():
    monokai = MarkdownTheme.by_name("monokai")
    assert monokai.name == "monokai"

    unknown = MarkdownTheme.by_name("unknown")
    assert unknown.name == "default"


def test_available_themes():
    themes = MarkdownTheme.available_themes()
    assert "default" in themes
    assert "monokai" in themes
    assert "github" in themes


@pytest.mark.parametrize("name", MarkdownTheme.available_themes())
def test_every_listed_theme_resolves_to_itself(name):
    theme = MarkdownTheme.by_name(name)
    assert theme.name == name
    assert len(theme.heading_colors) == 6


def test_monokai_code_background():
    assert MarkdownTheme.monokai().code_background == "\\x1b[48;5;235m"