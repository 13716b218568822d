"""Colour themes for terminal Markdown rendering."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class MarkdownTheme:
    """A named set of escape sequences used for each Markdown element."""

    name: str
    heading_colors: tuple[str, str, str, str, str, str]
    text_color: str
    emphasis_color: str
    strong_color: str
    code_color: str
    code_background: str
    link_color: str
    quote_color: str
    table_border_color: str
    list_marker_color: str

    @classmethod
    def default(cls) -> MarkdownTheme:
        return cls(
            name="default",
            heading_colors=(
                "\\x1b[94m",
                "\\x1b[92m",
                "\\x1b[93m",
                "\\x1b[95m",
                "\\x1b[96m",
                "\\x1b[97m",
            ),
            text_color="\\x1b[97m",
            emphasis_color="\\x1b[3m",
            strong_color="\\x1b[1m",
            code_color="\\x1b[92m",
            code_background="\\x1b[40m",
            link_color="\\x1b[94m",
            quote_color="\\x1b[90m",
            table_border_color="\\x1b[97m",
            list_marker_color="\\x1b[96m",
        )

    @classmethod
    def monokai(cls) -> MarkdownTheme:
        return cls(
            name="monokai",
            heading_colors=(
                "\\x1b[38;5;81m",
                "\\x1b[38;5;118m",
                "\\x1b[38;5;227m",
                "\\x1b[38;5;141m",
                "\\x1b[38;5;208m",
                "\\x1b[38;5;15m",
            ),
            text_color="\\x1b[38;5;15m",
            emphasis_color="\\x1b[3;38;5;15m",
            strong_color="\\x1b[1;38;5;15m",
            code_color="\\x1b[38;5;118m",
            code_background="\\x1b[48;5;235m",
            link_color="\\x1b[38;5;81m",
            quote_color="\\x1b[38;5;102m",
            table_border_color="\\x1b[38;5;15m",
            list_marker_color="\\x1b[38;5;208m",
        )

    @classmethod
    def solarized_dark(cls) -> MarkdownTheme:
        return cls(
            name="solarized_dark",
            heading_colors=(
                "\\x1b[38;5;33m",
                "\\x1b[38;5;64m",
                "\\x1b[38;5;136m",
                "\\x1b[38;5;125m",
                "\\x1b[38;5;37m",
                "\\x1b[38;5;230m",
            ),
            text_color="\\x1b[38;5;230m",
            emphasis_color="\\x1b[3;38;5;230m",
            strong_color="\\x1b[1;38;5;230m",
            code_color="\\x1b[38;5;64m",
            code_background="\\x1b[48;5;235m",
            link_color="\\x1b[38;5;33m",
            quote_color="\\x1b[38;5;244m",
            table_border_color="\\x1b[38;5;244m",
            list_marker_color="\\x1b[38;5;166m",
        )

    @classmethod
    def solarized_light(cls) -> MarkdownTheme:
        return cls(
            name="solarized_light",
            heading_colors=(
                "\\x1b[38;5;33m",
                "\\x1b[38;5;64m",
                "\\x1b[38;5;136m",
                "\\x1b[38;5;125m",
                "\\x1b[38;5;37m",
                "\\x1b[38;5;235m",
            ),
            text_color="\\x1b[38;5;235m",
            emphasis_color="\\x1b[3;38;5;235m",
            strong_color="\\x1b[1;38;5;235m",
            code_color="\\x1b[38;5;64m",
            code_background="\\x1b[48;5;230m",
            link_color="\\x1b[38;5;33m",
            quote_color="\\x1b[38;5;244m",
            table_border_color="\\x1b[38;5;244m",
            list_marker_color="\\x1b[38;5;166m",
        )

    @classmethod
    def github(cls) -> MarkdownTheme:
        return cls(
            name="github",
            heading_colors=(
                "\\x1b[38;5;4m",
                "\\x1b[38;5;2m",
                "\\x1b[38;5;3m",
                "\\x1b[38;5;5m",
                "\\x1b[38;5;6m",
                "\\x1b[38;5;8m",
            ),
            text_color="\\x1b[38;5;0m",
            emphasis_color="\\x1b[3;38;5;0m",
            strong_color="\\x1b[1;38;5;0m",
            code_color="\\x1b[38;5;1m",
            code_background="\\x1b[48;5;7m",
            link_color="\\x1b[38;5;4m",
            quote_color="\\x1b[38;5;8m",
            table_border_color="\\x1b[38;5;8m",
            list_marker_color="\\x1b[38;5;0m",
        )

    @classmethod
    def dracula(cls) -> MarkdownTheme:
        return cls(
            name="dracula",
            heading_colors=(
                "\\x1b[38;5;141m",
                "\\x1b[38;5;84m",
                "\\x1b[38;5;228m",
                "\\x1b[38;5;212m",
                "\\x1b[38;5;117m",
                "\\x1b[38;5;15m",
            ),
            text_color="\\x1b[38;5;15m",
            emphasis_color="\\x1b[3;38;5;15m",
            strong_color="\\x1b[1;38;5;15m",
            code_color="\\x1b[38;5;84m",
            code_background="\\x1b[48;5;235m",
            link_color="\\x1b[38;5;117m",
            quote_color="\\x1b[38;5;102m",
            table_border_color="\\x1b[38;5;15m",
            list_marker_color="\\x1b[38;5;212m",
        )

    @classmethod
    def by_name(cls, name: str) -> MarkdownTheme:
        """Return the named theme, or the default theme for unknown names."""
        factories = {
            "monokai": cls.monokai,
            "solarized_dark": cls.solarized_dark,
            "solarized_light": cls.solarized_light,
            "github": cls.github,
            "dracula": cls.dracula,
        }
        return factories.get(name, cls.default)()

    @classmethod
    def available_themes(cls) -> list[str]:
        return [
            "default",
            "monokai",
            "solarized_dark",
            "solarized_light",
            "github",
            "dracula",
        ]