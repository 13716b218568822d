"""Errors and settings shared by the Markdown tools."""

from __future__ import annotations

from dataclasses import dataclass


class MarkdownError(Exception):
    """Base error for Markdown processing."""

    prefix = "Markdown error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class ParseError(MarkdownError):
    prefix = "Parse error"


class RenderError(MarkdownError):
    prefix = "Render error"


class InvalidSyntaxError(MarkdownError):
    prefix = "Invalid syntax"


@dataclass
class MarkdownConfig:
    """Options controlling how Markdown is rendered to the terminal."""

    syntax_highlighting: bool = True
    table_rendering: bool = True
    link_highlighting: bool = True
    code_block_theme: str = "monokai"
    max_width: int | None = 80
    indent_size: int = 2