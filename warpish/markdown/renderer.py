"""Render a Markdown syntax tree as ANSI-styled terminal text."""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Iterator

from warpish.markdown.ast import (
    Block,
    CodeBlock,
    CodeInline,
    Document,
    EmphasisInline,
    HeadingBlock,
    HtmlBlock,
    HtmlInline,
    ImageInline,
    Inline,
    LineBreak,
    LinkInline,
    ListBlock,
    ParagraphBlock,
    QuoteBlock,
    SoftBreak,
    StrongInline,
    TableBlock,
    TextInline,
    ThematicBreak,
)
from warpish.markdown.config import MarkdownConfig, RenderError
from warpish.markdown.themes import MarkdownTheme

RESET = "\x1b[0m"
BOLD = "\x1b[1m"
ITALIC = "\x1b[3m"
UNDERLINE = "\x1b[4m"

BRIGHT_BLACK = "\x1b[90m"
BRIGHT_GREEN = "\x1b[92m"
BRIGHT_YELLOW = "\x1b[93m"
BRIGHT_BLUE = "\x1b[94m"
BRIGHT_MAGENTA = "\x1b[95m"
BRIGHT_CYAN = "\x1b[96m"
BRIGHT_WHITE = "\x1b[97m"

BG_BLACK = "\x1b[40m"

_HEADING_COLORS = {
    1: BRIGHT_BLUE,
    2: BRIGHT_GREEN,
    3: BRIGHT_YELLOW,
    4: BRIGHT_MAGENTA,
    5: BRIGHT_CYAN,
    6: BRIGHT_WHITE,
}


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _lines(text: str) -> list[str]:
    """Split into lines: no trailing empty line, CR before LF dropped."""
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class TerminalRenderer:
    """Turns a Document into text with colours and box drawing."""

    def __init__(self, config: MarkdownConfig | None = None) -> None:
        self.config = dataclasses.replace(config) if config is not None else MarkdownConfig()
        self.theme = MarkdownTheme.default()

    def with_theme(self, theme: MarkdownTheme) -> TerminalRenderer:
        self.theme = theme
        return self

    def render(self, document: Document) -> str:
        parts: list[str] = []
        for block in document.blocks:
            parts.extend(self._block(block))
            parts.append("\n")
        return "".join(parts)

    # Blocks

    def _block(self, block: Block) -> Iterator[str]:
        match block:
            case HeadingBlock():
                yield from self._heading(block)
            case ParagraphBlock():
                yield from self._inlines(block.content)
            case CodeBlock():
                yield from self._code_block(block)
            case ListBlock():
                yield from self._list(block)
            case TableBlock():
                yield from self._table(block)
            case QuoteBlock():
                yield from self._quote(block)
            case ThematicBreak():
                width = self.config.max_width if self.config.max_width is not None else 80
                yield f"{BRIGHT_BLACK}{'─' * width}{RESET}\n"
            case HtmlBlock():
                yield f"{BRIGHT_BLACK}{block.content}{RESET}"
            case _:
                raise RenderError(f"unsupported block: {type(block).__name__}")

    def _heading(self, heading: HeadingBlock) -> Iterator[str]:
        color = _HEADING_COLORS.get(heading.level, BRIGHT_WHITE)
        yield f"{BOLD}{color}{'#' * heading.level} "
        yield from self._inlines(heading.content)
        yield RESET

    def _code_block(self, code_block: CodeBlock) -> Iterator[str]:
        max_width = self.config.max_width
        language = code_block.language

        yield BG_BLACK + BRIGHT_WHITE
        yield f"┌─ {language} " if language is not None else "┌─ code "
        if max_width is not None:
            current_len = 7 + _byte_len(language) if language is not None else 12
            if current_len < max_width:
                yield "─" * (max_width - current_len - 1)
        yield f"┐{RESET}\n"

        for number, line in enumerate(_lines(code_block.code), start=1):
            yield BG_BLACK + BRIGHT_WHITE
            yield f"│{number:3} │ " if code_block.line_numbers else "│ "
            yield BRIGHT_GREEN + line
            if max_width is not None:
                line_len = _byte_len(line) + (6 if code_block.line_numbers else 2)
                if line_len < max_width:
                    yield " " * (max_width - line_len - 1)
            yield f"│{RESET}\n"

        yield BG_BLACK + BRIGHT_WHITE
        yield "└"
        if max_width is not None:
            if max_width < 2:
                raise RenderError(f"max width {max_width} is too small for a code block")
            yield "─" * (max_width - 2)
        yield f"┘{RESET}\n"

    def _list(self, list_block: ListBlock) -> Iterator[str]:
        last = len(list_block.items) - 1
        for index, item in enumerate(list_block.items):
            marker = f"{index + 1}. " if list_block.ordered else "• "
            yield f"{BRIGHT_CYAN}{marker}{RESET}"
            for block in item.content:
                yield from self._block(block)
            if index < last:
                yield "\n"

    def _table(self, table: TableBlock) -> Iterator[str]:
        if not self.config.table_rendering:
            return

        widths = [self._width(header.content) for header in table.headers]
        for row in table.rows:
            for index, cell in enumerate(row[: len(widths)]):
                widths[index] = max(widths[index], self._width(cell.content))

        def border(left: str, middle: str, right: str) -> str:
            inner = middle.join("─" * (width + 2) for width in widths)
            return f"{BRIGHT_WHITE}{left}{inner}{right}{RESET}\n"

        yield border("┌", "┬", "┐")

        yield BRIGHT_WHITE + "│"
        for width, header in zip(widths, table.headers):
            yield " " + BOLD
            yield from self._inlines(header.content)
            yield " " * (width - self._width(header.content) + 1) + BRIGHT_WHITE
            yield "│"
        yield RESET + "\n"

        yield border("├", "┼", "┤")

        for row in table.rows:
            if len(row) > len(widths):
                raise RenderError(
                    f"table row has {len(row)} cells but only {len(widths)} columns"
                )
            yield BRIGHT_WHITE + "│"
            for width, cell in zip(widths, row):
                yield " "
                yield from self._inlines(cell.content)
                yield " " * (width - self._width(cell.content) + 1) + BRIGHT_WHITE
                yield "│"
            yield RESET + "\n"

        yield border("└", "┴", "┘")

    def _quote(self, quote: QuoteBlock) -> Iterator[str]:
        yield BRIGHT_BLACK + "│ "
        for block in quote.content:
            yield from self._block(block)
        yield RESET

    # Inlines

    def _inlines(self, inlines: Iterable[Inline]) -> Iterator[str]:
        for inline in inlines:
            yield from self._inline(inline)

    def _inline(self, inline: Inline) -> Iterator[str]:
        match inline:
            case TextInline():
                yield inline.content
            case EmphasisInline():
                yield ITALIC
                yield from self._inlines(inline.content)
                yield RESET
            case StrongInline():
                yield BOLD
                yield from self._inlines(inline.content)
                yield RESET
            case CodeInline():
                yield f"{BG_BLACK}{BRIGHT_GREEN}`{inline.content}`{RESET}"
            case LinkInline():
                highlight = self.config.link_highlighting
                if highlight:
                    yield UNDERLINE + BRIGHT_BLUE
                yield from self._inlines(inline.content)
                yield f"{RESET} ({inline.url})" if highlight else f" ({inline.url})"
            case ImageInline():
                yield (
                    f"{BRIGHT_MAGENTA}{ITALIC}[Image: {inline.alt}] ({inline.url}){RESET}"
                )
            case LineBreak():
                yield "\n"
            case SoftBreak():
                yield " "
            case HtmlInline():
                yield f"{BRIGHT_BLACK}{inline.content}{RESET}"
            case _:
                raise RenderError(f"unsupported inline: {type(inline).__name__}")

    def _width(self, inlines: Iterable[Inline]) -> int:
        width = 0
        for inline in inlines:
            match inline:
                case TextInline() | HtmlInline():
                    width += _byte_len(inline.content)
                case EmphasisInline() | StrongInline():
                    width += self._width(inline.content)
                case CodeInline():
                    width += _byte_len(inline.content) + 2
                case LinkInline():
                    width += self._width(inline.content) + _byte_len(inline.url) + 3
                case ImageInline():
                    width += _byte_len(inline.alt) + _byte_len(inline.url) + 12
                case SoftBreak():
                    width += 1
                case _:
                    pass
        return width