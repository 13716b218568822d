"""Syntax tree nodes for parsed Markdown documents."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from enum import Enum


class Block:
    """Base class of every block-level node."""

    def is_heading(self) -> bool:
        return isinstance(self, HeadingBlock)

    def is_code_block(self) -> bool:
        return isinstance(self, CodeBlock)

    def is_table(self) -> bool:
        return isinstance(self, TableBlock)


class Inline:
    """Base class of every inline node."""


@dataclass
class Document:
    """A parsed document: its blocks in order plus free-form metadata."""

    blocks: list[Block] = field(default_factory=list)
    metadata: dict[str, str] = field(default_factory=dict)

    def add_block(self, block: Block) -> None:
        self.blocks.append(block)

    def add_metadata(self, key: str, value: str) -> None:
        self.metadata[key] = value


@dataclass
class HeadingBlock(Block):
    """A heading; its level is clamped to the range 1 to 6."""

    level: int
    content: list[Inline] = field(default_factory=list)
    id: str | None = None

    def __post_init__(self) -> None:
        self.level = max(1, min(6, self.level))

    def with_id(self, id: str) -> HeadingBlock:
        return dataclasses.replace(self, id=id)


@dataclass
class ParagraphBlock(Block):
    content: list[Inline] = field(default_factory=list)


@dataclass
class CodeBlock(Block):
    code: str
    language: str | None = None
    line_numbers: bool = False

    def with_language(self, language: str) -> CodeBlock:
        return dataclasses.replace(self, language=language)

    def with_line_numbers(self, show: bool) -> CodeBlock:
        return dataclasses.replace(self, line_numbers=show)


@dataclass
class ListItem:
    content: list[Block] = field(default_factory=list)
    marker: str = ""


@dataclass
class ListBlock(Block):
    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int | None = None
    tight: bool = True

    def add_item(self, item: ListItem) -> None:
        self.items.append(item)


class TableAlignment(Enum):
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    NONE = "none"


@dataclass
class TableCell:
    content: list[Inline] = field(default_factory=list)


@dataclass
class TableBlock(Block):
    headers: list[TableCell] = field(default_factory=list)
    rows: list[list[TableCell]] = field(default_factory=list)
    alignments: list[TableAlignment] = field(default_factory=list)

    def add_header(self, cell: TableCell) -> None:
        self.headers.append(cell)

    def add_row(self, row: list[TableCell]) -> None:
        self.rows.append(list(row))

    def set_alignments(self, alignments: list[TableAlignment]) -> None:
        self.alignments = list(alignments)


@dataclass
class QuoteBlock(Block):
    content: list[Block] = field(default_factory=list)


@dataclass
class ThematicBreak(Block):
    """A horizontal rule."""


@dataclass
class HtmlBlock(Block):
    content: str


@dataclass
class TextInline(Inline):
    content: str


@dataclass
class EmphasisInline(Inline):
    content: list[Inline] = field(default_factory=list)


@dataclass
class StrongInline(Inline):
    content: list[Inline] = field(default_factory=list)


@dataclass
class CodeInline(Inline):
    content: str


@dataclass
class LinkInline(Inline):
    content: list[Inline]
    url: str
    title: str | None = None

    def with_title(self, title: str) -> LinkInline:
        return dataclasses.replace(self, title=title)


@dataclass
class ImageInline(Inline):
    alt: str
    url: str
    title: str | None = None

    def with_title(self, title: str) -> ImageInline:
        return dataclasses.replace(self, title=title)


@dataclass
class LineBreak(Inline):
    """A hard line break."""


@dataclass
class SoftBreak(Inline):
    """A soft line break, rendered as a space."""


@dataclass
class HtmlInline(Inline):
    content: str