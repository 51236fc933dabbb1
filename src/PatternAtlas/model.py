from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Sequence

HEADING_FONT_ROLES = {
    1: "largeTitle",
    2: "title",
    3: "title2",
    4: "title3",
    5: "headline",
    6: "subheadline",
}


@dataclass(frozen=True)
class Block:
    """Raw text segment captured by the segmenter, fences included."""

    id: str
    content: str


@dataclass(frozen=True)
class BlockKind:
    """Base class for classified blocks."""


@dataclass(frozen=True)
class CodeBlock(BlockKind):
    code: str
    language: str | None = None

    @property
    def lines(self) -> list[str]:
        return self.code.split("\n")


@dataclass(frozen=True)
class Heading(BlockKind):
    level: int
    text: str


@dataclass(frozen=True)
class Bullet(BlockKind):
    text: str
    inline: Sequence["InlineText"] = ()


@dataclass(frozen=True)
class TableBlock(BlockKind):
    rows: Sequence[Sequence[str]]

    @property
    def header(self) -> Sequence[str]:
        return self.rows[0] if self.rows else ()

    @property
    def body(self) -> Sequence[Sequence[str]]:
        return self.rows[1:]


@dataclass(frozen=True)
class Paragraph(BlockKind):
    text: str
    inline: Sequence["InlineText"] = ()


@dataclass(frozen=True)
class Empty(BlockKind):
    """Whitespace-only block; renders nothing."""


@dataclass(frozen=True)
class InlineText:
    text: str
    bold: bool = False


class TokenCategory(str, Enum):
    KEYWORD = "keyword"
    TYPE = "type"
    STRING = "string"
    NUMBER = "number"
    COMMENT = "comment"
    PLAIN = "plain"


@dataclass(frozen=True)
class Token:
    text: str
    category: TokenCategory = TokenCategory.PLAIN


@dataclass(frozen=True)
class HighlightedLine:
    tokens: Sequence[Token]

    @property
    def text(self) -> str:
        return "".join(token.text for token in self.tokens)


@dataclass(frozen=True)
class RenderHints:
    """Presentation hints forwarded untouched to the rendering layer."""

    line_spacing: float | None = None
    font_role: str = "body"
    emphasize_first_row: bool = False
    line_numbers: bool = False


@dataclass(frozen=True)
class RenderedBlock:
    kind: BlockKind
    hints: RenderHints = field(default_factory=RenderHints)


@dataclass
class Document:
    blocks: List[RenderedBlock]
    metadata: dict[str, Any] | None = None
