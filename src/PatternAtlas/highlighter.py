from __future__ import annotations

import logging
import re
from typing import Iterable, Sequence

from .model import HighlightedLine, Token, TokenCategory

logger = logging.getLogger(__name__)

SWIFT_KEYWORDS = (
    "class", "struct", "enum", "protocol", "extension", "func", "var", "let", "const",
    "if", "else", "for", "while", "repeat", "switch", "case", "default", "break",
    "continue", "return", "throw", "try", "catch", "guard", "defer", "in",
    "private", "fileprivate", "internal", "public", "open", "static", "final",
    "import", "typealias", "associatedtype", "precedencegroup", "operator",
    "subscript", "init", "deinit", "get", "set", "willSet", "didSet", "inout",
    "override", "required", "convenience", "lazy", "weak", "unowned", "strong",
)

SWIFT_TYPES = (
    "String", "Int", "Double", "Float", "Bool", "Array", "Dictionary", "Set",
    "Optional", "URL", "Data", "Date", "UUID", "CGFloat", "CGPoint", "CGSize",
    "CGRect", "UIView", "UIViewController", "UIColor", "UIFont", "UIImage",
    "UILabel", "UIButton", "UITableView", "UICollectionView", "UIScrollView",
)

COMMENT_MARKER = "//"
STRING_PATTERN = r'"[^"]*"'
NUMBER_PATTERN = r"\b\d+(?:\.\d+)?\b"
FAMILY_ORDER = (TokenCategory.KEYWORD, TokenCategory.TYPE, TokenCategory.STRING, TokenCategory.NUMBER)


def word_pattern(words: Iterable[str]) -> str:
    """Alternation of literal ``words`` that only matches whole words."""
    escaped = sorted((re.escape(word) for word in words), key=len, reverse=True)
    return r"\b(?:" + "|".join(escaped) + r")\b"


class Highlighter:
    """Regex syntax highlighter for single lines of code.

    Pattern families claim characters in priority order: the line comment
    first, then keywords, types, strings and numbers. A character already
    claimed keeps its first category.

    ``patterns`` overrides the regex of any family in ``FAMILY_ORDER``. The
    comment marker is fixed, so other categories raise ``ValueError``.
    """

    def __init__(
        self,
        keywords: Sequence[str] = SWIFT_KEYWORDS,
        types: Sequence[str] = SWIFT_TYPES,
        patterns: dict[TokenCategory, str] | None = None,
    ) -> None:
        sources = {
            TokenCategory.KEYWORD: word_pattern(keywords) if keywords else None,
            TokenCategory.TYPE: word_pattern(types) if types else None,
            TokenCategory.STRING: STRING_PATTERN,
            TokenCategory.NUMBER: NUMBER_PATTERN,
        }
        if patterns:
            unknown = [str(getattr(category, "value", category)) for category in patterns if category not in FAMILY_ORDER]
            if unknown:
                raise ValueError(f"No pattern family for: {', '.join(unknown)}")
            sources.update({TokenCategory(category): source for category, source in patterns.items()})

        self.families: list[tuple[TokenCategory, re.Pattern[str]]] = []
        for category in FAMILY_ORDER:
            source = sources.get(category)
            if not source:
                continue
            try:
                self.families.append((category, re.compile(source)))
            except re.error as exc:
                logger.warning("Skipping %s highlighting, bad pattern %r: %s", category.value, source, exc)

    def highlight(self, line: str) -> HighlightedLine:
        claimed: list[TokenCategory | None] = [None] * len(line)

        comment_at = line.find(COMMENT_MARKER)
        if comment_at != -1:
            for idx in range(comment_at, len(line)):
                claimed[idx] = TokenCategory.COMMENT

        for category, regex in self.families:
            for match in regex.finditer(line):
                for idx in range(match.start(), match.end()):
                    if claimed[idx] is None:
                        claimed[idx] = category

        return HighlightedLine(tokens=_materialize(line, claimed))


def _materialize(line: str, claimed: Sequence[TokenCategory | None]) -> list[Token]:
    tokens: list[Token] = []
    start = 0
    for idx in range(1, len(line) + 1):
        if idx == len(line) or claimed[idx] != claimed[start]:
            tokens.append(Token(text=line[start:idx], category=claimed[start] or TokenCategory.PLAIN))
            start = idx
    return tokens


_default = Highlighter()


def highlight_line(line: str) -> HighlightedLine:
    return _default.highlight(line)


def highlight_code(line: str) -> list[Token]:
    return list(_default.highlight(line).tokens)


def highlight_block(code: str) -> list[HighlightedLine]:
    return [_default.highlight(line) for line in code.split("\n")]
