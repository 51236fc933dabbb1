from __future__ import annotations

import re
import uuid
from typing import List

from .model import (
    Block,
    BlockKind,
    Bullet,
    CodeBlock,
    Document,
    Empty,
    HEADING_FONT_ROLES,
    Heading,
    InlineText,
    Paragraph,
    RenderedBlock,
    RenderHints,
    TableBlock,
)

FENCE = "```"
BULLET_MARKERS = ("•", "-")
MAX_HEADING_LEVEL = 6

_BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
_TABLE_SEPARATOR_RE = re.compile(r"[|:\s]*-[|\-:\s]*")


def parse_markdown(text: str, line_spacing: float | None = None) -> Document:
    return Document(blocks=segment_and_classify(text, line_spacing=line_spacing))


def segment_and_classify(text: str, line_spacing: float | None = None) -> list[RenderedBlock]:
    """Segment ``text`` and pair each classified block with its render hints.

    Empty blocks are dropped since they render nothing.
    """
    rendered: list[RenderedBlock] = []
    for block in segment(text):
        kind = classify(block)
        if isinstance(kind, Empty):
            continue
        rendered.append(RenderedBlock(kind=kind, hints=_hints_for(kind, line_spacing)))
    return rendered


def segment(document: str) -> list[Block]:
    """Split raw text into ordered blocks.

    Blank lines separate blocks except inside a fenced code block, where every
    line is kept verbatim. An unterminated fence swallows the rest of the input.
    """
    blocks: List[Block] = []
    current: str = ""
    in_code_block = False

    for line in document.splitlines():
        stripped = line.strip()
        if stripped.startswith(FENCE):
            if in_code_block:
                current += "\n" + line
                blocks.append(_new_block(current))
                current = ""
                in_code_block = False
            else:
                if current:
                    blocks.append(_new_block(current))
                current = line
                in_code_block = True
        elif in_code_block:
            current += "\n" + line
        elif not stripped:
            if current:
                blocks.append(_new_block(current))
                current = ""
        elif current:
            current += "\n" + line
        else:
            current = line

    if current:
        blocks.append(_new_block(current))
    return blocks


def classify(block: Block) -> BlockKind:
    content = block.content
    stripped = content.strip()

    if content.startswith(FENCE):
        return _parse_code_block(content)
    if content.startswith("#"):
        return _parse_heading(content)
    if stripped.startswith(BULLET_MARKERS):
        text = stripped[1:].strip()
        return Bullet(text=text, inline=parse_inline(text))
    if "|" in content and stripped.startswith("|"):
        return TableBlock(rows=_parse_table_rows(content))
    if not stripped:
        return Empty()
    return Paragraph(text=content, inline=parse_inline(content))


def parse_inline(text: str) -> list[InlineText]:
    """Split ``text`` into plain and ``**bold**`` spans, left to right."""
    result: list[InlineText] = []
    pos = 0
    for match in _BOLD_RE.finditer(text):
        if match.start() > pos:
            result.append(InlineText(text[pos : match.start()]))
        result.append(InlineText(match.group(1), bold=True))
        pos = match.end()
    if pos < len(text):
        result.append(InlineText(text[pos:]))
    return result


def _new_block(content: str) -> Block:
    return Block(id=uuid.uuid4().hex, content=content)


def _parse_code_block(content: str) -> CodeBlock:
    lines = content.split("\n")
    language = lines[0].strip()[len(FENCE) :].strip() or None
    if len(lines) == 1:
        return CodeBlock(code=content.replace(FENCE, ""), language=None)
    # unterminated fence: keep the last line, it is code
    end = -1 if lines[-1].strip().startswith(FENCE) else len(lines)
    return CodeBlock(code="\n".join(lines[1:end]), language=language)


def _parse_heading(content: str) -> Heading:
    hashes = len(content) - len(content.lstrip("#"))
    return Heading(level=min(hashes, MAX_HEADING_LEVEL), text=content[hashes:].strip())


def _parse_table_rows(content: str) -> list[list[str]]:
    rows: list[list[str]] = []
    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line or _TABLE_SEPARATOR_RE.fullmatch(line):
            continue
        cells = [cell.strip() for cell in line.split("|")]
        if cells and not cells[0]:
            cells = cells[1:]
        if cells and not cells[-1]:
            cells = cells[:-1]
        rows.append(cells)
    return rows


def _hints_for(kind: BlockKind, line_spacing: float | None) -> RenderHints:
    if isinstance(kind, Heading):
        return RenderHints(line_spacing=line_spacing, font_role=HEADING_FONT_ROLES[kind.level])
    if isinstance(kind, CodeBlock):
        return RenderHints(line_spacing=line_spacing, font_role="code", line_numbers=True)
    if isinstance(kind, TableBlock):
        return RenderHints(line_spacing=line_spacing, emphasize_first_row=True)
    return RenderHints(line_spacing=line_spacing)
