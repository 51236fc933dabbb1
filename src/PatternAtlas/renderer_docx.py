from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from docx import Document as DocxDocument
from docx.enum.table import WD_TABLE_ALIGNMENT
from docx.shared import Pt

from . import styles
from .catalog import CatalogEntry, entry_markdown
from .highlighter import Highlighter, highlight_line
from .markdown_parser import parse_markdown
from .model import (
    Bullet,
    CodeBlock,
    Document,
    Heading,
    InlineText,
    Paragraph,
    RenderedBlock,
    TableBlock,
)


@dataclass
class RenderState:
    highlighter: Highlighter | None = None


def render_document(doc: Document, output_path: str | Path, highlighter: Highlighter | None = None) -> None:
    output_path = Path(output_path)
    state = RenderState(highlighter=highlighter)
    docx = DocxDocument()
    styles.apply_page_layout(docx)

    for block in doc.blocks:
        _dispatch_block(docx, block, state)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    docx.save(output_path)


def render_entry(entry: CatalogEntry, output_path: str | Path) -> None:
    doc = parse_markdown(entry_markdown(entry))
    doc.metadata = {"entry": entry.id, "kind": entry.kind}
    render_document(doc, output_path)


def _dispatch_block(docx: DocxDocument, block: RenderedBlock, state: RenderState) -> None:
    kind = block.kind
    if isinstance(kind, Heading):
        _render_heading(docx, kind, block.hints.font_role)
    elif isinstance(kind, Paragraph):
        _render_paragraph(docx, kind.inline, block.hints.line_spacing)
    elif isinstance(kind, Bullet):
        _render_bullet(docx, kind, block.hints.line_spacing)
    elif isinstance(kind, CodeBlock):
        _render_code_block(docx, kind, block.hints.line_numbers, state)
    elif isinstance(kind, TableBlock):
        _render_table_block(docx, kind, block.hints.emphasize_first_row)


def _render_heading(docx: DocxDocument, heading: Heading, font_role: str) -> None:
    paragraph = docx.add_paragraph(heading.text)
    styles.apply_heading_format(paragraph, font_role)


def _render_paragraph(docx: DocxDocument, inline_elements: Iterable[InlineText], line_spacing: float | None) -> None:
    paragraph = docx.add_paragraph()
    _add_inline_runs(paragraph, inline_elements)
    styles.apply_body_paragraph_format(paragraph, line_spacing)


def _render_bullet(docx: DocxDocument, bullet: Bullet, line_spacing: float | None) -> None:
    paragraph = docx.add_paragraph()
    marker = paragraph.add_run("•  ")
    styles.set_run_font(marker, bold=True)
    _add_inline_runs(paragraph, bullet.inline)
    styles.apply_body_paragraph_format(paragraph, line_spacing)


def _add_inline_runs(paragraph, inline_elements: Iterable[InlineText]) -> None:
    for inline in inline_elements:
        run = paragraph.add_run(inline.text)
        styles.set_run_font(run, bold=inline.bold)


def _render_code_block(docx: DocxDocument, block: CodeBlock, line_numbers: bool, state: RenderState) -> None:
    if block.language:
        label = docx.add_paragraph()
        run = label.add_run(block.language.upper())
        styles.set_run_font(run, bold=True, size_pt=styles.CODE_FONT_SIZE_PT)
        run.font.color.rgb = styles.LINE_NUMBER_COLOR
        styles.apply_code_line_format(label)

    highlight = state.highlighter.highlight if state.highlighter else highlight_line
    for idx, line in enumerate(block.lines, start=1):
        paragraph = docx.add_paragraph()
        if line_numbers:
            number = paragraph.add_run(f"{idx:>{styles.LINE_NUMBER_WIDTH}}  ")
            styles.set_run_font(number, code=True)
            number.font.color.rgb = styles.LINE_NUMBER_COLOR
        for token in highlight(line).tokens:
            run = paragraph.add_run(token.text)
            styles.set_token_style(run, token.category)
        styles.apply_code_line_format(paragraph)

    spacer = docx.add_paragraph("")
    spacer.paragraph_format.space_after = Pt(styles.DEFAULT_LINE_SPACING_PT)


def _render_table_block(docx: DocxDocument, block: TableBlock, emphasize_first_row: bool) -> None:
    if not block.rows:
        return
    col_count = max(len(row) for row in block.rows) or 1
    table = docx.add_table(rows=len(block.rows), cols=col_count)
    table.style = "Table Grid"
    table.alignment = WD_TABLE_ALIGNMENT.LEFT
    for r_idx, row in enumerate(block.rows):
        for c_idx, cell_text in enumerate(row):
            paragraph = table.cell(r_idx, c_idx).paragraphs[0]
            run = paragraph.add_run(cell_text)
            styles.set_run_font(run, bold=emphasize_first_row and r_idx == 0)

    spacer = docx.add_paragraph("")
    styles.apply_body_paragraph_format(spacer)
