from __future__ import annotations

from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.shared import Cm, Pt, RGBColor

from .model import HEADING_FONT_ROLES, TokenCategory

FONT_NAME = "Helvetica"
CODE_FONT_NAME = "Menlo"
FONT_SIZE_PT = 12
CODE_FONT_SIZE_PT = 10
DEFAULT_LINE_SPACING_PT = 2
LINE_NUMBER_WIDTH = 3

MARGIN_CM = 2.0

HEADING_SIZES_PT = (26, 22, 18, 16, 14, 13)

FONT_ROLE_SIZES_PT = {HEADING_FONT_ROLES[level]: size for level, size in enumerate(HEADING_SIZES_PT, start=1)}
FONT_ROLE_SIZES_PT.update(body=FONT_SIZE_PT, code=CODE_FONT_SIZE_PT)

TOKEN_COLORS = {
    TokenCategory.KEYWORD: RGBColor(0x80, 0x00, 0x80),
    TokenCategory.TYPE: RGBColor(0x00, 0x00, 0xFF),
    TokenCategory.STRING: RGBColor(0x00, 0x80, 0x00),
    TokenCategory.NUMBER: RGBColor(0xFF, 0xA5, 0x00),
    TokenCategory.COMMENT: RGBColor(0x8E, 0x8E, 0x93),
}

LINE_NUMBER_COLOR = RGBColor(0x8E, 0x8E, 0x93)


def apply_page_layout(doc) -> None:
    section = doc.sections[0]
    section.left_margin = Cm(MARGIN_CM)
    section.right_margin = Cm(MARGIN_CM)
    section.top_margin = Cm(MARGIN_CM)
    section.bottom_margin = Cm(MARGIN_CM)


def set_run_font(run, bold: bool = False, italic: bool = False, code: bool = False, size_pt: int | None = None) -> None:
    run.font.name = CODE_FONT_NAME if code else FONT_NAME
    run.font.size = Pt(size_pt or (CODE_FONT_SIZE_PT if code else FONT_SIZE_PT))
    run.bold = bold
    run.italic = italic


def set_token_style(run, category: TokenCategory) -> None:
    """Colour a code run by token category; keywords bold, comments italic."""
    set_run_font(
        run,
        bold=category is TokenCategory.KEYWORD,
        italic=category is TokenCategory.COMMENT,
        code=True,
    )
    color = TOKEN_COLORS.get(category)
    if color is not None:
        run.font.color.rgb = color


def apply_body_paragraph_format(paragraph, line_spacing: float | None = None) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(line_spacing if line_spacing is not None else DEFAULT_LINE_SPACING_PT)


def apply_heading_format(paragraph, font_role: str) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(4)
    paragraph.paragraph_format.space_after = Pt(4)
    for run in paragraph.runs:
        set_run_font(run, bold=True, size_pt=FONT_ROLE_SIZES_PT.get(font_role, FONT_SIZE_PT))


def apply_code_line_format(paragraph) -> None:
    paragraph.alignment = WD_ALIGN_PARAGRAPH.LEFT
    paragraph.paragraph_format.space_before = Pt(0)
    paragraph.paragraph_format.space_after = Pt(0)
    paragraph.paragraph_format.left_indent = Cm(0.5)
