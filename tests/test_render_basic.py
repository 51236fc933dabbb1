from pathlib import Path

from docx import Document as DocxReader

from PatternAtlas import catalog, styles
from PatternAtlas.highlighter import Highlighter
from PatternAtlas.markdown_parser import parse_markdown
from PatternAtlas.model import CodeBlock, Document, Heading, RenderedBlock, RenderHints, TableBlock, TokenCategory
from PatternAtlas.renderer_docx import render_document, render_entry

SAMPLE = """# Stack

A **LIFO** structure.

- push and pop at the top

```swift
let count: Int = 3 // items
```

| Op | Cost |
|----|------|
| push | O(1) |
| pop |
"""


def test_render_creates_docx(tmp_path: Path):
    output_file = tmp_path / "nested" / "stack.docx"
    render_document(parse_markdown(SAMPLE), output_file)
    assert output_file.exists()
    assert output_file.stat().st_size > 0


def test_rendered_text_and_bold_runs(tmp_path: Path):
    out = tmp_path / "stack.docx"
    render_document(parse_markdown(SAMPLE), out)
    reader = DocxReader(out)
    texts = [p.text for p in reader.paragraphs]
    assert [t for t in texts if t][0] == "Stack"
    assert "A LIFO structure." in texts
    assert "•  push and pop at the top" in texts
    assert "SWIFT" in texts
    assert "  1  let count: Int = 3 // items" in texts

    paragraph = next(p for p in reader.paragraphs if p.text == "A LIFO structure.")
    assert [run.text for run in paragraph.runs if run.bold] == ["LIFO"]


def test_code_tokens_are_coloured(tmp_path: Path):
    out = tmp_path / "code.docx"
    render_document(parse_markdown(SAMPLE), out)
    reader = DocxReader(out)
    code_line = next(p for p in reader.paragraphs if "let count" in p.text)
    colours = {run.text: run.font.color.rgb for run in code_line.runs}
    assert colours["let"] == styles.TOKEN_COLORS[TokenCategory.KEYWORD]
    assert colours["Int"] == styles.TOKEN_COLORS[TokenCategory.TYPE]
    assert colours["3"] == styles.TOKEN_COLORS[TokenCategory.NUMBER]
    assert colours["// items"] == styles.TOKEN_COLORS[TokenCategory.COMMENT]


def test_table_rows_with_uneven_cells(tmp_path: Path):
    out = tmp_path / "table.docx"
    render_document(parse_markdown(SAMPLE), out)
    table = DocxReader(out).tables[0]
    assert len(table.rows) == 3
    assert [cell.text for cell in table.rows[0].cells] == ["Op", "Cost"]
    assert [cell.text for cell in table.rows[2].cells] == ["pop", ""]
    assert table.rows[0].cells[0].paragraphs[0].runs[0].bold
    assert not table.rows[1].cells[0].paragraphs[0].runs[0].bold


def test_custom_highlighter_and_hints(tmp_path: Path):
    doc = Document(
        blocks=[
            RenderedBlock(Heading(level=9, text="Deep"), RenderHints(font_role="subheadline")),
            RenderedBlock(CodeBlock(code="def f(): pass"), RenderHints(line_numbers=False)),
            RenderedBlock(TableBlock(rows=[])),
        ]
    )
    out = tmp_path / "custom.docx"
    render_document(doc, out, highlighter=Highlighter(keywords=["def", "pass"], types=[]))
    reader = DocxReader(out)
    code_line = next(p for p in reader.paragraphs if "def f" in p.text)
    assert code_line.text == "def f(): pass"
    assert code_line.runs[0].text == "def"
    assert code_line.runs[0].bold
    assert not reader.tables


def test_render_entry(tmp_path: Path):
    entry = catalog.default_catalog().get("array")
    out = tmp_path / "array.docx"
    render_entry(entry, out)
    reader = DocxReader(out)
    texts = [p.text for p in reader.paragraphs]
    assert [t for t in texts if t][0] == "Array"
    assert len(reader.tables) == 1
