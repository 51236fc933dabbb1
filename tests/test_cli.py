import logging
from pathlib import Path

import pytest

from PatternAtlas import cli


def test_cli_renders_markdown_file(tmp_path: Path):
    source = tmp_path / "notes.md"
    source.write_text("# Queue\n\n```\nqueue.append(1)\n```\n", encoding="utf-8")
    cli.main([str(source)])
    assert (tmp_path / "notes.docx").exists()


def test_cli_output_directory(tmp_path: Path):
    source = tmp_path / "notes.md"
    source.write_text("plain text\n", encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    cli.main([str(source), "-o", str(out_dir)])
    assert (out_dir / "notes.docx").exists()


def test_cli_missing_input(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        cli.main([str(tmp_path / "missing.md")])


def test_cli_requires_some_input():
    with pytest.raises(SystemExit):
        cli.main([])


def test_cli_renders_catalog_entry(tmp_path: Path):
    out = tmp_path / "stack.docx"
    cli.main(["--entry", "stack", "-o", str(out)])
    assert out.exists()


def test_cli_lists_custom_catalog(tmp_path: Path, caplog):
    catalog_file = tmp_path / "catalog.yaml"
    catalog_file.write_text(
        "entries:\n"
        "  - {id: visitor, title: Visitor, kind: pattern, category: Behavioral, description: D}\n",
        encoding="utf-8",
    )
    with caplog.at_level(logging.INFO):
        cli.main(["--list", "--catalog", str(catalog_file)])
    assert "Behavioral: visitor" in caplog.text


def test_cli_unknown_entry():
    with pytest.raises(KeyError):
        cli.main(["--entry", "does_not_exist"])


def test_cli_entry_defaults_to_working_directory(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    cli.main(["--entry", "stack"])
    assert (tmp_path / "stack.docx").exists()


def test_cli_missing_catalog(tmp_path: Path):
    with pytest.raises(FileNotFoundError, match="Catalog file not found"):
        cli.main(["--list", "--catalog", str(tmp_path / "nope.yaml")])
