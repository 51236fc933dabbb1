from __future__ import annotations

import logging
from pathlib import Path

DOCX_SUFFIX = ".docx"


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


def resolve_output_path(stem: str, output: str | None, default_dir: Path) -> Path:
    """Where to write the DOCX named after ``stem``.

    An explicit file path is used as given, a directory receives
    ``<stem>.docx``, and without ``output`` the file lands in ``default_dir``.
    """
    if not output:
        return default_dir / f"{stem}{DOCX_SUFFIX}"
    out_path = Path(output).expanduser()
    if out_path.is_dir():
        return out_path / f"{stem}{DOCX_SUFFIX}"
    return out_path


def output_for_file(input_path: Path, output: str | None) -> Path:
    return resolve_output_path(input_path.stem, output, input_path.parent)


def output_for_entry(entry_id: str, output: str | None) -> Path:
    return resolve_output_path(entry_id, output, Path.cwd())


def read_text(path: str | Path, what: str = "Input") -> str:
    """Read a UTF-8 file, naming ``what`` was missing when it does not exist."""
    path = Path(path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(f"{what} file not found: {path}")
    return path.read_text(encoding="utf-8")
