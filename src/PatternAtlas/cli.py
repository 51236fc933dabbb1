from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import catalog, markdown_parser, renderer_docx
from .utils import configure_logging, output_for_entry, output_for_file, read_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="PatternAtlas",
        description="Render design-pattern and data-structure notes to DOCX.",
    )
    parser.add_argument("input", type=str, nargs="?", help="Path to a markdown-like text file")
    parser.add_argument("-o", "--output", type=str, help="Output DOCX path")
    parser.add_argument("--entry", type=str, help="Render a catalog entry by id")
    parser.add_argument("--list", action="store_true", help="List catalog entries by category")
    parser.add_argument("--catalog", type=str, help="Path to a catalog YAML file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose)

    if args.list or args.entry:
        entries = _load_catalog(args.catalog)
        if args.list:
            for category, items in entries.by_category().items():
                logging.info("%s: %s", category, ", ".join(item.id for item in items))
        if args.entry:
            entry = entries.get(args.entry)
            output_path = output_for_entry(entry.id, args.output)
            logging.info("Rendering entry %s to %s", entry.id, output_path)
            renderer_docx.render_entry(entry, output_path)
            logging.info("Done. Saved to %s", output_path)
        return

    if not args.input:
        parser.error("an input file, --entry or --list is required")

    input_path = Path(args.input).expanduser()
    output_path = output_for_file(input_path, args.output)

    logging.info("Reading %s", input_path)
    text = read_text(input_path)
    logging.debug("Text length: %d chars", len(text))

    logging.info("Parsing blocks...")
    document = markdown_parser.parse_markdown(text)
    logging.debug("Parsed %d blocks", len(document.blocks))

    logging.info("Rendering DOCX to %s", output_path)
    renderer_docx.render_document(document, output_path=output_path)

    logging.info("Done. Saved to %s", output_path)


def _load_catalog(path: str | None) -> catalog.Catalog:
    if path:
        logging.info("Loading catalog %s", path)
        return catalog.load_catalog_file(path)
    return catalog.default_catalog()


if __name__ == "__main__":
    main()
