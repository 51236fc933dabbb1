from __future__ import annotations

import logging
from typing import Callable

from .catalog import CatalogEntry

ClipboardSink = Callable[[str], None]


def log_sink(text: str) -> None:
    logging.info("Copied %d characters", len(text))


def copy_code(entry: CatalogEntry, sink: ClipboardSink = log_sink) -> None:
    """Hand the entry's code sample to ``sink``; nothing is returned."""
    sink(entry.code)
