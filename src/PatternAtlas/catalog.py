from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List

import yaml

from .utils import read_text

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "data" / "catalog.yaml"
ENTRY_KINDS = {"pattern", "data_structure"}
REQUIRED_FIELDS = ("id", "title", "kind", "category", "description")


@dataclass(frozen=True)
class CatalogEntry:
    id: str
    title: str
    kind: str
    category: str
    description: str
    code: str = ""
    usage: str = ""
    time_complexity: str = ""
    space_complexity: str = ""


class Catalog:
    """Read-only lookup over catalog entries, in file order."""

    def __init__(self, entries: Iterable[CatalogEntry]):
        self.entries: List[CatalogEntry] = list(entries)
        self._by_id: dict[str, CatalogEntry] = {}
        for entry in self.entries:
            if entry.id in self._by_id:
                raise ValueError(f"Duplicate catalog entry id: {entry.id}")
            self._by_id[entry.id] = entry

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def get(self, entry_id: str) -> CatalogEntry:
        try:
            return self._by_id[entry_id]
        except KeyError:
            raise KeyError(f"Unknown catalog entry: {entry_id}") from None

    def by_category(self, kind: str | None = None) -> dict[str, list[CatalogEntry]]:
        grouped: dict[str, list[CatalogEntry]] = {}
        for entry in self.entries:
            if kind is not None and entry.kind != kind:
                continue
            grouped.setdefault(entry.category, []).append(entry)
        return grouped

    def search(self, term: str) -> list[CatalogEntry]:
        needle = term.strip().lower()
        if not needle:
            return list(self.entries)
        return [
            entry
            for entry in self.entries
            if needle in entry.title.lower() or needle in entry.description.lower() or needle == entry.id
        ]


def load_catalog(text: str) -> Catalog:
    """Parse catalog YAML: a mapping with an ``entries`` list of records."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError("Catalog YAML root must be a mapping with an 'entries' list.")
    records = data.get("entries") or []
    if not isinstance(records, list):
        raise ValueError("Catalog 'entries' must be a list.")
    catalog = Catalog(_build_entry(record, idx) for idx, record in enumerate(records))
    logger.debug("Loaded %d catalog entries", len(catalog))
    return catalog


def load_catalog_file(path: str | Path) -> Catalog:
    return load_catalog(read_text(path, what="Catalog"))


def default_catalog() -> Catalog:
    return load_catalog_file(DEFAULT_CATALOG_PATH)


def parse_complexity(text: str) -> list[tuple[str, str]]:
    """Split ``"Access: O(1), Search: O(n)"`` into (operation, bound) pairs.

    Commas inside parentheses, as in ``O(V, E)``, do not split.
    """
    pairs: list[tuple[str, str]] = []
    for part in _split_top_level(text):
        part = part.strip()
        if not part:
            continue
        if ":" in part:
            name, bound = part.split(":", 1)
            pairs.append((name.strip(), bound.strip()))
        else:
            pairs.append(("", part))
    return pairs


def entry_markdown(entry: CatalogEntry) -> str:
    """Compose the detail page for ``entry`` as markdown-like text."""
    sections = [f"# {entry.title}", f"**{entry.category}**", entry.description.strip()]

    complexity_rows = []
    for label, value in (("Time", entry.time_complexity), ("Space", entry.space_complexity)):
        for operation, bound in parse_complexity(value):
            complexity_rows.append(f"| {label} | {operation or '-'} | {bound} |")
    if complexity_rows:
        sections.append("## Complexity")
        sections.append("\n".join(["| Kind | Operation | Bound |", "|---|---|---|", *complexity_rows]))

    if entry.code.strip():
        sections.append("## Code example")
        sections.append("```swift\n" + entry.code.rstrip("\n") + "\n```")

    if entry.usage.strip():
        sections.append("## Usage")
        sections.append(entry.usage.strip())

    return "\n\n".join(sections) + "\n"


def _build_entry(record, idx: int) -> CatalogEntry:
    if not isinstance(record, dict):
        raise ValueError(f"Catalog entry #{idx} must be a mapping.")
    missing = [name for name in REQUIRED_FIELDS if not record.get(name)]
    if missing:
        raise ValueError(f"Catalog entry #{idx} is missing fields: {', '.join(missing)}")
    kind = str(record["kind"])
    if kind not in ENTRY_KINDS:
        raise ValueError(f"Catalog entry {record['id']!r} has unknown kind {kind!r}.")
    return CatalogEntry(
        id=str(record["id"]),
        title=str(record["title"]),
        kind=kind,
        category=str(record["category"]),
        description=str(record["description"]),
        code=str(record.get("code") or ""),
        usage=str(record.get("usage") or ""),
        time_complexity=str(record.get("time_complexity") or ""),
        space_complexity=str(record.get("space_complexity") or ""),
    )


def _split_top_level(text: str) -> list[str]:
    parts: list[str] = []
    depth = 0
    current = ""
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth = max(0, depth - 1)
        if char == "," and depth == 0:
            parts.append(current)
            current = ""
        else:
            current += char
    parts.append(current)
    return parts
