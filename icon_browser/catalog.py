from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from .debug import debug_log


MAX_CODEPOINT = 0xFFFF_FFFF
_DECIMAL_RE = re.compile(r"\+?[0-9]+", re.ASCII)


def codepoint_to_char(cp: int) -> str:
    """
    Glyph for a codepoint.

    Raises ValueError for surrogates and values past U+10FFFF; those load fine
    but can't be rendered.
    """
    if cp < 0 or cp > 0x10FFFF or 0xD800 <= cp <= 0xDFFF:
        raise ValueError(f"codepoint {cp:#x} is not a Unicode scalar value")
    return chr(cp)


class LoadError(Exception):
    """Base class for catalog load failures."""


class ParseFailure(LoadError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class IconRecord:
    name: str
    codepoint: int
    categories: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    popularity: int | None = None

    def to_char(self) -> str:
        return codepoint_to_char(self.codepoint)

    def hex_codepoint(self) -> str:
        return f"{self.codepoint:04x}"

    def contains_category(self, category: str) -> bool:
        return category in self.categories

    def contains_tag(self, tag: str) -> bool:
        return tag in self.tags

    def matches_hex_codepoint(self, text: str) -> bool:
        return f"{self.codepoint:08x}".endswith(text)

    def matches_codepoint(self, text: str) -> bool:
        if not _DECIMAL_RE.fullmatch(text or ""):
            return False
        value = int(text)
        return value <= MAX_CODEPOINT and value == self.codepoint


@dataclass(frozen=True)
class CatalogIndex:
    items: tuple[IconRecord, ...] = ()
    categories: tuple[str, ...] = ()
    category_representative: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @staticmethod
    def empty() -> "CatalogIndex":
        return CatalogIndex()

    def __len__(self) -> int:
        return len(self.items)

    def lookup(self, codepoint: int) -> IconRecord | None:
        for item in self.items:
            if item.codepoint == codepoint:
                return item
        return None

    def representative(self, category: str) -> int | None:
        return self.category_representative.get(category)


def _require(entry: dict[str, Any], idx: int, key: str) -> Any:
    if key not in entry:
        raise ParseFailure(f"icons[{idx}]: missing field {key!r}")
    return entry[key]


def _is_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def _str_list(entry: dict[str, Any], idx: int, key: str) -> tuple[str, ...]:
    v = _require(entry, idx, key)
    if not isinstance(v, list) or any(not isinstance(x, str) for x in v):
        raise ParseFailure(f"icons[{idx}].{key}: expected a list of strings")
    return tuple(v)


def parse_record(entry: Any, idx: int) -> IconRecord:
    if not isinstance(entry, dict):
        raise ParseFailure(f"icons[{idx}]: expected an object, got {type(entry).__name__}")

    name = _require(entry, idx, "name")
    if not isinstance(name, str) or not name:
        raise ParseFailure(f"icons[{idx}].name: expected a non-empty string")

    cp = _require(entry, idx, "codepoint")
    if not _is_int(cp) or cp < 0 or cp > MAX_CODEPOINT:
        raise ParseFailure(f"icons[{idx}].codepoint: expected an unsigned 32-bit integer, got {cp!r}")

    categories = _str_list(entry, idx, "categories")
    tags = _str_list(entry, idx, "tags")

    popularity = entry.get("popularity")
    if popularity is not None and (not _is_int(popularity) or popularity < 0):
        raise ParseFailure(f"icons[{idx}].popularity: expected an unsigned integer, got {popularity!r}")

    return IconRecord(name=name, codepoint=cp, categories=categories, tags=tags, popularity=popularity)


def build_categories(items: tuple[IconRecord, ...]) -> tuple[str, ...]:
    return tuple(sorted({c for item in items for c in item.categories}))


def build_representatives(items: tuple[IconRecord, ...], categories: tuple[str, ...]) -> dict[str, int]:
    """
    Most popular codepoint per category.

    Ties go to the later item in source order. Records without popularity are
    skipped, so a catalog without the field has no representatives at all.
    """
    best: dict[str, IconRecord] = {}
    for item in items:
        if item.popularity is None:
            continue
        for cat in item.categories:
            cur = best.get(cat)
            if cur is None or item.popularity >= (cur.popularity or 0):
                best[cat] = item
    return {cat: best[cat].codepoint for cat in categories if cat in best}


def load(data: bytes | str) -> CatalogIndex:
    """
    Parse catalog JSON (`{"icons": [...]}`) into an indexed catalog.

    Raises ParseFailure on invalid JSON or a missing/malformed required field.
    """
    try:
        doc = json.loads(data)
    except (ValueError, TypeError) as exc:
        debug_log(f"catalog parse failed: {exc}")
        raise ParseFailure(f"invalid JSON: {exc}") from exc
    except RecursionError as exc:
        debug_log("catalog parse failed: nesting too deep")
        raise ParseFailure("invalid JSON: nesting too deep") from exc

    try:
        if not isinstance(doc, dict):
            raise ParseFailure("top-level value must be an object")
        icons = doc.get("icons")
        if not isinstance(icons, list):
            raise ParseFailure("missing or malformed 'icons' array")
        items = tuple(parse_record(entry, i) for i, entry in enumerate(icons))
    except ParseFailure as exc:
        debug_log(f"catalog parse failed: {exc.message}")
        raise

    categories = build_categories(items)
    reps = build_representatives(items, categories)
    debug_log(f"catalog loaded: items={len(items)} categories={len(categories)} representatives={len(reps)}")
    return CatalogIndex(
        items=items,
        categories=categories,
        category_representative=MappingProxyType(reps),
    )
