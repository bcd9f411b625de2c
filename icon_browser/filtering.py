from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from rapidfuzz import fuzz, process, utils

from .catalog import CatalogIndex, IconRecord


SUGGEST_SCORE_CUTOFF = 60.0


@dataclass(frozen=True)
class QueryState:
    selected_category: str | None = None
    search_text: str = ""


def matches(item: IconRecord, query: QueryState) -> bool:
    text = query.search_text
    if not text:
        # Category filter only applies while not searching.
        if query.selected_category is None:
            return True
        return item.contains_category(query.selected_category)

    return (
        item.name.startswith(text)
        or item.contains_tag(text)
        or item.matches_hex_codepoint(text)
        or item.matches_codepoint(text)
    )


class VisibleItems:
    """
    Lazy, restartable view over the items matching a query, in catalog order.
    """

    def __init__(self, catalog: CatalogIndex, query: QueryState):
        self._catalog = catalog
        self._query = query

    def __iter__(self) -> Iterator[IconRecord]:
        q = self._query
        return (item for item in self._catalog.items if matches(item, q))

    def count(self) -> int:
        return sum(1 for _ in self)


def visible_items(catalog: CatalogIndex, query: QueryState) -> VisibleItems:
    return VisibleItems(catalog, query)


def visible_count(catalog: CatalogIndex, query: QueryState) -> int:
    return visible_items(catalog, query).count()


def suggest_names(catalog: CatalogIndex, text: str, limit: int = 5) -> list[str]:
    """
    Fuzzy "did you mean" names for a search that matched nothing.

    Uses RapidFuzz WRatio over the unique icon names, best-first.
    """
    q = (text or "").strip()
    if not q or not catalog.items or limit <= 0:
        return []
    names = list(dict.fromkeys(item.name for item in catalog.items))
    found = process.extract(
        q,
        names,
        scorer=fuzz.WRatio,
        processor=utils.default_process,
        limit=limit,
        score_cutoff=SUGGEST_SCORE_CUTOFF,
    )
    return [name for name, _score, _idx in found]
