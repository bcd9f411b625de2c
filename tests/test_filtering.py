import pytest

from icon_browser.catalog import CatalogIndex, IconRecord
from icon_browser.filtering import QueryState, matches, suggest_names, visible_count, visible_items


def test_empty_query_matches_everything(small_catalog):
    q = QueryState()
    assert all(matches(item, q) for item in small_catalog.items)
    assert visible_count(small_catalog, q) == len(small_catalog)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("hom", True),  # name prefix
        ("house", True),  # exact tag
        ("e88a", True),  # suffix of 0000e88a
        ("0000e88a", True),
        ("59530", True),  # decimal codepoint
        ("+59530", True),
        ("xyz", False),
        ("ome", False),  # not a prefix
        ("Hom", False),  # case-sensitive
        ("hous", False),  # tags are exact-match only
        ("E88A", False),  # hex form is lowercase
        ("59531", False),
        (" 59530", False),
        ("-59530", False),
    ],
)
def test_search_fixture(home, text, expected):
    assert matches(home, QueryState(search_text=text)) is expected


def test_category_filter_is_exact(home):
    assert matches(home, QueryState(selected_category="action"))
    assert not matches(home, QueryState(selected_category="Action"))
    assert not matches(home, QueryState(selected_category="act"))


def test_search_ignores_selected_category(home):
    assert matches(home, QueryState(selected_category="navigation", search_text="hom"))
    assert not matches(home, QueryState(selected_category="action", search_text="xyz"))


def test_decimal_out_of_range_never_matches():
    big = IconRecord(name="big", codepoint=0xFFFFFFFF)
    assert matches(big, QueryState(search_text="4294967295"))
    assert not matches(IconRecord(name="zero", codepoint=0), QueryState(search_text="4294967296"))


def test_visible_items_preserve_catalog_order(small_catalog):
    q = QueryState(selected_category="navigation")
    assert [i.name for i in visible_items(small_catalog, q)] == ["close", "menu"]


def test_visible_items_is_restartable(small_catalog):
    seq = visible_items(small_catalog, QueryState(selected_category="action"))
    first = [i.name for i in seq]
    second = [i.name for i in seq]
    assert first == second == ["home", "search"]
    assert seq.count() == 2


def test_visible_count_matches_sequence(small_catalog):
    q = QueryState(search_text="e")  # no names start with "e"; hex suffix matches codepoints ending in e
    assert visible_count(small_catalog, q) == len(list(visible_items(small_catalog, q)))


def test_empty_catalog_yields_nothing():
    cat = CatalogIndex.empty()
    assert list(visible_items(cat, QueryState())) == []
    assert visible_count(cat, QueryState(search_text="home")) == 0


def test_suggest_names_ranks_closest_first(small_catalog):
    hits = suggest_names(small_catalog, "hme")
    assert hits
    assert hits[0] == "home"


def test_suggest_names_respects_limit(small_catalog):
    assert len(suggest_names(small_catalog, "e", limit=2)) <= 2


def test_suggest_names_empty_inputs(small_catalog):
    assert suggest_names(small_catalog, "") == []
    assert suggest_names(small_catalog, "   ") == []
    assert suggest_names(CatalogIndex.empty(), "home") == []
