import pytest

from icon_browser.layout import PLACEHOLDER, arrange_rows, items_per_row


@pytest.mark.parametrize(
    "width,expected",
    [
        (5000, 8),
        (1300, 8),
        (1299, 7),
        (1200, 7),
        (1199, 6),
        (1100, 6),
        (1099, 5),
        (1000, 5),
        (999, 4),
        (900, 4),
        (899, 3),
        (0, 3),
        (-10, 3),
    ],
)
def test_items_per_row_without_detail_panel(width, expected):
    assert items_per_row(width, False) == expected


@pytest.mark.parametrize(
    "width,expected",
    [
        (1300, 4),
        (1200, 3),  # 7 // 2
        (1000, 2),  # 5 // 2
        (950, 2),  # 4 // 2, no clamp needed
        (500, 2),  # 3 // 2 == 1, clamped up
    ],
)
def test_items_per_row_with_detail_panel(width, expected):
    assert items_per_row(width, True) == expected


def test_arrange_rows_pads_last_row():
    rows = arrange_rows(range(7), 3)
    assert rows == [(0, 1, 2), (3, 4, 5), (6, PLACEHOLDER, PLACEHOLDER)]


def test_arrange_rows_exact_multiple_has_no_padding_row():
    rows = arrange_rows("abcdef", 3)
    assert rows == [("a", "b", "c"), ("d", "e", "f")]


def test_arrange_rows_zero_items_gives_one_placeholder_row():
    assert arrange_rows([], 4) == [(PLACEHOLDER,) * 4]


@pytest.mark.parametrize("count", [0, 1, 2, 5, 8, 9, 17, 64])
@pytest.mark.parametrize("per_row", [1, 2, 3, 8])
def test_every_row_has_uniform_width(count, per_row):
    rows = arrange_rows(list(range(count)), per_row)
    assert all(len(r) == per_row for r in rows)
    flat = [x for r in rows for x in r]
    assert [x for x in flat if x is not PLACEHOLDER] == list(range(count))
    assert len(flat) - count < per_row or count == 0


def test_arrange_rows_accepts_lazy_iterables():
    rows = arrange_rows((n * n for n in range(3)), 2)
    assert rows == [(0, 1), (4, PLACEHOLDER)]


def test_arrange_rows_rejects_non_positive_width():
    with pytest.raises(ValueError):
        arrange_rows([1, 2], 0)
