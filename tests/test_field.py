import random

import pytest

from minefield.constants import NUM_COLS, NUM_MINES, NUM_ROWS
from minefield.field import Field


def cells(field):
    return [(r, c) for r in range(field.rows) for c in range(field.cols)]


def mined_cells(field):
    return {cell for cell in cells(field) if field.is_mined(*cell)}


def striped():
    # 3x5 board with 6 mines avoiding (1, 1): the only free cells are columns 3 and 4.
    field = Field(3, 5, 6, random.Random(0))
    field.place_mines(1, 1)
    return field


def test_new_field_is_blank():
    field = Field(rng=random.Random(3))
    assert (field.rows, field.cols, field.mine_count) == (NUM_ROWS, NUM_COLS, NUM_MINES)
    assert not any(
        field.is_mined(*c) or field.is_opened(*c) or field.is_flagged(*c)
        for c in cells(field)
    )


def test_place_mines_places_all_and_avoids_first_click():
    field = Field(rng=random.Random(1))
    field.place_mines(5, 7)
    mines = mined_cells(field)
    assert len(mines) == NUM_MINES
    assert all(not (abs(r - 5) <= 1 and abs(c - 7) <= 1) for r, c in mines)


def test_place_mines_is_reproducible_with_seed():
    a = Field(rng=random.Random(42))
    b = Field(rng=random.Random(42))
    a.place_mines(0, 0)
    b.place_mines(0, 0)
    assert mined_cells(a) == mined_cells(b)


def test_striped_layout_is_forced():
    field = striped()
    assert mined_cells(field) == {(r, c) for r in range(3) for c in (3, 4)}


def test_count_in_striped_layout():
    field = striped()
    assert all(field.count(r, 0) == 0 for r in range(3))
    assert field.count(1, 2) == 3
    assert field.count(0, 2) == field.count(2, 2)


def test_auto_release_opens_every_safe_cell():
    field = striped()
    opened = field.auto_release(1, 1)
    assert opened == 3 * 5 - 6 == field.safe_cells
    for cell in cells(field):
        assert field.is_opened(*cell) != field.is_mined(*cell)


def test_auto_release_stops_at_numbered_cell():
    field = striped()
    assert field.auto_release(1, 2) == 1
    assert [c for c in cells(field) if field.is_opened(*c)] == [(1, 2)]


def test_auto_release_twice_opens_nothing_more():
    field = striped()
    first = field.auto_release(0, 0)
    assert first == field.safe_cells
    assert field.auto_release(0, 0) == 0


def test_auto_release_skips_flagged_cells():
    field = striped()
    field.toggle_flag(0, 0)
    assert field.auto_release(0, 0) == 0
    assert field.auto_release(1, 1) == field.safe_cells - 1
    assert not field.is_opened(0, 0)
    assert field.is_flagged(0, 0)


def test_auto_release_on_mine_opens_it_and_counts_nothing():
    field = striped()
    assert field.auto_release(1, 4) == 0
    assert field.is_opened(1, 4)


def test_auto_release_outside_board_is_ignored():
    field = striped()
    assert field.auto_release(-1, 0) == 0
    assert field.auto_release(0, field.cols) == 0


def test_toggle_flag_round_trip():
    field = Field(rng=random.Random(0))
    field.toggle_flag(2, 3)
    assert field.is_flagged(2, 3)
    field.toggle_flag(2, 3)
    assert not field.is_flagged(2, 3)


def test_open_marks_cell():
    field = Field(rng=random.Random(0))
    field.open(4, 4)
    assert field.is_opened(4, 4)
    assert not field.is_opened(4, 5)


@pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (NUM_ROWS, 0), (0, NUM_COLS)])
def test_queries_outside_board_raise(cell):
    field = Field(rng=random.Random(0))
    with pytest.raises(IndexError):
        field.is_mined(*cell)
    with pytest.raises(IndexError):
        field.toggle_flag(*cell)


def test_too_many_mines_raises():
    field = Field(3, 3, 1, random.Random(0))
    with pytest.raises(ValueError):
        field.place_mines(1, 1)


@pytest.mark.parametrize("args", [(0, 5, 1), (5, 0, 1), (5, 5, -1)])
def test_invalid_board_raises(args):
    with pytest.raises(ValueError):
        Field(*args)