"""Unit tests for the grid contract and its derived predicates."""

import pytest

from src.sudoku.errors import CellValueError
from src.sudoku.model import (
    HyperSudoku,
    MiniSudoku,
    StandardSudoku,
    grid_class,
    is_filled,
    is_legal,
    is_solved,
)
from src.sudoku.parser import parse_grid

SOLVED = "827154396965327148341689752593468271472513689618972435786235914154796823239841567"
HYPER_SAMPLE = "       1   2    34    51        65   7 3   8   3          8    58    9  69       "
MINI_SAMPLE = "  5 642645 1  3 4  561 3 4 3 66    2"


def _with(text, index, char):
    return text[:index] + char + text[index + 1:]


def test_new_grid_is_empty():
    grid = StandardSudoku()
    assert grid.cell_count == 81
    assert grid.cells == (None,) * 81
    assert not grid.filled()
    assert grid.legal()
    assert not grid.solved()
    assert len(MiniSudoku.empty().cells) == 36


def test_set_and_get_roundtrip():
    grid = StandardSudoku()
    grid.set(10, 5)
    assert grid.get(10) == 5
    grid.clear(10)
    assert grid.get(10) is None


@pytest.mark.parametrize("value", [0, 10, -3, "5", 2.0, True])
def test_set_rejects_values_outside_range(value):
    grid = StandardSudoku()
    with pytest.raises(CellValueError):
        grid.set(0, value)
    assert grid.get(0) is None


def test_mini_rejects_seven_at_set_time():
    grid = MiniSudoku()
    for col, value in enumerate([1, 2, 3, 4, 5]):
        grid.set(col, value)
    with pytest.raises(CellValueError) as excinfo:
        grid.set(5, 7)
    assert excinfo.value.value == 7
    assert excinfo.value.index == 5
    assert grid.get(5) is None


@pytest.mark.parametrize("index", [-1, 81])
def test_out_of_bounds_access_never_wraps(index):
    grid = StandardSudoku()
    with pytest.raises(IndexError):
        grid.get(index)
    with pytest.raises(IndexError):
        grid.set(index, 1)


def test_constructor_validates_cells():
    with pytest.raises(ValueError):
        StandardSudoku([None] * 80)
    with pytest.raises(CellValueError):
        MiniSudoku([9] + [None] * 35)


def test_validation_predicates():
    grid = parse_grid(SOLVED)
    assert grid.filled()
    assert grid.legal()
    assert grid.solved()

    grid = parse_grid(_with(SOLVED, 0, "2"))
    assert grid.filled()
    assert not grid.legal()
    assert not grid.solved()

    grid = parse_grid(_with(SOLVED, 0, " "))
    assert not grid.filled()
    assert grid.legal()
    assert not grid.solved()


def test_duplicate_in_row_is_illegal():
    grid = StandardSudoku()
    grid.set(0, 4)
    grid.set(8, 4)
    assert not grid.legal()


def test_solved_implies_filled_and_legal():
    samples = [
        parse_grid(SOLVED),
        parse_grid(_with(SOLVED, 40, "1")),
        parse_grid(_with(SOLVED, 80, " ")),
        StandardSudoku(),
        parse_grid(MINI_SAMPLE, "mini"),
        parse_grid(HYPER_SAMPLE, "hyper"),
    ]
    for grid in samples:
        if grid.solved():
            assert grid.filled() and grid.legal()


def test_free_predicates_match_methods():
    grid = parse_grid(_with(SOLVED, 3, " "))
    assert grid.empty_positions() == [3]
    assert is_filled(grid) == grid.filled()
    assert is_legal(grid) == grid.legal()
    assert is_solved(grid) == grid.solved()


def test_standard_group_views():
    text = "123456789" + "".join(f"{d}        " for d in range(2, 9)) + "987654321"
    grid = parse_grid(text)

    assert grid.rows()[0] == list(range(1, 10))
    assert grid.rows()[8] == list(range(9, 0, -1))
    assert grid.columns()[0] == list(range(1, 10))
    assert grid.boxes()[0] == [1, 2, 3, 2, None, None, 3, None, None]
    assert grid.boxes()[8] == [None] * 6 + [3, 2, 1]
    assert grid.extra_regions() == []


def test_mini_group_views():
    grid = parse_grid(MINI_SAMPLE, "mini")

    assert grid.rows()[0] == [None, None, 5, None, 6, 4]
    assert grid.rows()[5] == [6, None, None, None, None, 2]
    assert grid.columns()[0] == [None, 2, None, None, None, 6]
    assert grid.columns()[5] == [4, 1, None, 3, 6, 2]
    assert grid.boxes()[0] == [None, None, 5, 2, 6, 4]
    assert grid.boxes()[1] == [None, 6, 4, 5, None, 1]
    assert grid.boxes()[2] == [None, None, 3, None, 5, 6]
    assert grid.boxes()[5] == [3, None, 6, None, None, 2]

    groups = grid.groups_of(15)
    assert groups == [grid.rows()[2], grid.columns()[3], grid.boxes()[3]]


def test_hyper_group_views():
    grid = parse_grid(HYPER_SAMPLE, "hyper")

    assert grid.boxes()[0] == [None, None, None, None, None, 2, None, None, None]
    assert grid.boxes()[1] == [None] * 7 + [5, 1]
    extras = grid.extra_regions()
    assert extras[0] == [None, 2, None, None, None, None, None, None, None]
    assert extras[1] == [None, None, 3, 1, None, None, 6, 5, None]
    assert extras[2] == [None, 3, None, None, None, None, 8, None, None]
    assert extras[3] == [None] * 7 + [9, None]
    assert grid.all_groups()[27:] == extras
    assert len(grid.groups_of(12)) == 4
    assert len(grid.groups_of(40)) == 3


def test_extra_region_duplicate_is_illegal_only_for_hyper():
    # Cells (1, 1) and (3, 3) share only the first extra region.
    text = _with(_with(" " * 81, 10, "5"), 30, "5")
    assert parse_grid(text, "standard").legal()
    assert not parse_grid(text, "hyper").legal()


def test_copy_is_independent():
    grid = parse_grid(SOLVED)
    clone = grid.copy()
    assert clone == grid
    clone.set(0, None)
    assert grid.get(0) == 8
    assert clone != grid


def test_variants_with_same_cells_are_not_equal():
    assert StandardSudoku() != HyperSudoku()


def test_grid_class_lookup():
    assert grid_class("standard") is StandardSudoku
    assert grid_class(" Mini ") is MiniSudoku
    assert grid_class("HYPER") is HyperSudoku
    with pytest.raises(ValueError):
        grid_class("killer")
