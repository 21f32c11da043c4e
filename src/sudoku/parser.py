"""Puzzle text encoding: convert between grid strings and grid objects.

A grid string holds one significant character per cell in row-major order:
digits `1..N` are filled cells and a space is an empty cell. Every other
character is ignored, so puzzles may be laid out over several lines.
"""

from typing import List, Type, Union

from .errors import GridParseError
from .model import Cell, SudokuGrid, grid_class

Variant = Union[str, Type[SudokuGrid]]


def _resolve(variant: Variant) -> Type[SudokuGrid]:
    if isinstance(variant, str):
        return grid_class(variant)
    return variant


def parse_cells(text: str, size: int) -> List[Cell]:
    digits = {str(d): d for d in range(1, size + 1)}
    cells: List[Cell] = []
    for ch in text:
        if ch == " ":
            cells.append(None)
        elif ch in digits:
            cells.append(digits[ch])
    return cells


def parse_grid(text: str, variant: Variant = "standard") -> SudokuGrid:
    cls = _resolve(variant)
    cells = parse_cells(text, cls.geometry.size)
    if len(cells) != cls.geometry.cell_count:
        raise GridParseError(expected=cls.geometry.cell_count, actual=len(cells))
    return cls.from_cells(cells)


def format_grid(grid: SudokuGrid) -> str:
    return str(grid)


def render_rows(grid: SudokuGrid) -> str:
    """Same characters as `format_grid`, one grid row per line."""
    text = format_grid(grid)
    width = grid.geometry.width
    return "\n".join(text[start:start + width] for start in range(0, len(text), width))
