"""Grid geometry, constraint grids, text encoding, and the backtracking solver."""

from .errors import CellValueError, GridParseError
from .geometry import HYPER, MINI, STANDARD, Geometry
from .model import (
    VARIANTS,
    Cell,
    ConstraintGrid,
    HyperSudoku,
    MiniSudoku,
    StandardSudoku,
    SudokuGrid,
    grid_class,
    is_filled,
    is_legal,
    is_solved,
)
from .parser import format_grid, parse_grid, render_rows
from .solver_core import SolveResult, SolveStatus, candidate_values, solve

__all__ = [
    "CellValueError",
    "GridParseError",
    "Geometry",
    "STANDARD",
    "MINI",
    "HYPER",
    "Cell",
    "ConstraintGrid",
    "SudokuGrid",
    "StandardSudoku",
    "MiniSudoku",
    "HyperSudoku",
    "VARIANTS",
    "grid_class",
    "is_filled",
    "is_legal",
    "is_solved",
    "parse_grid",
    "format_grid",
    "render_rows",
    "solve",
    "candidate_values",
    "SolveResult",
    "SolveStatus",
]
