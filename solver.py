"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts a grid object, puzzle text, or a
puzzle record as produced by `src.sudoku.loader.load_puzzles`.
"""

from typing import Any, Optional

from src.sudoku import solver_core
from src.sudoku.model import SudokuGrid
from src.sudoku.parser import format_grid, parse_grid


def solve_puzzle(puzzle: Any, variant: str = "standard", timeout: Optional[float] = None) -> str:
    """
    Solve a puzzle and return the solution as grid text ("" when there is none).
    Accepts:
      - SudokuGrid instances (solved in place)
      - Puzzle text (parsed with `parse_grid` for `variant`)
      - Puzzle dictionaries with a "puzzle" key and an optional "variant" key
    """
    if isinstance(puzzle, SudokuGrid):
        grid = puzzle
    elif isinstance(puzzle, str):
        grid = parse_grid(puzzle, variant)
    elif isinstance(puzzle, dict):
        grid = parse_grid(str(puzzle.get("puzzle", "")), puzzle.get("variant") or variant)
    else:
        raise TypeError("solve_puzzle expects a SudokuGrid, puzzle text, or puzzle dictionary")

    result = solver_core.solve(grid, timeout=timeout)
    return format_grid(grid) if result else ""


__all__ = ["solve_puzzle"]
