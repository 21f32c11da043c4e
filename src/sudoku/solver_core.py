"""Backtracking solver shared by every grid variant.

The search only talks to the grid through the `ConstraintGrid` contract, so the
same code handles standard, mini and hyper puzzles.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .model import Cell, ConstraintGrid, is_legal
from src.utils.trace import Tracer


class SolveStatus(str, Enum):
    SOLVED = "solved"
    ILLEGAL = "illegal"
    EXHAUSTED = "exhausted"
    TIMEOUT = "timeout"


_REASONS = {
    SolveStatus.SOLVED: "",
    SolveStatus.ILLEGAL: "cannot solve illegal position",
    SolveStatus.EXHAUSTED: "sudoku cannot be solved",
    SolveStatus.TIMEOUT: "search stopped at deadline",
}


@dataclass(frozen=True)
class SolveResult:
    """Outcome of `solve`; truthy only when the grid now holds a solution."""

    status: SolveStatus
    elapsed: float = 0.0
    steps: int = 0

    @property
    def ok(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def reason(self) -> str:
        return _REASONS[self.status]

    def __bool__(self) -> bool:
        return self.ok


class _DeadlineExceeded(Exception):
    pass


@dataclass
class _Search:
    grid: ConstraintGrid
    tracer: Tracer
    started: float
    deadline: Optional[float] = None
    steps: int = 0
    depth: int = 0


def solve(
    grid: ConstraintGrid,
    *,
    tracer: Optional[Tracer] = None,
    timeout: Optional[float] = None,
) -> SolveResult:
    """
    Fill `grid` in place with the first solution found in ascending value order.

    An illegal grid is rejected without searching. On any failure the grid is
    left exactly as it was passed in. Steps are recorded only when a tracer is
    passed in.
    """
    tracer = tracer or Tracer(enabled=False)
    started = time.perf_counter()

    if not is_legal(grid):
        tracer.log_illegal()
        return SolveResult(SolveStatus.ILLEGAL, elapsed=time.perf_counter() - started)

    deadline = started + timeout if timeout is not None else None
    search = _Search(grid=grid, tracer=tracer, started=started, deadline=deadline)
    snapshot = grid.cells

    try:
        found = _backtrack(search, 0)
    except _DeadlineExceeded:
        _restore(grid, snapshot)
        status = SolveStatus.TIMEOUT
    else:
        status = SolveStatus.SOLVED if found else SolveStatus.EXHAUSTED

    return SolveResult(status, elapsed=time.perf_counter() - started, steps=search.steps)


def _backtrack(search: _Search, pos: int) -> bool:
    grid = search.grid
    if search.deadline is not None and time.perf_counter() > search.deadline:
        search.tracer.log_timeout(pos, time.perf_counter() - search.started)
        raise _DeadlineExceeded()

    if pos >= grid.cell_count:
        search.tracer.log_solution_found(depth=search.depth)
        return True

    if grid.get(pos) is not None:
        return _backtrack(search, pos + 1)

    candidates = candidate_values(grid, pos)
    search.depth += 1
    for value in candidates:
        grid.set(pos, value)
        search.steps += 1
        search.tracer.log_assign(pos, value, candidates=len(candidates), depth=search.depth)
        if _backtrack(search, pos + 1):
            return True

    grid.set(pos, None)
    search.depth -= 1
    search.tracer.log_backtrack(pos)
    return False


def candidate_values(grid: ConstraintGrid, i: int) -> List[int]:
    """Values not already present in any group containing cell `i`, ascending."""
    excluded = {cell for group in grid.groups_of(i) for cell in group if cell is not None}
    return [value for value in grid.valid_values() if value not in excluded]


def _restore(grid: ConstraintGrid, snapshot: Tuple[Cell, ...]) -> None:
    for i, value in enumerate(snapshot):
        if grid.get(i) != value:
            grid.set(i, value)
