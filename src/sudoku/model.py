"""Constraint grid contract, derived predicates, and the concrete puzzle variants."""

from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Protocol, Sequence, Tuple, Type

from .errors import CellValueError
from .geometry import HYPER, MINI, STANDARD, Geometry

Cell = Optional[int]
Group = List[Cell]


class ConstraintGrid(Protocol):
    """Everything the solver and the predicates below are allowed to touch."""

    @property
    def cell_count(self) -> int: ...

    @property
    def cells(self) -> Tuple[Cell, ...]: ...

    def get(self, i: int) -> Cell: ...

    def set(self, i: int, value: Cell) -> None: ...

    def valid_values(self) -> range: ...

    def all_groups(self) -> List[Group]: ...

    def groups_of(self, i: int) -> List[Group]: ...


def is_filled(grid: ConstraintGrid) -> bool:
    return all(cell is not None for cell in grid.cells)


def _has_duplicates(group: Sequence[Cell]) -> bool:
    present = [cell for cell in group if cell is not None]
    return len(present) != len(set(present))


def is_legal(grid: ConstraintGrid) -> bool:
    """True when no group holds a present value twice. Empty cells never conflict."""
    return not any(_has_duplicates(group) for group in grid.all_groups())


def is_solved(grid: ConstraintGrid) -> bool:
    """True when every group is completely filled and free of duplicates."""
    for group in grid.all_groups():
        if None in group or _has_duplicates(group):
            return False
    return True


@dataclass
class SudokuGrid:
    """
    Row-major grid of optional values whose shape comes from `geometry`.

    Subclasses only pick a geometry; all access checks and predicates live
    here so every variant behaves the same way.
    """

    geometry: ClassVar[Geometry]

    _cells: Optional[List[Cell]] = None

    def __post_init__(self) -> None:
        count = self.geometry.cell_count
        if self._cells is None:
            self._cells = [None] * count
            return
        values = list(self._cells)
        if len(values) != count:
            raise ValueError(f"{self.geometry.name} grid needs {count} cells, got {len(values)}")
        self._cells = [None] * count
        for i, value in enumerate(values):
            self.set(i, value)

    @classmethod
    def empty(cls) -> "SudokuGrid":
        return cls()

    @classmethod
    def from_cells(cls, cells: Sequence[Cell]) -> "SudokuGrid":
        return cls(list(cells))

    @property
    def cell_count(self) -> int:
        return self.geometry.cell_count

    @property
    def cells(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def get(self, i: int) -> Cell:
        return self._cells[self.geometry.check_index(i)]

    def set(self, i: int, value: Cell) -> None:
        self.geometry.check_index(i)
        if value is not None:
            valid = self.valid_values()
            if isinstance(value, bool) or not isinstance(value, int) or value not in valid:
                raise CellValueError(value, valid, index=i)
        self._cells[i] = value

    def clear(self, i: int) -> None:
        self.set(i, None)

    def valid_values(self) -> range:
        return range(1, self.geometry.size + 1)

    def copy(self) -> "SudokuGrid":
        return type(self)(list(self._cells))

    def empty_positions(self) -> List[int]:
        return [i for i, cell in enumerate(self._cells) if cell is None]

    # Group views

    def _view(self, indices: Sequence[int]) -> Group:
        return [self._cells[i] for i in indices]

    def rows(self) -> List[Group]:
        return [self._view(self.geometry.row(r)) for r in range(self.geometry.height)]

    def columns(self) -> List[Group]:
        return [self._view(self.geometry.column(c)) for c in range(self.geometry.width)]

    def boxes(self) -> List[Group]:
        return [self._view(self.geometry.box(b)) for b in range(self.geometry.box_count)]

    def extra_regions(self) -> List[Group]:
        return [
            self._view(self.geometry.extra_region(k))
            for k in range(len(self.geometry.extra_corners))
        ]

    def groups_of(self, i: int) -> List[Group]:
        return [self._view(indices) for indices in self.geometry.groups_of(i)]

    def all_groups(self) -> List[Group]:
        return [self._view(indices) for indices in self.geometry.all_groups()]

    # Predicates

    def filled(self) -> bool:
        return is_filled(self)

    def legal(self) -> bool:
        return is_legal(self)

    def solved(self) -> bool:
        return is_solved(self)

    def __str__(self) -> str:
        return "".join(" " if cell is None else str(cell) for cell in self._cells)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class StandardSudoku(SudokuGrid):
    """Classic 9x9 grid with nine 3x3 boxes."""

    geometry = STANDARD


class MiniSudoku(SudokuGrid):
    """6x6 grid, values 1..6, boxes two rows tall and three columns wide."""

    geometry = MINI


class HyperSudoku(SudokuGrid):
    """9x9 grid with four extra 3x3 regions on top of the standard boxes."""

    geometry = HYPER


VARIANTS: Dict[str, Type[SudokuGrid]] = {
    "standard": StandardSudoku,
    "mini": MiniSudoku,
    "hyper": HyperSudoku,
}


def grid_class(variant: str) -> Type[SudokuGrid]:
    try:
        return VARIANTS[variant.strip().lower()]
    except KeyError:
        raise ValueError(
            f"Unknown variant {variant!r}; expected one of {', '.join(sorted(VARIANTS))}"
        ) from None
