"""Grid geometry: map linear cell indices to the constraint groups that contain them.

Indices are row-major (`index = row * width + column`). Nothing here knows about
cell values; the grid classes in `model.py` turn these index tuples into groups.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import List, Tuple

Indices = Tuple[int, ...]


@dataclass(frozen=True)
class Geometry:
    """
    Shape of one puzzle variant.

    `box_rows` x `box_cols` is the size of a single box (height x width). Extra
    regions are 3x3 blocks given by their top-left corner.
    """

    name: str
    width: int
    height: int
    box_rows: int
    box_cols: int
    extra_corners: Tuple[Tuple[int, int], ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.width % self.box_cols or self.height % self.box_rows:
            raise ValueError(f"{self.name}: boxes must tile the grid")
        if self.box_rows * self.box_cols != self.size:
            raise ValueError(f"{self.name}: a box must hold exactly {self.size} cells")

    @property
    def size(self) -> int:
        """Number of distinct values (and cells per row, column and box)."""
        return self.width

    @property
    def cell_count(self) -> int:
        return self.width * self.height

    @property
    def boxes_per_band(self) -> int:
        return self.width // self.box_cols

    @property
    def box_count(self) -> int:
        return (self.height // self.box_rows) * self.boxes_per_band

    def check_index(self, i: int) -> int:
        if not 0 <= i < self.cell_count:
            raise IndexError(f"cell index {i} out of range for {self.name} (0..{self.cell_count - 1})")
        return i

    # Index decomposition

    def row_of(self, i: int) -> int:
        return self.check_index(i) // self.width

    def column_of(self, i: int) -> int:
        return self.check_index(i) % self.width

    def box_of(self, i: int) -> int:
        row, col = self.row_of(i), self.column_of(i)
        return (row // self.box_rows) * self.boxes_per_band + col // self.box_cols

    def extras_of(self, i: int) -> Tuple[int, ...]:
        """Extra regions containing cell `i` (at most one by construction)."""
        row, col = self.row_of(i), self.column_of(i)
        return tuple(
            k
            for k, (top, left) in enumerate(self.extra_corners)
            if top <= row < top + 3 and left <= col < left + 3
        )

    # Member indices

    def row(self, r: int) -> Indices:
        return self._rows[r]

    def column(self, c: int) -> Indices:
        return self._columns[c]

    def box(self, b: int) -> Indices:
        return self._boxes[b]

    def extra_region(self, k: int) -> Indices:
        return self._extras[k]

    def groups_of(self, i: int) -> List[Indices]:
        """Row, column, box, then any extra region holding cell `i`."""
        groups = [
            self.row(self.row_of(i)),
            self.column(self.column_of(i)),
            self.box(self.box_of(i)),
        ]
        groups.extend(self.extra_region(k) for k in self.extras_of(i))
        return groups

    def all_groups(self) -> List[Indices]:
        return list(self._rows) + list(self._columns) + list(self._boxes) + list(self._extras)

    # Lookup tables, built once per geometry

    @cached_property
    def _rows(self) -> Tuple[Indices, ...]:
        return tuple(
            tuple(range(r * self.width, (r + 1) * self.width)) for r in range(self.height)
        )

    @cached_property
    def _columns(self) -> Tuple[Indices, ...]:
        return tuple(
            tuple(range(c, self.cell_count, self.width)) for c in range(self.width)
        )

    @cached_property
    def _boxes(self) -> Tuple[Indices, ...]:
        boxes = []
        for b in range(self.box_count):
            top = (b // self.boxes_per_band) * self.box_rows
            left = (b % self.boxes_per_band) * self.box_cols
            boxes.append(self._block(top, left, self.box_rows, self.box_cols))
        return tuple(boxes)

    @cached_property
    def _extras(self) -> Tuple[Indices, ...]:
        return tuple(self._block(top, left, 3, 3) for top, left in self.extra_corners)

    def _block(self, top: int, left: int, rows: int, cols: int) -> Indices:
        return tuple(
            (top + dr) * self.width + left + dc for dr in range(rows) for dc in range(cols)
        )


STANDARD = Geometry(name="standard", width=9, height=9, box_rows=3, box_cols=3)

# 6x6: boxes are two rows tall and three columns wide, stacked three high.
MINI = Geometry(name="mini", width=6, height=6, box_rows=2, box_cols=3)

HYPER = Geometry(
    name="hyper",
    width=9,
    height=9,
    box_rows=3,
    box_cols=3,
    extra_corners=((1, 1), (1, 5), (5, 1), (5, 5)),
)
