"""Error types shared by the grid model and the text parser."""

from typing import Optional


class CellValueError(ValueError):
    """A value outside the variant's legal range was written to a cell."""

    def __init__(self, value, valid: range, index: Optional[int] = None):
        self.value = value
        self.valid = valid
        self.index = index
        where = f" at cell {index}" if index is not None else ""
        super().__init__(
            f"{value!r} is not a valid value{where} (expected {valid.start}..{valid.stop - 1})"
        )


class GridParseError(ValueError):
    """Puzzle text did not contain the expected number of significant characters."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"invalid length: expected {expected} cells, got {actual}")
