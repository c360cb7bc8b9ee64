"""Binary bitmap representation.

A Bitmap is a rectangular grid of 0/1 cells stored row-major. Coordinates
passed to its methods are ``(col, row)`` pairs so they line up with lattice
points used by the tracer, where x runs along columns.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Bitmap:
    """Immutable binary pixel grid.

    Attributes:
        rows: Tuple of rows, each a tuple of 0/1 values of equal length
    """

    rows: tuple[tuple[int, ...], ...]

    def __post_init__(self) -> None:
        if self.rows:
            width = len(self.rows[0])
            if any(len(row) != width for row in self.rows):
                raise ValueError("Bitmap rows must all have the same length")

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> "Bitmap":
        """Build a bitmap from nested rows, normalising every cell to 0 or 1."""
        return cls(tuple(tuple(1 if cell else 0 for cell in row) for row in rows))

    @classmethod
    def from_strings(cls, lines: Iterable[str], filled: str = "#") -> "Bitmap":
        """Build a bitmap from text art, one string per row.

        Example:
            >>> Bitmap.from_strings(["#.", ".#"]).filled_count()
            2
        """
        return cls.from_rows([[ch == filled for ch in line] for line in lines])

    @classmethod
    def empty(cls) -> "Bitmap":
        """A bitmap with no rows and zero width."""
        return cls(())

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        """True when the bitmap has no cells at all."""
        return self.width == 0 or self.height == 0

    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def is_filled(self, col: int, row: int) -> bool:
        """Check a cell, treating anything outside the grid as empty."""
        if not self.in_bounds(col, row):
            return False
        return self.rows[row][col] == 1

    def filled_pixels(self) -> Iterator[tuple[int, int]]:
        """Yield ``(col, row)`` of filled cells in row-major order."""
        for row, cells in enumerate(self.rows):
            for col, cell in enumerate(cells):
                if cell:
                    yield (col, row)

    def filled_count(self) -> int:
        return sum(sum(row) for row in self.rows)

    def has_content(self) -> bool:
        return any(1 in row for row in self.rows)

    def to_strings(self, filled: str = "#", blank: str = ".") -> list[str]:
        """Render as text art, the inverse of ``from_strings``."""
        return ["".join(filled if cell else blank for cell in row) for row in self.rows]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"rows": [list(row) for row in self.rows]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Bitmap":
        """Deserialize from dictionary."""
        return cls.from_rows(data["rows"])
