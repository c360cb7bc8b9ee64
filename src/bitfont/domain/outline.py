"""Geometric types for traced outlines.

This module defines the types that flow between the tracing stages:
- Edge: A directed unit segment between two lattice points
- Contour: A closed polygon in either pixel space or font units
- WindingDirection: Enum for contour winding direction
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

LatticePoint = tuple[int, int]


class WindingDirection(Enum):
    """Contour winding direction in a y-up coordinate system.

    In TrueType convention:
    - Outer contours wind clockwise
    - Inner contours (holes) wind counter-clockwise

    Traced pixel-space loops live in a y-down system, so their raw signed
    area has the opposite sign until the coordinate mapper flips them.
    """

    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed unit-length boundary segment.

    The filled pixel lies on the right of the direction of travel as seen on
    screen (y grows downward).

    Attributes:
        start: Lattice point the edge leaves
        end: Lattice point the edge reaches
    """

    start: LatticePoint
    end: LatticePoint

    @property
    def direction(self) -> tuple[int, int]:
        return (self.end[0] - self.start[0], self.end[1] - self.start[1])

    @property
    def is_vertical(self) -> bool:
        return self.start[0] == self.end[0]


def signed_area(points: list[tuple[float, float]]) -> float:
    """Calculate signed area of a polygon using the shoelace formula.

    Positive means counter-clockwise in a y-up system. Traced pixel loops
    (y-down) come out positive for outer boundaries and negative for holes.

    Examples:
        >>> signed_area([(0, 0), (1, 0), (1, 1), (0, 1)])
        1.0
        >>> signed_area([(0, 0), (0, 1), (1, 1), (1, 0)])
        -1.0
    """
    n = len(points)
    if n < 3:
        return 0.0

    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += points[i][0] * points[j][1]
        area -= points[j][0] * points[i][1]

    return area / 2.0


@dataclass
class Contour:
    """A closed polygon, first and last points implicitly joined.

    Attributes:
        points: Ordered vertices
        direction: Winding direction (None until calculated)
    """

    points: list[LatticePoint]
    direction: WindingDirection | None = field(default=None)
    _cached_area: float | None = field(default=None, repr=False, init=False)

    def signed_area(self) -> float:
        """Shoelace area of the contour, cached."""
        if self._cached_area is None:
            self._cached_area = signed_area(self.points)
        return self._cached_area

    def winding(self) -> WindingDirection:
        """Winding direction derived from the sign of the area (y-up)."""
        if self.signed_area() < 0:
            return WindingDirection.CLOCKWISE
        return WindingDirection.COUNTER_CLOCKWISE

    def bounding_box(self) -> tuple[int, int, int, int]:
        """Return ``(min_x, min_y, max_x, max_y)``."""
        if not self.points:
            return (0, 0, 0, 0)
        xs = [p[0] for p in self.points]
        ys = [p[1] for p in self.points]
        return (min(xs), min(ys), max(xs), max(ys))

    def __len__(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "points": [list(p) for p in self.points],
            "direction": self.direction.value if self.direction else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Contour":
        """Deserialize from dictionary."""
        direction = (
            WindingDirection(data["direction"])
            if data.get("direction") is not None
            else None
        )
        return cls(
            points=[(p[0], p[1]) for p in data["points"]],
            direction=direction,
        )
