"""Boundary edge enumeration for a single component.

Every filled pixel contributes a unit edge on each side whose neighbour is
empty or outside the bitmap. Edges are oriented so the pixel lies on the
right of travel on screen: top edges run right, right edges run down,
bottom edges run left and left edges run up.
"""

from dataclasses import dataclass, field

from bitfont.core.components import Pixel
from bitfont.domain import Bitmap, Edge


@dataclass
class EdgeSet:
    """Boundary edges of one component.

    Attributes:
        edges: Kept edges, in pixel order then top/right/bottom/left
        removed: Number of proposed edges dropped as internal
    """

    edges: list[Edge] = field(default_factory=list)
    removed: int = 0

    def __len__(self) -> int:
        return len(self.edges)


def pixel_edges(col: int, row: int) -> tuple[Edge, Edge, Edge, Edge]:
    """Return the top, right, bottom and left edges of a pixel."""
    return (
        Edge((col, row), (col + 1, row)),
        Edge((col + 1, row), (col + 1, row + 1)),
        Edge((col + 1, row + 1), (col, row + 1)),
        Edge((col, row + 1), (col, row)),
    )


def is_internal_edge(edge: Edge, members: set[Pixel]) -> bool:
    """Check whether both pixels flanking an edge belong to the component.

    For a vertical edge these are the pixels left and right of it, for a
    horizontal edge the pixels above and below. Such an edge is a seam
    inside the merged shape rather than part of its boundary.
    """
    (x1, y1), (x2, y2) = edge.start, edge.end
    if edge.is_vertical:
        y = min(y1, y2)
        return (x1 - 1, y) in members and (x1, y) in members

    x = min(x1, x2)
    return (x, y1 - 1) in members and (x, y1) in members


def build_edges(component: list[Pixel], bitmap: Bitmap) -> EdgeSet:
    """Enumerate the boundary edges of a component.

    Args:
        component: Pixels of one 8-connected component
        bitmap: Bitmap the component was found in

    Returns:
        EdgeSet with the kept edges and the internal-edge count
    """
    members = set(component)
    result = EdgeSet()

    for col, row in component:
        top, right, bottom, left = pixel_edges(col, row)
        proposed = (
            (top, (col, row - 1)),
            (right, (col + 1, row)),
            (bottom, (col, row + 1)),
            (left, (col - 1, row)),
        )
        for edge, neighbor in proposed:
            if bitmap.is_filled(*neighbor):
                continue
            if is_internal_edge(edge, members):
                result.removed += 1
                continue
            result.edges.append(edge)

    return result
