"""Loop stitching: link boundary edges into closed polygons.

Starting from the first unvisited edge, the tracer repeatedly follows the
outgoing edge that makes the rightmost turn until it arrives back at the
loop's start point. At a lattice point where a component pinches to a single
corner, four edges meet; always taking the rightmost turn keeps each loop
simple and routes the walk across the pinch instead of cutting it.

Turn selection compares exact integer cross and dot products first. The
floating-point angle is only a final tie-break, so results do not depend on
platform rounding.
"""

import math
from collections import defaultdict
from dataclasses import dataclass, field

from bitfont.domain import Edge, LatticePoint


@dataclass
class StitchResult:
    """Closed loops traced from one edge set.

    Attributes:
        loops: Closed loops as lattice point sequences (start not repeated)
        abandoned: Loops dropped because no continuing edge was found
        consumed: Number of edges visited across all walks
    """

    loops: list[list[LatticePoint]] = field(default_factory=list)
    abandoned: int = 0
    consumed: int = 0


def turn_key(incoming: tuple[int, int], outgoing: tuple[int, int]) -> tuple[int, float]:
    """Rank a turn so that larger means further to the right.

    The angle is ``atan2(-cross, dot)``; the integer rank reproduces its
    ordering (rightward turn, straight, leftward turn, reversal) without
    floating point. A reversal ranks lowest, matching an angle of -pi.
    """
    cross = incoming[0] * outgoing[1] - incoming[1] * outgoing[0]
    dot = incoming[0] * outgoing[0] + incoming[1] * outgoing[1]

    if cross < 0:
        rank = 2
    elif cross > 0:
        rank = 0
    elif dot > 0:
        rank = 1
    else:
        return (-1, -math.pi)

    return (rank, math.atan2(-cross, dot))


def find_next_edge(
    edges: list[Edge],
    outgoing: dict[LatticePoint, list[int]],
    visited: set[int],
    prev_idx: int,
    point: LatticePoint,
) -> int | None:
    """Pick the unvisited edge leaving ``point`` with the rightmost turn.

    Among equal turns the lowest edge index wins.

    Returns:
        Edge index, or None when no unvisited edge leaves ``point``
    """
    incoming = edges[prev_idx].direction
    best_idx: int | None = None
    best_key: tuple[int, float] | None = None

    for idx in outgoing.get(point, ()):
        if idx in visited:
            continue
        key = turn_key(incoming, edges[idx].direction)
        if best_key is None or key > best_key:
            best_key = key
            best_idx = idx

    return best_idx


def stitch_loops(edges: list[Edge]) -> StitchResult:
    """Link edges into closed loops.

    Each edge is consumed at most once. A walk that runs out of edges before
    returning to its start is abandoned and counted; tracing then resumes
    from the next unvisited edge.

    Args:
        edges: Boundary edges of one component

    Returns:
        StitchResult with the closed loops
    """
    outgoing: dict[LatticePoint, list[int]] = defaultdict(list)
    for idx, edge in enumerate(edges):
        outgoing[edge.start].append(idx)

    result = StitchResult()
    visited: set[int] = set()
    cursor = 0

    while len(visited) < len(edges):
        while cursor in visited:
            cursor += 1
        start_idx = cursor

        loop = [edges[start_idx].start]
        visited.add(start_idx)
        prev_idx = start_idx
        next_point = edges[start_idx].end
        closed = False

        while True:
            if next_point == loop[0]:
                closed = True
                break

            loop.append(next_point)
            next_idx = find_next_edge(edges, outgoing, visited, prev_idx, next_point)
            if next_idx is None:
                break

            visited.add(next_idx)
            prev_idx = next_idx
            next_point = edges[next_idx].end

        if closed:
            result.loops.append(loop)
        else:
            result.abandoned += 1

    result.consumed = len(visited)
    return result
