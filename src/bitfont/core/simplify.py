"""Collinear vertex removal for traced loops."""

from bitfont.domain import LatticePoint


def simplify_loop(points: list[LatticePoint]) -> list[LatticePoint]:
    """Drop vertices lying on a straight horizontal or vertical run.

    Each vertex is compared with the last kept vertex (the loop's final
    vertex before anything is kept) and the next input vertex. The first
    vertex is always kept as an anchor, even mid-run. Loops with fewer than
    three points are returned unchanged.

    Example:
        >>> simplify_loop([(0, 0), (1, 0), (2, 0), (2, 1), (1, 1), (0, 1)])
        [(0, 0), (2, 0), (2, 1), (0, 1)]
    """
    if len(points) < 3:
        return list(points)

    result: list[LatticePoint] = []
    n = len(points)

    for i, curr in enumerate(points):
        prev = result[-1] if result else points[-1]
        nxt = points[(i + 1) % n]

        horizontal = prev[1] == curr[1] == nxt[1]
        vertical = prev[0] == curr[0] == nxt[0]

        if not (horizontal or vertical) or not result:
            result.append(curr)

    return result
