"""Connected component labeling with diagonal connectivity.

Pixels that touch only at a corner belong to the same component, so a
diagonal stroke traces as one shape instead of a chain of squares.
"""

from bitfont.domain import Bitmap

Pixel = tuple[int, int]

# (dcol, drow) in visiting order: top, bottom, left, right, then diagonals
NEIGHBOR_OFFSETS: tuple[Pixel, ...] = (
    (0, -1),
    (0, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
    (1, 1),
)


def find_components(bitmap: Bitmap) -> list[list[Pixel]]:
    """Partition the filled pixels into 8-connected components.

    Seeds are taken in row-major order. Each flood fill uses an explicit
    stack; neighbours are pushed in reverse so pops follow the same
    depth-first order as a recursive visit of ``NEIGHBOR_OFFSETS``.

    Args:
        bitmap: Source bitmap

    Returns:
        Components as lists of ``(col, row)`` in discovery order
    """
    visited: set[Pixel] = set()
    components: list[list[Pixel]] = []

    for seed in bitmap.filled_pixels():
        if seed in visited:
            continue

        component: list[Pixel] = []
        stack = [seed]
        while stack:
            col, row = stack.pop()
            if (col, row) in visited or not bitmap.is_filled(col, row):
                continue
            visited.add((col, row))
            component.append((col, row))

            for dcol, drow in reversed(NEIGHBOR_OFFSETS):
                neighbor = (col + dcol, row + drow)
                if neighbor not in visited and bitmap.is_filled(*neighbor):
                    stack.append(neighbor)

        components.append(component)

    return components
