"""Bitmap to polygon tracing pipeline.

Runs component labeling, edge enumeration, loop stitching and
simplification for every component of a bitmap. Output loops stay in pixel
space; mapping to font units is the generator's job.
"""

from dataclasses import dataclass, field

import structlog

from bitfont.core.components import find_components
from bitfont.core.edges import build_edges
from bitfont.core.simplify import simplify_loop
from bitfont.core.tracer import stitch_loops
from bitfont.domain import Bitmap, LatticePoint

logger = structlog.get_logger(__name__)


@dataclass
class VectorizeResult:
    """Traced loops of a bitmap with per-stage counters.

    Attributes:
        loops: Simplified closed loops in pixel space, component by component
        component_count: Number of 8-connected components
        edge_count: Boundary edges kept across all components
        internal_edges: Proposed edges dropped as internal
        abandoned_loops: Walks that never closed
        degenerate_loops: Closed loops with two or fewer vertices after
            simplification
    """

    loops: list[list[LatticePoint]] = field(default_factory=list)
    component_count: int = 0
    edge_count: int = 0
    internal_edges: int = 0
    abandoned_loops: int = 0
    degenerate_loops: int = 0


class BitmapVectorizer:
    """Traces binary bitmaps into simple closed polygons.

    The vectorizer is stateless and safe for use in worker processes.

    Example:
        vectorizer = BitmapVectorizer()
        result = vectorizer.vectorize(Bitmap.from_strings(["##", "##"]))
        result.loops  # [[(0, 0), (2, 0), (2, 2), (0, 2)]]
    """

    def vectorize(self, bitmap: Bitmap) -> VectorizeResult:
        """Trace every component of a bitmap.

        Args:
            bitmap: Source bitmap

        Returns:
            VectorizeResult with loops and counters
        """
        result = VectorizeResult()
        if bitmap.is_empty():
            return result

        components = find_components(bitmap)
        result.component_count = len(components)

        for component in components:
            edge_set = build_edges(component, bitmap)
            result.edge_count += len(edge_set)
            result.internal_edges += edge_set.removed

            stitched = stitch_loops(edge_set.edges)
            result.abandoned_loops += stitched.abandoned

            for loop in stitched.loops:
                simplified = simplify_loop(loop)
                if len(simplified) > 2:
                    result.loops.append(simplified)
                else:
                    result.degenerate_loops += 1

        if result.abandoned_loops:
            logger.debug(
                "Unclosed loops dropped",
                abandoned=result.abandoned_loops,
                components=result.component_count,
            )

        return result


def bitmap_to_loops(bitmap: Bitmap) -> list[list[LatticePoint]]:
    """Trace a bitmap and return only its simplified pixel-space loops."""
    return BitmapVectorizer().vectorize(bitmap).loops
