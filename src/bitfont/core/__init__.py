"""Core tracing algorithms for bitfont.

This module contains the pipeline that turns a binary bitmap into closed
polygons in font units:

- Extraction (crop a texture cell to its content)
- Bold widening (one-pixel horizontal dilation)
- Component labeling (8-connectivity)
- Edge enumeration (with internal-edge filtering)
- Loop stitching (rightmost-turn rule)
- Simplification (collinear vertex removal)
- Coordinate mapping (pixel space to font units)

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects, no I/O)

The batch orchestrator lives in ``bitfont.core.processor``; it depends on the
I/O layer and is not re-exported here.

Key functions:
- extract_bitmap: Crop a texture cell to a binary bitmap
- embolden: Widen a bitmap by one column
- find_components: Label 8-connected components
- build_edges: Enumerate boundary edges of a component
- stitch_loops: Link edges into closed loops
- simplify_loop: Remove collinear vertices
- map_loop: Map a loop into font units

Key classes:
- BitmapVectorizer: Runs the tracing stages for a whole bitmap
- GlyphGenerator: Turns loaded characters into outlines
"""

from bitfont.core.bold import embolden
from bitfont.core.components import find_components
from bitfont.core.edges import EdgeSet, build_edges, is_internal_edge
from bitfont.core.extractor import (
    ExtractedBitmap,
    PixelBuffer,
    extract_bitmap,
    is_content_pixel,
)
from bitfont.core.generator import GenerationResult, GlyphGenerator
from bitfont.core.mapper import map_loop, map_point, round_half_up
from bitfont.core.simplify import simplify_loop
from bitfont.core.tracer import StitchResult, stitch_loops, turn_key
from bitfont.core.vectorizer import BitmapVectorizer, VectorizeResult, bitmap_to_loops

__all__ = [
    # Vectorizer classes
    "BitmapVectorizer",
    "EdgeSet",
    "ExtractedBitmap",
    "GenerationResult",
    # Generator classes
    "GlyphGenerator",
    "PixelBuffer",
    "StitchResult",
    "VectorizeResult",
    # Pipeline functions
    "bitmap_to_loops",
    "build_edges",
    "embolden",
    "extract_bitmap",
    "find_components",
    "is_content_pixel",
    "is_internal_edge",
    "map_loop",
    "map_point",
    "round_half_up",
    "simplify_loop",
    "stitch_loops",
    "turn_key",
]
