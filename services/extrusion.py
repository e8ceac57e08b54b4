"""Extrusion of 2-D footprints into wall, roof and edge geometry.

Pure functions only; safe to call on every render for the draft and for each
saved polygon independently.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Tuple

from models.mesh import Mesh
from services.coordinates import safe_parse
from services.geometry import MIN_RING_VERTICES, close_ring, distinct_vertices

MIN_BUILDING_HEIGHT = 1.0
MAX_BUILDING_HEIGHT = 100.0


def clamp_height(height: Any) -> float:
    return max(MIN_BUILDING_HEIGHT, min(MAX_BUILDING_HEIGHT, safe_parse(height, MIN_BUILDING_HEIGHT)))


def build_extrusion(footprint: Sequence[Tuple[float, float]], height: float) -> Optional[Mesh]:
    """Extrude ``footprint`` to ``height`` metres.

    Args:
        footprint: Ring of ``(lon, lat)`` pairs, open or closed.
        height: Building height; clamped to ``[1, 100]``.

    Returns:
        A :class:`Mesh`, or ``None`` when the footprint has fewer than three
        distinct vertices.
    """
    vertices = distinct_vertices(footprint)
    if len(vertices) < MIN_RING_VERTICES:
        return None
    h = clamp_height(height)
    ring = close_ring(vertices)

    walls = [
        ((x1, y1, 0.0), (x2, y2, 0.0), (x2, y2, h), (x1, y1, h))
        for (x1, y1), (x2, y2) in zip(ring[:-1], ring[1:])
    ]
    roof = [(x, y, h) for x, y in vertices]
    edges = [((x, y, 0.0), (x, y, h)) for x, y in vertices]
    return Mesh(height=h, walls=walls, roof=roof, edges=edges)
