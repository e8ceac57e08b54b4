from __future__ import annotations
import logging
from enum import Enum
from typing import Any, List, Optional, Tuple

from services.coordinates import validate_coordinate
from services.geometry import MIN_RING_VERTICES, close_ring, ring_area

logger = logging.getLogger("zoneplot.services.editor")

LonLat = Tuple[float, float]


class DraftState(str, Enum):
    EMPTY = "empty"
    DRAWING = "drawing"
    VALID = "valid"


class PolygonEditor:
    """Owns the in-progress draft ring and keeps its area current.

    The vertex list is never handed out; readers get copies.
    """

    def __init__(self) -> None:
        self._vertices: List[LonLat] = []
        self._area: Optional[float] = None

    @property
    def vertices(self) -> List[LonLat]:
        return list(self._vertices)

    @property
    def area(self) -> Optional[float]:
        return self._area

    @property
    def state(self) -> DraftState:
        if not self._vertices:
            return DraftState.EMPTY
        if len(self._vertices) < MIN_RING_VERTICES:
            return DraftState.DRAWING
        return DraftState.VALID

    def __len__(self) -> int:
        return len(self._vertices)

    def add_vertex(self, raw: Any) -> LonLat:
        vertex = validate_coordinate(raw).as_tuple()
        self._vertices.append(vertex)
        self._recompute()
        return vertex

    def drag_vertex(self, index: int, raw: Any) -> bool:
        if not 0 <= index < len(self._vertices):
            logger.debug("Drag ignored, no such vertex | index=%s | count=%d", index, len(self._vertices))
            return False
        self._vertices[index] = validate_coordinate(raw).as_tuple()
        self._recompute()
        return True

    def take_ring(self) -> Optional[Tuple[List[LonLat], float]]:
        """Hand over the closed draft ring and its area, then clear the draft.

        Returns ``None`` and leaves the draft untouched when it has fewer
        than three vertices.
        """
        if len(self._vertices) < MIN_RING_VERTICES:
            logger.warning(
                "Polygon must have at least %d points | got=%d", MIN_RING_VERTICES, len(self._vertices)
            )
            return None
        ring = close_ring(self._vertices)
        area = ring_area(ring)
        self.clear()
        return ring, area

    def clear(self) -> None:
        self._vertices = []
        self._area = None

    def _recompute(self) -> None:
        self._area = ring_area(self._vertices)
