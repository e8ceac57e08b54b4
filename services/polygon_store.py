from __future__ import annotations
import logging
import time
from typing import List, Optional, Sequence, Tuple

from models.polygon import SavedPolygon
from services.geometry import close_ring, point_inside_polygon

logger = logging.getLogger("zoneplot.services.polygon_store")


class SavedPolygonStore:
    """In-memory store of committed polygons, in creation order.

    There is no update operation: editing a saved shape means delete and redraw.
    """

    def __init__(self) -> None:
        self._polygons: List[SavedPolygon] = []
        self._last_stamp = 0

    def _next_id(self) -> str:
        # creation-timestamp derived, bumped so ids stay strictly increasing
        stamp = max(time.time_ns() // 1000, self._last_stamp + 1)
        self._last_stamp = stamp
        return f"poly-{stamp}"

    def create(self, ring: Sequence[Tuple[float, float]], area: float) -> str:
        polygon = SavedPolygon(id=self._next_id(), ring=close_ring(ring), area=area)
        self._polygons.append(polygon)
        logger.info("Polygon saved | id=%s | vertices=%d | area=%.2f m2", polygon.id, len(polygon.ring) - 1, area)
        return polygon.id

    def get(self, polygon_id: str) -> Optional[SavedPolygon]:
        for polygon in self._polygons:
            if polygon.id == polygon_id:
                return polygon
        return None

    def delete_by_id(self, polygon_id: str) -> bool:
        remaining = [p for p in self._polygons if p.id != polygon_id]
        if len(remaining) == len(self._polygons):
            logger.debug("Delete ignored, unknown polygon | id=%s", polygon_id)
            return False
        self._polygons = remaining
        logger.info("Polygon deleted | id=%s", polygon_id)
        return True

    def reset(self) -> None:
        self._polygons = []

    def list(self) -> List[SavedPolygon]:
        return list(self._polygons)

    def __len__(self) -> int:
        return len(self._polygons)

    def find_containing(self, lon: float, lat: float) -> Optional[SavedPolygon]:
        for polygon in self._polygons:
            if point_inside_polygon(lon, lat, polygon.ring):
                return polygon
        return None
