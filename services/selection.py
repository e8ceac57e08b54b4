from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from models.coordinate import Coordinate
from models.polygon import SavedPolygon
from models.selection import ViewMode
from models.zone import Zone
from services.polygon_store import SavedPolygonStore
from services.zones_store import ZoneIndex


class ClickKind(str, Enum):
    ZONE_REPORT = "zone_report"
    SAVED_POLYGON = "saved_polygon"
    ADD_VERTEX = "add_vertex"
    NONE = "none"


@dataclass(frozen=True)
class ClickOutcome:
    kind: ClickKind
    zone: Optional[Zone] = None
    polygon: Optional[SavedPolygon] = None


class SelectionResolver:
    """Decides what a map click means in the current view mode."""

    def __init__(self, zones: ZoneIndex, polygons: SavedPolygonStore):
        self.zones = zones
        self.polygons = polygons

    def resolve(self, point: Coordinate, mode: ViewMode) -> ClickOutcome:
        lon, lat = point.as_tuple()
        if mode.is_inspection:
            zone = self.zones.find_containing(lon, lat)
            if zone is None:
                return ClickOutcome(ClickKind.NONE)
            return ClickOutcome(ClickKind.ZONE_REPORT, zone=zone)

        # existing shapes take priority over placing a new vertex
        polygon = self.polygons.find_containing(lon, lat)
        if polygon is not None:
            return ClickOutcome(ClickKind.SAVED_POLYGON, polygon=polygon)
        return ClickOutcome(ClickKind.ADD_VERTEX)
