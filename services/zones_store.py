from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from pydantic import ValidationError

from models.zone import Zone
from services.geometry import point_inside_polygon

logger = logging.getLogger("zoneplot.services.zones_store")

ZONES_PATH = Path("zones.json")


def load_zones(path: Path = ZONES_PATH) -> List[Zone]:
    if not path.exists():
        logger.error("Zones file not found | path=%s", path)
        return []
    try:
        text = path.read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Zones file could not be read | path=%s | error=%s", path, exc)
        return []
    if not text:
        return []  # empty file -> no zones
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        logger.error("Zones file is not valid JSON | path=%s | error=%s", path, exc)
        return []
    if not isinstance(raw, list):
        logger.error("Zones file must hold a list | path=%s", path)
        return []
    zones: List[Zone] = []
    for entry in raw:
        try:
            zones.append(Zone(**entry))
        except (TypeError, ValidationError) as exc:
            logger.warning("Skipping invalid zone | entry=%r | error=%s", entry, exc)
    logger.info("Zones loaded | path=%s | count=%d", path, len(zones))
    return zones


class ZoneIndex:
    """Read-only, ordered set of geofenced zones."""

    def __init__(self, zones: Sequence[Zone] = ()):
        self._zones = tuple(zones)

    @classmethod
    def from_file(cls, path: Path = ZONES_PATH) -> "ZoneIndex":
        return cls(load_zones(path))

    def __iter__(self) -> Iterator[Zone]:
        return iter(self._zones)

    def __len__(self) -> int:
        return len(self._zones)

    @property
    def zones(self) -> tuple[Zone, ...]:
        return self._zones

    def get(self, zone_id: str) -> Optional[Zone]:
        for zone in self._zones:
            if zone.id == zone_id:
                return zone
        return None

    def find_containing(self, lon: float, lat: float) -> Optional[Zone]:
        # first zone in list order wins on overlap
        for zone in self._zones:
            if point_inside_polygon(lon, lat, zone.ring):
                return zone
        return None
