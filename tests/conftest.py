"""Shared pytest fixtures for the ZonePlot test suite."""

from pathlib import Path

import pytest

from models.selection import ViewMode
from services.workspace import MapWorkspace
from services.zones_store import ZoneIndex

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

ROOT_DIR = Path(__file__).resolve().parent.parent
ZONES_FILE = ROOT_DIR / "zones.json"

# Commercial zone sample (zone1), as shipped in zones.json
ZONE1_RING = [
    (72.8695, 19.3700),
    (72.8680, 19.3685),
    (72.8692, 19.3668),
    (72.8725, 19.3663),
    (72.8728, 19.3685),
]

# Roughly 100 m x 100 m square near the equator, clear of every sample zone
SMALL_SQUARE = [
    (10.0, 0.0),
    (10.0009, 0.0),
    (10.0009, 0.0009),
    (10.0, 0.0009),
]


@pytest.fixture()
def zones_file() -> Path:
    return ZONES_FILE


@pytest.fixture()
def zone_index(zones_file: Path) -> ZoneIndex:
    return ZoneIndex.from_file(zones_file)


@pytest.fixture()
def drawing_workspace(zone_index: ZoneIndex) -> MapWorkspace:
    """A workspace already switched to free drawing."""
    return MapWorkspace(zone_index, mode=ViewMode.FREE_DRAWING)
