"""Coordinate sanitation for map input events.

Upstream events (map clicks, marker drags, search results) are not trusted:
anything that is not a finite number is replaced by ``0`` and the result is
clamped into the valid WGS 84 ranges. Sanitation never raises, so the editor
can always render a consistent state.
"""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Mapping, Sequence
from typing import Any

from models.coordinate import Coordinate

logger = logging.getLogger("zoneplot.services.coordinates")

MIN_LONGITUDE, MAX_LONGITUDE = -180.0, 180.0
MIN_LATITUDE, MAX_LATITUDE = -90.0, 90.0

_LONGITUDE_KEYS = ("longitude", "lon", "lng")
_LATITUDE_KEYS = ("latitude", "lat")


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def safe_parse(value: Any, fallback: float = 0.0) -> float:
    """Parse a numeric-like value, returning ``fallback`` when not finite."""
    if isinstance(value, bool) or value is None:
        return fallback
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return fallback
    except OverflowError:
        # integers too large for a float are finite, so clamp rather than substitute
        if isinstance(value, int):
            return sys.float_info.max if value > 0 else -sys.float_info.max
        return fallback
    return parsed if math.isfinite(parsed) else fallback


def _pick(raw: Any, keys: tuple[str, ...]) -> Any:
    for key in keys:
        if isinstance(raw, Mapping):
            if key in raw:
                return raw[key]
        elif hasattr(raw, key):
            return getattr(raw, key)
    return None


def _split(raw: Any) -> tuple[Any, Any]:
    if isinstance(raw, Coordinate):
        return raw.longitude, raw.latitude
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        if len(raw) >= 2:
            return raw[0], raw[1]
        return None, None
    return _pick(raw, _LONGITUDE_KEYS), _pick(raw, _LATITUDE_KEYS)


def validate_coordinate(raw: Any) -> Coordinate:
    """Sanitize arbitrary input into a valid :class:`Coordinate`.

    Accepts a mapping (``longitude``/``latitude``, ``lon``/``lat`` or
    ``lng``/``lat``), a ``(lon, lat)`` sequence, or any object exposing those
    attributes. Missing or non-finite axes become ``0``; out-of-range values
    are clamped.
    """
    raw_lon, raw_lat = _split(raw)
    lon = safe_parse(raw_lon)
    lat = safe_parse(raw_lat)
    coordinate = Coordinate(
        longitude=clamp(lon, MIN_LONGITUDE, MAX_LONGITUDE),
        latitude=clamp(lat, MIN_LATITUDE, MAX_LATITUDE),
    )
    if (lon, lat) != coordinate.as_tuple() or _substituted(raw_lon, lon) or _substituted(raw_lat, lat):
        logger.debug("Coordinate sanitized | raw=%r | result=(%.6f, %.6f)", raw, *coordinate.as_tuple())
    return coordinate


def _substituted(raw_value: Any, parsed: float) -> bool:
    return parsed == 0.0 and safe_parse(raw_value, math.nan) != 0.0
