import math
from typing import Iterable, List, Optional, Sequence, Tuple

from models.polygon import SQ_FEET_PER_SQ_METRE

LonLat = Tuple[float, float]

# Sphere radius used for ring area (WGS 84 equatorial radius, metres)
EARTH_RADIUS_M = 6378137.0
MIN_RING_VERTICES = 3


def close_ring(ring: Sequence[LonLat]) -> List[LonLat]:
    pts = [tuple(p) for p in ring]
    if len(pts) < MIN_RING_VERTICES or pts[0] == pts[-1]:
        return pts
    return pts + [pts[0]]


def open_ring(ring: Sequence[LonLat]) -> List[LonLat]:
    """Ring vertices without the closing duplicate."""
    pts = [tuple(p) for p in ring]
    if len(pts) > 1 and pts[0] == pts[-1]:
        return pts[:-1]
    return pts


def distinct_vertices(ring: Sequence[LonLat]) -> List[LonLat]:
    """Ring vertices with consecutive repeats and the closing duplicate removed."""
    pts: List[LonLat] = []
    for p in ring:
        p = tuple(p)
        if not pts or pts[-1] != p:
            pts.append(p)
    return open_ring(pts)


def point_inside_polygon(lon: float, lat: float, poly: Iterable[LonLat]) -> bool:
    # Ray casting (even-odd); points exactly on an edge or vertex are unspecified
    inside = False
    pts = list(poly)
    n = len(pts)
    j = n - 1
    for i in range(n):
        xi, yi = pts[i]
        xj, yj = pts[j]
        if (yi > lat) != (yj > lat):
            if lon < (xj - xi) * (lat - yi) / (yj - yi) + xi:
                inside = not inside
        j = i
    return inside


def ring_area(ring: Sequence[LonLat]) -> Optional[float]:
    """Approximate area of a lon/lat ring in square metres.

    Uses the spherical excess approximation, so the narrowing of longitude
    with latitude is accounted for. Returns ``None`` for fewer than three
    vertices; the result is always non-negative regardless of winding.
    Degenerate rings of three or more vertices have zero area.
    """
    if len(ring) < MIN_RING_VERTICES:
        return None
    pts = open_ring(ring)
    total = 0.0
    n = len(pts)
    for i in range(n):
        lower_lon = pts[i - 1][0]
        lat = pts[i][1]
        upper_lon = pts[(i + 1) % n][0]
        total += (math.radians(upper_lon) - math.radians(lower_lon)) * math.sin(math.radians(lat))
    return abs(total * EARTH_RADIUS_M * EARTH_RADIUS_M / 2.0)


def square_meters_to_feet(square_meters: float) -> float:
    return square_meters * SQ_FEET_PER_SQ_METRE
