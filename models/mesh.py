from typing import List, Tuple
from pydantic import BaseModel, ConfigDict

Point3 = Tuple[float, float, float]  # lon, lat, elevation


class Mesh(BaseModel):
    """Extruded render geometry for one footprint."""

    model_config = ConfigDict(frozen=True)

    height: float
    walls: List[Tuple[Point3, Point3, Point3, Point3]]
    roof: List[Point3]
    edges: List[Tuple[Point3, Point3]]
