from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel

from models.mesh import Mesh
from models.polygon import AreaMeasurement
from models.selection import Selection, ViewMode

DRAFT_MESH_ID = "draft"


class SavedPolygonView(BaseModel):
    id: str
    ring: List[Tuple[float, float]]
    area: AreaMeasurement


class DraftView(BaseModel):
    state: str
    vertices: List[Tuple[float, float]]
    area: Optional[AreaMeasurement] = None  # absent below 3 vertices


class WorkspaceSnapshot(BaseModel):
    mode: ViewMode
    three_d: bool
    building_height: float
    selection: Selection = None
    draft: DraftView
    polygons: List[SavedPolygonView]
    meshes: Optional[Dict[str, Mesh]] = None  # only in 3-D
