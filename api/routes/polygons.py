from typing import Dict
from fastapi import APIRouter
from core import state
from models.mesh import Mesh
from models.workspace import SavedPolygonView

router = APIRouter(prefix="/polygons", tags=["polygons"])


@router.get("", response_model=list[SavedPolygonView])
def list_polygons():
    return [
        SavedPolygonView(id=p.id, ring=p.ring, area=p.measurement)
        for p in state.workspace.polygons.list()
    ]


@router.get("/meshes", response_model=Dict[str, Mesh])
def get_meshes():
    # available regardless of the 3-D toggle, e.g. for export
    return state.workspace.meshes()


@router.delete("/{polygon_id}")
def delete_polygon(polygon_id: str):
    return {"id": polygon_id, "deleted": state.workspace.delete_polygon(polygon_id)}
