from fastapi import APIRouter
from core import state
from models.requests import MapClick, SetBuildingHeight, SetViewMode, VertexDragEnd
from models.workspace import WorkspaceSnapshot

router = APIRouter(prefix="/workspace", tags=["workspace"])


@router.get("", response_model=WorkspaceSnapshot)
def get_workspace():
    return state.workspace.snapshot()


@router.post("/click")
def click(event: MapClick):
    outcome = state.workspace.click(event.model_dump())
    return {"outcome": outcome.kind.value, "workspace": state.workspace.snapshot()}


@router.post("/draft/vertices/{index}")
def drag_vertex(index: int, event: VertexDragEnd):
    moved = state.workspace.drag_vertex(index, event.model_dump())
    return {"moved": moved, "workspace": state.workspace.snapshot()}


@router.post("/save")
def save():
    polygon_id = state.workspace.save()
    return {"id": polygon_id, "workspace": state.workspace.snapshot()}


@router.post("/reset", response_model=WorkspaceSnapshot)
def reset():
    state.workspace.reset()
    return state.workspace.snapshot()


@router.put("/height", response_model=WorkspaceSnapshot)
def set_height(event: SetBuildingHeight):
    state.workspace.set_building_height(event.value)
    return state.workspace.snapshot()


@router.put("/mode", response_model=WorkspaceSnapshot)
def set_mode(event: SetViewMode):
    state.workspace.set_view_mode(event.mode)
    return state.workspace.snapshot()


@router.post("/mode/toggle", response_model=WorkspaceSnapshot)
def toggle_mode():
    state.workspace.toggle_view_mode()
    return state.workspace.snapshot()


@router.post("/3d/toggle", response_model=WorkspaceSnapshot)
def toggle_3d():
    state.workspace.toggle_3d()
    return state.workspace.snapshot()
