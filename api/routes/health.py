from fastapi import APIRouter
from core import state
from core.config import Settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    s = Settings()
    workspace = state.workspace
    return {
        "ok": True,
        "zones_path": s.ZONES_PATH,
        "zones": len(workspace.zones),
        "saved_polygons": len(workspace.polygons),
        "mode": workspace.mode.value,
        "default_building_height": s.DEFAULT_BUILDING_HEIGHT,
        "events_max": s.EVENTS_MAX,
    }
