from fastapi import APIRouter
from core import state
from models.zone import Zone

router = APIRouter(prefix="/zones", tags=["zones"])


@router.get("", response_model=list[Zone])
def get_zones():
    return list(state.workspace.zones)
