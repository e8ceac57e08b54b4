from typing import Any
from pydantic import BaseModel

from models.selection import ViewMode


class MapClick(BaseModel):
    # loosely typed on purpose: malformed values are sanitized, not rejected
    lon: Any = None
    lat: Any = None


class VertexDragEnd(BaseModel):
    lon: Any = None
    lat: Any = None


class SetBuildingHeight(BaseModel):
    value: Any = None


class SetViewMode(BaseModel):
    mode: ViewMode
