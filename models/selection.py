from __future__ import annotations
from enum import Enum
from typing import Dict, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict


class ViewMode(str, Enum):
    ZONING_INSPECTION = "zoning_inspection"
    PROPERTY_INSPECTION = "property_inspection"
    FREE_DRAWING = "free_drawing"

    @property
    def is_inspection(self) -> bool:
        return self is not ViewMode.FREE_DRAWING

    def next(self) -> "ViewMode":
        members = list(ViewMode)
        return members[(members.index(self) + 1) % len(members)]


class ActiveZoneReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["zone_report"] = "zone_report"
    zone_id: str
    zone_name: str
    report: Dict[str, str]


class ActiveSavedPolygon(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["saved_polygon"] = "saved_polygon"
    polygon_id: str


Selection = Optional[Union[ActiveZoneReport, ActiveSavedPolygon]]
