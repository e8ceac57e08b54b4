from typing import Any, Dict, List, Tuple
from pydantic import BaseModel, ConfigDict, field_validator


class Zone(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    color: str = "#ff5733"
    ring: List[Tuple[float, float]]  # [lon, lat], closed at load
    report: Dict[str, str] = {}

    @field_validator("ring")
    @classmethod
    def _closed(cls, pts: List[Tuple[float, float]]):
        if len(pts) < 3:
            raise ValueError("zone ring must have >= 3 points")
        for lon, lat in pts:
            if not (-180.0 <= lon <= 180.0 and -90.0 <= lat <= 90.0):
                raise ValueError("zone ring must hold [lon, lat] in range")
        if pts[0] != pts[-1]:
            pts = [*pts, pts[0]]
        return pts

    @field_validator("report", mode="before")
    @classmethod
    def _as_text(cls, report: Any):
        # report values are display-only; numbers in the dataset become text
        if isinstance(report, dict):
            return {str(k): "" if v is None else str(v) for k, v in report.items()}
        return report
