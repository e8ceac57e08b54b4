from __future__ import annotations
from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, computed_field

# square feet per square metre, as displayed by the dashboard
SQ_FEET_PER_SQ_METRE = 10.7639


class AreaMeasurement(BaseModel):
    model_config = ConfigDict(frozen=True)

    square_meters: float

    @computed_field
    @property
    def square_feet(self) -> float:
        return self.square_meters * SQ_FEET_PER_SQ_METRE

    @classmethod
    def of(cls, square_meters: Optional[float]) -> Optional["AreaMeasurement"]:
        if square_meters is None:
            return None
        return cls(square_meters=square_meters)


class SavedPolygon(BaseModel):
    """A committed polygon; immutable once created."""

    model_config = ConfigDict(frozen=True)

    id: str
    ring: List[Tuple[float, float]]  # closed
    area: float  # m², snapshot at save time

    @property
    def measurement(self) -> AreaMeasurement:
        return AreaMeasurement(square_meters=self.area)
