from typing import Tuple
from pydantic import BaseModel, ConfigDict

LonLat = Tuple[float, float]


class Coordinate(BaseModel):
    """A sanitized geographic position; always finite and within range."""

    model_config = ConfigDict(frozen=True)

    longitude: float
    latitude: float

    def as_tuple(self) -> LonLat:
        return (self.longitude, self.latitude)
