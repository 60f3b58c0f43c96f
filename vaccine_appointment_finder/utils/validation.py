"""Shared constants for validation"""

from pydantic import BaseModel

from .geo import LatLng


class MinMax(BaseModel):
    minimum: float
    maximum: float

    def contains(self, x: float) -> bool:
        return x >= self.minimum and x <= self.maximum


class BoundingBox(BaseModel):
    latitude: MinMax
    longitude: MinMax

    def contains(self, lat_lng: LatLng) -> bool:
        return self.latitude.contains(lat_lng.latitude) and self.longitude.contains(
            lat_lng.longitude
        )


# Every valid coordinate on the globe, boundaries included
WORLD_BOUNDING_BOX = BoundingBox(
    latitude=MinMax(
        minimum=-90.0,
        maximum=90.0,
    ),
    longitude=MinMax(
        minimum=-180.0,
        maximum=180.0,
    ),
)
