"""Great-circle distance helpers"""
import math

from pydantic import BaseModel, ConfigDict

EARTH_RADIUS_MILES = 3958.0
EARTH_RADIUS_KM = 6371.0


class LatLng(BaseModel):
    """
    {
        "latitude": float,
        "longitude": float,
    },
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float


def _central_angle(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Angle in radians between two points, using the haversine formula."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # Clamp floating point drift for near-antipodal points
    a = min(1.0, max(0.0, a))

    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_miles(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Return the great-circle distance in miles between two points."""
    return EARTH_RADIUS_MILES * _central_angle(lat1, lng1, lat2, lng2)


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Return the great-circle distance in km between two points."""
    return EARTH_RADIUS_KM * _central_angle(lat1, lng1, lat2, lng2)


def distance_miles(origin: LatLng, destination: LatLng) -> float:
    return haversine_miles(
        origin.latitude,
        origin.longitude,
        destination.latitude,
        destination.longitude,
    )
