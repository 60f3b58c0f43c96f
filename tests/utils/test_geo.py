import math

import pytest

from vaccine_appointment_finder.utils import geo

MILES_PER_DEGREE = geo.EARTH_RADIUS_MILES * math.pi / 180


def test_haversine_identical_points():
    assert geo.haversine_miles(0, 0, 0, 0) == 0
    assert geo.haversine_miles(37.82733, -122.21058, 37.82733, -122.21058) == 0


def test_haversine_symmetric():
    oakland = (37.82733, -122.21058)
    reno = (39.5296, -119.8138)

    assert geo.haversine_miles(*oakland, *reno) == pytest.approx(
        geo.haversine_miles(*reno, *oakland)
    )


def test_haversine_one_degree():
    assert geo.haversine_miles(0, 0, 1, 0) == pytest.approx(MILES_PER_DEGREE)
    # Longitude degrees are the same length as latitude degrees on the equator
    assert geo.haversine_miles(0, 0, 0, 1) == pytest.approx(MILES_PER_DEGREE)


def test_haversine_known_distance():
    # San Francisco to Los Angeles is about 347 miles, or 559 km
    assert geo.haversine_miles(37.7749, -122.4194, 34.0522, -118.2437) == pytest.approx(
        347, abs=2
    )
    assert geo.haversine_km(37.7749, -122.4194, 34.0522, -118.2437) == pytest.approx(
        559, abs=3
    )


def test_haversine_antipodal():
    assert geo.haversine_miles(0, 0, 0, 180) == pytest.approx(
        math.pi * geo.EARTH_RADIUS_MILES
    )


def test_distance_miles():
    origin = geo.LatLng(latitude=0, longitude=0)
    north = geo.LatLng(latitude=1, longitude=0)

    assert geo.distance_miles(origin, origin) == 0
    assert geo.distance_miles(origin, north) == pytest.approx(MILES_PER_DEGREE)
    assert geo.distance_miles(north, origin) == geo.distance_miles(origin, north)
