import pytest

from vaccine_appointment_finder.schema import feed
from vaccine_appointment_finder.utils.geo import LatLng


@pytest.fixture
def origin():
    return LatLng(latitude=0.0, longitude=0.0)


@pytest.fixture
def make_feature():
    """Build a location feature with one appointment slot at [lng, lat]"""

    def _make_feature(
        latitude=0.0,
        longitude=0.0,
        name="Location",
        provider="clinic a",
        appointments=1,
        appointments_available=None,
        coordinates=None,
    ):
        if coordinates is None:
            coordinates = [longitude, latitude]

        return feed.LocationFeature(
            type="Feature",
            geometry=feed.Geometry(type="Point", coordinates=coordinates),
            properties=feed.LocationProperties(
                name=name,
                provider=provider,
                appointments_available=appointments_available,
                appointments=[
                    feed.Appointment(
                        time="2021-04-15T09:00:00.000-07:00",
                        type="Pfizer",
                        vaccine_types=["pfizer"],
                        appointment_types=["all_doses"],
                    )
                    for _ in range(appointments)
                ],
            ),
        )

    return _make_feature


@pytest.fixture
def full_feature_blob():
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-122.21058, 37.82733]},
        "properties": {
            "id": 7384085,
            "url": "https://www.riteaid.com/pharmacy/covid-qualifier",
            "provider": "rite_aid",
            "provider_location_id": 5952,
            "provider_brand_name": "Rite Aid",
            "city": "Oakland",
            "name": "Rite Aid Pharmacy 5952",
            "state": "CA",
            "address": "1991 Mountain Boulevard",
            "postal_code": "94611",
            "appointments_last_fetched": "2021-04-15T16:00:00.000+00:00",
            "appointments_last_modified": "2021-04-15T15:58:00.000+00:00",
            "appointments_available": True,
            "appointments_available_all_doses": True,
            "appointments_available_2nd_dose_only": False,
            "appointments": [
                {
                    "time": "2021-04-16T09:00:00.000-07:00",
                    "type": "Moderna",
                    "vaccine_types": ["moderna"],
                    "appointment_types": ["all_doses"],
                },
            ],
        },
    }
