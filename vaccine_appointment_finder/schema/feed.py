#!/usr/bin/env python3

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Geometry(BaseModel):
    """
    {
        "type": str e.g. Point,
        "coordinates": [longitude, latitude],
    }
    """

    type: Optional[str] = None
    coordinates: Optional[List[Optional[float]]] = None


class Appointment(BaseModel):
    """
    {
        "time": str as iso8601 datetime,
        "type": str e.g. 2nd Dose Only,
        "vaccine_types": [str e.g. pfizer],
        "appointment_types": [str e.g. all_doses],
    }
    """

    time: Optional[str] = None
    type: Optional[str] = None
    vaccine_types: Optional[List[str]] = None
    appointment_types: Optional[List[str]] = None


class LocationProperties(BaseModel):
    """
    {
        "url": str as booking url,
        "provider": str e.g. walgreens,
        "provider_location_id": str,
        "city": str,
        "name": str,
        "state": str as state initial e.g. CA,
        "address": str,
        "postal_code": str,
        "appointments_last_fetched": str as iso8601 datetime,
        "appointments_last_modified": str as iso8601 datetime,
        "appointments_available": bool,
        "appointments_available_all_doses": bool,
        "appointments_available_2nd_dose_only": bool,
        "appointments": [{...appointment...}],
    }
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    url: Optional[str] = None
    provider: Optional[str] = None
    provider_location_id: Optional[str] = None
    city: Optional[str] = None
    name: Optional[str] = None
    state: Optional[str] = None
    address: Optional[str] = None
    postal_code: Optional[str] = None
    appointments_last_fetched: Optional[str] = None
    appointments_last_modified: Optional[str] = None
    appointments_available: Optional[bool] = None
    appointments_available_all_doses: Optional[bool] = None
    appointments_available_2nd_dose_only: Optional[bool] = None
    appointments: Optional[List[Appointment]] = None


class LocationFeature(BaseModel):
    type: Optional[str] = None
    geometry: Optional[Geometry] = None
    properties: LocationProperties = Field(default_factory=LocationProperties)

    @field_validator("properties", mode="before")
    @classmethod
    def _null_properties(cls, value):
        # Some feeds send `"properties": null` for placeholder features
        return {} if value is None else value


class FeatureCollection(BaseModel):
    """Feed response body, a GeoJSON-like feature collection"""

    type: Optional[str] = None
    features: List[LocationFeature] = Field(default_factory=list)
