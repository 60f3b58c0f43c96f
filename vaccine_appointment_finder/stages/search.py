"""Filter, rank and select the nearest locations with appointments"""
import itertools
from logging import Logger
from typing import Iterable, Iterator, List, NamedTuple, Optional

from ..config import FilterCriteria
from ..schema.feed import FeatureCollection, LocationFeature
from ..utils.geo import LatLng, distance_miles
from ..utils.log import getLogger
from ..utils.normalize import normalize_provider
from ..utils.validation import WORLD_BOUNDING_BOX

logger = getLogger(__file__)

# GeoJSON orders coordinates as [longitude, latitude]
LONGITUDE_INDEX = 0
LATITUDE_INDEX = 1


class RankedLocation(NamedTuple):
    feature: LocationFeature
    distance_miles: float


class SearchResult(NamedTuple):
    """Locations that passed every filter, and the nearest of them"""

    survivor_count: int
    nearest: List[RankedLocation]


def iter_features(
    collections: Iterable[FeatureCollection],
) -> Iterator[LocationFeature]:
    """Chain features from every feed into one stream, keeping feed order"""
    return itertools.chain.from_iterable(
        collection.features for collection in collections
    )


def has_appointments(feature: LocationFeature) -> bool:
    """True if the feature lists an appointment slot or is flagged available"""
    props = feature.properties
    return bool(props.appointments) or bool(props.appointments_available)


def matches_provider(feature: LocationFeature, provider: str) -> bool:
    """Compare provider case and whitespace insensitively, empty matches all"""
    provider = normalize_provider(provider)

    if not provider:
        return True

    return normalize_provider(feature.properties.provider) == provider


def feature_lat_lng(
    feature: LocationFeature,
    logger: Logger = logger,
) -> Optional[LatLng]:
    """Get the point for a feature, or None if its geometry is unusable.

    Unusable geometry is logged as a warning and the feature skipped.
    """
    coordinates = feature.geometry.coordinates if feature.geometry else None

    if not coordinates or len(coordinates) != 2:
        logger.warning(
            "Feature %s has unknown coordinates length %d",
            feature.properties.name,
            len(coordinates) if coordinates else 0,
        )
        return None

    longitude = coordinates[LONGITUDE_INDEX]
    latitude = coordinates[LATITUDE_INDEX]

    if longitude is None or latitude is None:
        logger.warning(
            "Feature %s has null coordinates %s", feature.properties.name, coordinates
        )
        return None

    lat_lng = LatLng(latitude=latitude, longitude=longitude)

    if not WORLD_BOUNDING_BOX.contains(lat_lng):
        logger.warning(
            "Out of bounds lat/lng for %s (%s)",
            feature.properties.name,
            f"lat={latitude}, lng={longitude}",
        )
        return None

    return lat_lng


def rank_locations(
    features: Iterable[LocationFeature],
    search_point: LatLng,
    criteria: FilterCriteria,
    logger: Logger = logger,
) -> List[RankedLocation]:
    """Filter features and sort the survivors nearest first.

    Sorting is stable, so features at equal distance keep their feed order.
    """
    logger.info(
        "Filtering with provider = %r, max distance miles = %s",
        normalize_provider(criteria.provider),
        criteria.max_distance_miles,
    )

    ranked_locations = []

    for feature in features:
        if not has_appointments(feature):
            continue

        if not matches_provider(feature, criteria.provider):
            continue

        lat_lng = feature_lat_lng(feature, logger=logger)
        if not lat_lng:
            continue

        distance = distance_miles(search_point, lat_lng)

        if criteria.max_distance_miles > 0 and distance > criteria.max_distance_miles:
            continue

        ranked_locations.append(RankedLocation(feature, distance))

    return sorted(ranked_locations, key=lambda location: location.distance_miles)


def nearest_locations(
    ranked_locations: List[RankedLocation], count: int
) -> List[RankedLocation]:
    """First `count` ranked locations, or all of them if there are fewer"""
    if count < 0:
        raise ValueError(f"count of nearest locations must be >= 0, got {count}")

    return ranked_locations[:count]


def search_locations(
    collections: Iterable[FeatureCollection],
    search_point: LatLng,
    criteria: FilterCriteria,
    num_nearest: int,
    logger: Logger = logger,
) -> SearchResult:
    """Run filter, rank and select once over the features of every feed"""
    ranked_locations = rank_locations(
        iter_features(collections),
        search_point,
        criteria,
        logger=logger,
    )

    logger.info("%d locations with appointments passed filters", len(ranked_locations))

    return SearchResult(
        survivor_count=len(ranked_locations),
        nearest=nearest_locations(ranked_locations, num_nearest),
    )
