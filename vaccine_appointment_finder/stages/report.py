"""Log the configuration and results of a search"""
from logging import Logger

from ..config import SearchConfig
from ..utils.log import getLogger
from .search import RankedLocation, SearchResult

logger = getLogger(__file__)


def log_configuration(config: SearchConfig, logger: Logger = logger) -> None:
    logger.info("Feed urls: %s", ", ".join(config.feed_urls))
    logger.info("Add uuid parameter: %s", config.add_uuid_parameter)
    logger.info(
        "Search location: lat=%s, lng=%s",
        config.search_latitude,
        config.search_longitude,
    )
    logger.info("Nearest locations to log: %d", config.num_nearest_locations_to_log)
    logger.info("Filter provider: %r", config.filter_provider)
    logger.info("Filter distance miles: %s", config.filter_distance_miles)

    if config.request_timeout_seconds:
        logger.info("Request timeout seconds: %s", config.request_timeout_seconds)


def format_location(rank: int, location: RankedLocation) -> str:
    """Multi-line description of a ranked location for the log"""
    props = location.feature.properties
    appointment_count = len(props.appointments) if props.appointments else 0

    return "\n".join(
        [
            f"#{rank} {props.name} ({location.distance_miles:.2f} miles)",
            f"  provider: {props.provider}",
            f"  address: {props.address}, {props.city}, {props.state} {props.postal_code}",
            f"  url: {props.url}",
            f"  appointments available: {props.appointments_available}",
            f"  appointment slots: {appointment_count}",
            f"  appointments last fetched: {props.appointments_last_fetched}",
        ]
    )


def log_search_result(
    result: SearchResult, num_nearest: int, logger: Logger = logger
) -> None:
    logger.info(
        "Nearest %d of %d locations with appointments passing filters:",
        num_nearest,
        result.survivor_count,
    )

    for rank, location in enumerate(result.nearest, start=1):
        logger.info("Available location:\n%s", format_location(rank, location))
