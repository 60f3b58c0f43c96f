#!/usr/bin/env python

"""
Entry point for searching vaccine feeds for the nearest appointments
"""
import os
import pathlib
from typing import Callable, Optional

import click
import dotenv
import requests

from .apis import feed
from .config import SearchConfig, load_config
from .stages import report, search
from .stages.common import ConfigError, FeedError
from .utils.log import getLogger

logger = getLogger(__file__)

VERSION = "0.1.0"


def _env_default(name: str) -> Callable[[], Optional[str]]:
    """Default an option from the environment, unset means keep the config value"""
    return lambda: os.environ.get(name) or None


# --- Common Click options --- #


def _filter_provider_option() -> Callable:
    return click.option(
        "--filter-provider",
        "filter_provider",
        type=str,
        default=_env_default("FILTER_PROVIDER"),
        help="Only keep locations from this provider, overrides config",
    )


def _filter_distance_option() -> Callable:
    return click.option(
        "--filter-distance-miles",
        "filter_distance_miles",
        type=float,
        default=_env_default("FILTER_DISTANCE_MILES"),
        help="Only keep locations within this many miles, overrides config",
    )


def _num_nearest_option() -> Callable:
    return click.option(
        "--num-nearest",
        "num_nearest",
        type=click.IntRange(min=0),
        default=_env_default("NUM_NEAREST_LOCATIONS"),
        help="Number of nearest locations to log, overrides config",
    )


def _add_uuid_parameter_option() -> Callable:
    return click.option(
        "--add-uuid-parameter/--no-add-uuid-parameter",
        "add_uuid_parameter",
        type=bool,
        default=None,
        help="Add a random query parameter to each feed request, overrides config",
    )


def _apply_overrides(config: SearchConfig, **overrides) -> SearchConfig:
    """Replace config values with any option that was passed"""
    update = {key: value for key, value in overrides.items() if value is not None}

    if not update:
        return config

    return config.model_copy(update=update)


def run_search(config: SearchConfig) -> search.SearchResult:
    """Fetch every feed, then rank and report the nearest locations"""
    report.log_configuration(config)

    with requests.Session() as session:
        collections = feed.fetch_feature_collections(
            session,
            config.feed_urls,
            uniquify=config.add_uuid_parameter,
            timeout=config.request_timeout_seconds,
        )

    result = search.search_locations(
        collections,
        config.search_point,
        config.filter_criteria,
        config.num_nearest_locations_to_log,
    )

    report.log_search_result(result, config.num_nearest_locations_to_log)

    return result


@click.command()
@click.argument("config_file", type=str)
@_filter_provider_option()
@_filter_distance_option()
@_num_nearest_option()
@_add_uuid_parameter_option()
@click.version_option(VERSION)
def cli(
    config_file: str,
    filter_provider: Optional[str],
    filter_distance_miles: Optional[float],
    num_nearest: Optional[int],
    add_uuid_parameter: Optional[bool],
) -> None:
    """Log the nearest vaccine locations with appointments.

    CONFIG_FILE is a json or yaml file naming the feeds and search location.
    """
    try:
        config = load_config(pathlib.Path(config_file))
    except ConfigError as e:
        logger.error("Error reading configuration: %s", e)
        raise click.ClickException(str(e)) from e

    config = _apply_overrides(
        config,
        filter_provider=filter_provider,
        filter_distance_miles=filter_distance_miles,
        num_nearest_locations_to_log=num_nearest,
        add_uuid_parameter=add_uuid_parameter,
    )

    try:
        run_search(config)
    except FeedError as e:
        logger.error("Error fetching feed %s: %s", e.url, e)
        raise click.ClickException(str(e)) from e


def main() -> None:
    # Load .env before click resolves option defaults from the environment
    dotenv.load_dotenv()
    cli()


if __name__ == "__main__":
    main()
