"""Load and validate the search configuration file"""
import pathlib
from typing import List, Optional

import orjson
import pydantic
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .stages.common import ConfigError
from .utils.geo import LatLng
from .utils.log import getLogger
from .utils.validation import WORLD_BOUNDING_BOX

logger = getLogger(__file__)

YAML_SUFFIXES = {".yml", ".yaml"}


class FilterCriteria(BaseModel):
    """Optional filters applied to every feature before ranking.

    - provider: exact match after trimming and lower-casing, empty disables
    - max_distance_miles: upper bound on distance, zero or less disables
    """

    model_config = pydantic.ConfigDict(frozen=True)

    provider: str = ""
    max_distance_miles: float = 0.0


class SearchConfig(BaseModel):
    """
    {
        "api_urls": [str as feed url],
        "api_url": str as feed url,
        "add_uuid_parameter": bool,
        "search_latitude": float,
        "search_longitude": float,
        "num_nearest_locations_to_log": int,
        "filter_provider": str,
        "filter_distance_miles": float,
        "request_timeout_seconds": float,
    }
    """

    api_urls: List[str] = Field(default_factory=list)
    api_url: Optional[str] = None
    add_uuid_parameter: bool = False
    search_latitude: float
    search_longitude: float
    num_nearest_locations_to_log: int = Field(0, ge=0)
    filter_provider: str = ""
    filter_distance_miles: float = 0.0
    request_timeout_seconds: Optional[float] = Field(None, gt=0)

    @field_validator("filter_provider", mode="before")
    @classmethod
    def _null_provider(cls, value):
        return "" if value is None else value

    @model_validator(mode="after")
    def _check_search(self) -> "SearchConfig":
        if not self.feed_urls:
            raise ValueError("config must have at least one of api_url or api_urls")

        if not WORLD_BOUNDING_BOX.contains(self.search_point):
            raise ValueError(
                f"search point is out of range: lat={self.search_latitude}, "
                f"lng={self.search_longitude}"
            )

        return self

    @property
    def feed_urls(self) -> List[str]:
        """Every feed url to fetch, in order, without blanks"""
        urls = [self.api_url] if self.api_url else []
        urls.extend(url for url in self.api_urls if url)
        return urls

    @property
    def search_point(self) -> LatLng:
        return LatLng(latitude=self.search_latitude, longitude=self.search_longitude)

    @property
    def filter_criteria(self) -> FilterCriteria:
        return FilterCriteria(
            provider=self.filter_provider,
            max_distance_miles=self.filter_distance_miles,
        )


def _read_config_data(config_path: pathlib.Path) -> object:
    try:
        source = config_path.read_bytes()
    except OSError as e:
        raise ConfigError(f"Unable to read config file {config_path}: {e}") from e

    if config_path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(source)
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file {config_path} is not valid yaml: {e}") from e

    try:
        return orjson.loads(source)
    except orjson.JSONDecodeError as e:
        raise ConfigError(f"Config file {config_path} is not valid json: {e}") from e


def load_config(config_path: pathlib.Path) -> SearchConfig:
    """Read config file as json, or yaml when it has a .yml/.yaml suffix"""
    logger.info("Reading config file %s", config_path)

    config_data = _read_config_data(config_path)

    if not isinstance(config_data, dict):
        raise ConfigError(f"Config file {config_path} must contain an object")

    try:
        return SearchConfig.model_validate(config_data)
    except pydantic.ValidationError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e
