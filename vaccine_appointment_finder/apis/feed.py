"""Client code for calling vaccine location feeds"""
import urllib.parse
import uuid
from typing import List, Optional, Sequence

import orjson
import pydantic
import requests

from ..schema.feed import FeatureCollection
from ..stages.common import FeedParseError, FeedTransportError
from ..utils.log import getLogger

logger = getLogger(__file__)

EXPECTED_STATUS_CODE = 200

# Query parameter used to defeat upstream response caching
UUID_PARAMETER = "q"

# Response headers that describe how stale the upstream (cloudflare) cache is
CACHE_HEADERS = ("last-modified", "cf-cache-status", "cf-ray", "age")


def add_uuid_parameter(url: str) -> str:
    """Add a random query parameter to the url, keeping any existing query"""
    parts = urllib.parse.urlsplit(url)

    query = urllib.parse.parse_qsl(parts.query, keep_blank_values=True)
    query.append((UUID_PARAMETER, uuid.uuid4().hex))

    return urllib.parse.urlunsplit(parts._replace(query=urllib.parse.urlencode(query)))


def _get(
    session: requests.Session,
    url: str,
    timeout: Optional[float] = None,
) -> bytes:
    """GET url and return the body, raising unless the status is 200"""
    logger.info("Fetching feed %s", url)

    try:
        response = session.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FeedTransportError(url, f"Failed to call feed: {e}") from e

    for header in CACHE_HEADERS:
        logger.info("Response header %s = %s", header, response.headers.get(header))

    logger.info("Response status code = %d", response.status_code)

    if response.status_code != EXPECTED_STATUS_CODE:
        raise FeedTransportError(
            url,
            f"Got unexpected http status code {response.status_code} "
            f"expected {EXPECTED_STATUS_CODE}",
        )

    return response.content


def fetch_feature_collection(
    session: requests.Session,
    url: str,
    uniquify: bool = False,
    timeout: Optional[float] = None,
) -> FeatureCollection:
    """Fetch a single feed and parse it into a feature collection"""
    if uniquify:
        url = add_uuid_parameter(url)

    body = _get(session, url, timeout=timeout)

    try:
        data = orjson.loads(body)
    except orjson.JSONDecodeError as e:
        raise FeedParseError(url, f"Feed response is not valid json: {e}") from e

    try:
        collection = FeatureCollection.model_validate(data)
    except pydantic.ValidationError as e:
        raise FeedParseError(url, f"Feed response is not a feature collection: {e}") from e

    logger.info("Got %d features in feed response from %s", len(collection.features), url)

    return collection


def fetch_feature_collections(
    session: requests.Session,
    urls: Sequence[str],
    uniquify: bool = False,
    timeout: Optional[float] = None,
) -> List[FeatureCollection]:
    """Fetch every feed in order.

    Stops at the first feed that fails, no partial results are returned.
    """
    return [
        fetch_feature_collection(session, url, uniquify=uniquify, timeout=timeout)
        for url in urls
    ]
