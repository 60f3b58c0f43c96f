"""Shared errors raised while running a search"""


class ConfigError(Exception):
    """Config file is unreadable, malformed or fails validation"""


class FeedError(Exception):
    """Fetching a feed failed, the whole run is aborted"""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{message} ({url})")


class FeedTransportError(FeedError):
    """Network failure or an unexpected http status from a feed"""


class FeedParseError(FeedError):
    """Feed body is not a valid feature collection"""
