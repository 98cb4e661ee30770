"""
AllNewsAPI - async Python client for the AllNewsAPI news search service.
"""

from .client import ClientConfig, NewsAPI
from .config import Settings, get_settings
from .exceptions import (
    AllNewsAPIError,
    APIError,
    ConfigurationError,
    ErrorKind,
    InvalidOptionsError,
    NewsAPIError,
    TransportError,
)
from .logging_config import configure_logging
from .schemas import ResponseFormat, SearchOptions, SortBy

__version__ = "1.0.0"

__all__ = [
    "NewsAPI",
    "ClientConfig",
    "SearchOptions",
    "ResponseFormat",
    "SortBy",
    "AllNewsAPIError",
    "NewsAPIError",
    "APIError",
    "TransportError",
    "ConfigurationError",
    "InvalidOptionsError",
    "ErrorKind",
    "Settings",
    "get_settings",
    "configure_logging",
]
