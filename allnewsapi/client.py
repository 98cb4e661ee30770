"""
AllNewsAPI client.

Thin async wrapper over the search and headlines endpoints:

    api = NewsAPI("your-api-key")
    results = await api.search(q="google", lang=["en", "fr"])
"""

from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel, ConfigDict

from .config import DEFAULT_BASE_URL, Settings, get_settings
from .exceptions import ConfigurationError, TransportError
from .request_builder import build_url
from .request_executor import execute_request
from .schemas import SearchOptions, coerce_options

SEARCH_PATH = "/v1/search"
HEADLINES_PATH = "/v1/headlines"

Options = Optional[Union[SearchOptions, Mapping[str, Any]]]


class ClientConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    api_key: str
    base_url: str = DEFAULT_BASE_URL

    @property
    def search_endpoint(self) -> str:
        return f"{self.base_url}{SEARCH_PATH}"

    @property
    def headlines_endpoint(self) -> str:
        return f"{self.base_url}{HEADLINES_PATH}"


class NewsAPI:
    """Client for the AllNewsAPI search and headlines endpoints.

    Instances are immutable; every call builds its own URL and opens its own
    HTTP connection, so one client can be shared between concurrent tasks.
    """

    __slots__ = ("_config", "_transport")

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        if not api_key or not isinstance(api_key, str):
            raise ConfigurationError("API key is required")

        object.__setattr__(self, "_config", ClientConfig(api_key=api_key, base_url=base_url or DEFAULT_BASE_URL))
        object.__setattr__(self, "_transport", transport)

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "NewsAPI":
        settings = settings or get_settings()
        return cls(settings.api_key, settings.base_url, transport=transport)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def api_key(self) -> str:
        return self._config.api_key

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def search_endpoint(self) -> str:
        return self._config.search_endpoint

    @property
    def headlines_endpoint(self) -> str:
        return self._config.headlines_endpoint

    async def search(self, options: Options = None, **params: Any) -> Any:
        """
        Search for news articles.

        Args:
            options: SearchOptions or a mapping of query parameters
                (q, startDate, endDate, content, lang, country, region, category,
                max, attributes, page, sortby, publisher, format)
            **params: Query parameters given as keywords; they override ``options``

        Returns:
            Decoded JSON for the json format (the default), bytes for csv/xlsx,
            text for any other format

        Raises:
            InvalidOptionsError: options failed validation, nothing was sent
            NewsAPIError: the request failed
        """
        return await self._make_request(self.search_endpoint, options, params)

    async def headlines(self, options: Options = None, **params: Any) -> Any:
        """Get top headlines. Takes the same options as :meth:`search`."""
        return await self._make_request(self.headlines_endpoint, options, params)

    async def _make_request(self, endpoint: str, options: Options, params: Mapping[str, Any]) -> Any:
        query = coerce_options(options, **params).to_query_params()
        try:
            url = build_url(endpoint, self.api_key, query)
        except httpx.InvalidURL as e:
            raise TransportError(f"Request failed: {e}") from e
        return await execute_request(url, query, transport=self._transport)
