from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, ValidationError

from .exceptions import InvalidOptionsError
from .utils.date_utils import to_iso_timestamp


class ResponseFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    XLSX = "xlsx"


class SortBy(str, Enum):
    PUBLISHED_AT = "publishedAt"
    RELEVANCE = "relevance"


DateValue = Union[datetime, date, str]
# strict: scalars are sent exactly as given, 1 stays 1 and "yes" stays "yes"
Scalar = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
ScalarOrList = Union[Scalar, List[Scalar]]

DATE_PARAMS = ("startDate", "endDate")


class SearchOptions(BaseModel):
    """Query parameters accepted by both the search and headlines endpoints.

    Unknown parameters are kept and sent as-is; the server decides what they mean.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    q: Optional[Scalar] = Field(default=None, description="Keywords to search for")
    start_date: Optional[DateValue] = Field(default=None, alias="startDate", description="Start date (YYYY-MM-DD or date value)")
    end_date: Optional[DateValue] = Field(default=None, alias="endDate", description="End date (YYYY-MM-DD or date value)")
    content: Optional[Scalar] = Field(default=None, description="Include the full article content")
    lang: Optional[ScalarOrList] = Field(default=None, description="Language(s) to filter by")
    country: Optional[ScalarOrList] = Field(default=None, description="Country/countries to filter by")
    region: Optional[ScalarOrList] = Field(default=None, description="Region(s) to filter by")
    category: Optional[ScalarOrList] = Field(default=None, description="Category/categories to filter by")
    max: Optional[Scalar] = Field(default=None, description="Maximum number of results (1-100)")
    attributes: Optional[ScalarOrList] = Field(default=None, description="Attributes to search in (title, description, content)")
    page: Optional[Scalar] = Field(default=None, description="Page number")
    sortby: Optional[Scalar] = Field(default=None, description="publishedAt or relevance")
    publisher: Optional[ScalarOrList] = Field(default=None, description="Publisher(s) to filter by")
    format: Optional[Scalar] = Field(default=None, description="Response format (json, csv, xlsx)")

    def to_query_params(self) -> Dict[str, Any]:
        params = self.model_dump(by_alias=True, exclude_none=True)
        for key in DATE_PARAMS:
            value = params.get(key)
            if isinstance(value, date):
                params[key] = to_iso_timestamp(value)
        return params


_FIELD_ALIASES = {
    name: field.alias
    for name, field in SearchOptions.model_fields.items()
    if field.alias
}


def coerce_options(
    options: Optional[Union[SearchOptions, Mapping[str, Any]]] = None,
    **params: Any
) -> SearchOptions:
    """Merge an options record or mapping with keyword overrides into a validated SearchOptions."""
    if isinstance(options, SearchOptions) and not params:
        return options

    data: Dict[str, Any] = {}
    if isinstance(options, SearchOptions):
        data.update(options.model_dump(by_alias=True, exclude_unset=True))
    elif isinstance(options, Mapping):
        data.update(options)
    elif options is not None:
        raise InvalidOptionsError(
            f"Options must be a mapping or SearchOptions, got {type(options).__name__}"
        )

    for key, value in params.items():
        data[_FIELD_ALIASES.get(key, key)] = value

    # snake_case keys inside a plain mapping collide with their aliases otherwise
    for name, alias in _FIELD_ALIASES.items():
        if name in data:
            data.setdefault(alias, data.pop(name))

    try:
        return SearchOptions.model_validate(data)
    except ValidationError as e:
        raise InvalidOptionsError(
            f"Invalid search options: {e}",
            details={"errors": e.errors(include_url=False)}
        ) from e
