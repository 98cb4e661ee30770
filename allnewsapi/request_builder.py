from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple

import httpx

from .utils.url_utils import API_KEY_PARAM


def _stringify(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def serialize_value(value: Any) -> str:
    """Render a parameter value for the query string; sequences become comma-separated lists."""
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item) for item in value)
    return _stringify(value)


def build_url(endpoint: str, api_key: str, params: Optional[Mapping[str, Any]] = None) -> str:
    query: List[Tuple[str, str]] = [(API_KEY_PARAM, api_key)]

    for key, value in (params or {}).items():
        if value is None or key == API_KEY_PARAM:
            continue
        query.append((key, serialize_value(value)))

    return str(httpx.URL(endpoint, params=query))
