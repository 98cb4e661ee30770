from typing import Any, Callable, Dict, Mapping, Optional

import httpx
import structlog

from .exceptions import APIError, NewsAPIError, TransportError
from .schemas import ResponseFormat
from .utils.url_utils import redact_api_key


logger = structlog.get_logger(__name__)

ERROR_MESSAGES: Dict[int, str] = {
    400: "Bad Request - Your request is invalid",
    401: "Unauthorized - Invalid API Key or Account status is inactive",
    403: "Forbidden - Your account is not authorized to make that request",
    429: "Too Many Requests - You have reached your daily request limit. The next reset is at 00:00 UTC",
    500: "Internal Server Error - We had a problem with our server. Please try again later",
    503: "Service Unavailable - We're temporarily offline for maintenance. Please try again later",
}
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def get_error_message(status_code: int) -> str:
    return ERROR_MESSAGES.get(status_code, UNKNOWN_ERROR_MESSAGE)


def resolve_error_message(response: httpx.Response) -> str:
    """Pick the most specific message from an error response: detail.message, message, then the static table."""
    try:
        body = response.json()
    except ValueError:
        body = {}

    if not isinstance(body, dict):
        body = {}

    detail = body.get("detail")
    if isinstance(detail, dict) and detail.get("message"):
        return str(detail["message"])
    if body.get("message"):
        return str(body["message"])
    return get_error_message(response.status_code)


def _decode_json(response: httpx.Response) -> Any:
    return response.json()


def _decode_binary(response: httpx.Response) -> bytes:
    return response.content


def _decode_text(response: httpx.Response) -> str:
    return response.text


DECODERS: Dict[ResponseFormat, Callable[[httpx.Response], Any]] = {
    ResponseFormat.JSON: _decode_json,
    ResponseFormat.CSV: _decode_binary,
    ResponseFormat.XLSX: _decode_binary,
}


def resolve_decoder(response_format: Any) -> Callable[[httpx.Response], Any]:
    # No format means JSON; a format we don't know is returned as text since it may not be JSON.
    if not response_format:
        return DECODERS[ResponseFormat.JSON]
    try:
        return DECODERS[ResponseFormat(response_format)]
    except ValueError:
        return _decode_text


async def execute_request(
    url: str,
    params: Optional[Mapping[str, Any]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> Any:
    decode = resolve_decoder((params or {}).get("format"))

    try:
        safe_url = redact_api_key(url)
        logger.debug("news_request_started", url=safe_url)
        async with httpx.AsyncClient(transport=transport, follow_redirects=True) as client:
            response = await client.get(url)

            if not response.is_success:
                raise APIError(response.status_code, resolve_error_message(response))

            result = decode(response)
            logger.debug("news_request_completed", url=safe_url, status_code=response.status_code)
            return result
    except NewsAPIError:
        raise
    except Exception as e:
        raise TransportError(f"Request failed: {e}") from e
