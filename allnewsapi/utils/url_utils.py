import httpx

API_KEY_PARAM = "apikey"
REDACTED = "***"


def redact_api_key(url: str) -> str:
    parsed = httpx.URL(url)
    if API_KEY_PARAM not in parsed.params:
        return url
    return str(parsed.copy_set_param(API_KEY_PARAM, REDACTED))
