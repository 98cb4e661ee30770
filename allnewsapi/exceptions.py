from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    OPTIONS = "options"
    API = "api"
    TRANSPORT = "transport"


class AllNewsAPIError(Exception):
    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value if self.kind else None,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(AllNewsAPIError):
    kind = ErrorKind.CONFIGURATION


class InvalidOptionsError(AllNewsAPIError):
    kind = ErrorKind.OPTIONS


class NewsAPIError(AllNewsAPIError):
    """Normalized error for a failed request: an HTTP-style status code plus a message."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message, details={"status_code": status_code})

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(status_code={self.status_code!r}, message={self.message!r})"


class APIError(NewsAPIError):
    kind = ErrorKind.API


class TransportError(NewsAPIError):
    kind = ErrorKind.TRANSPORT

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(status_code, message)
