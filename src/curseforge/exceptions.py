"""
exceptions.py

Centralized custom exception types for the library.

Every failure surfaced by the clients is an instance of `CurseForgeError`:
transport problems, non-success HTTP status codes, undecodable bodies and
payloads that do not match the typed model. Each error carries an optional
numeric code and optional raw response object for easier debugging.
"""

from typing import Any, List, Optional, Sequence, Union


class CurseForgeError(Exception):
    """
    Base class for all library-specific exceptions.

    Attributes
    ----------
    message: str
        Human readable error message.
    code: Optional[int]
        HTTP status code if applicable.
    response: Optional[Any]
        Raw response object (httpx.Response) for debugging.
    """

    def __init__(self, message: str, code: Optional[int] = None, response: Optional[Any] = None):
        self.message = message
        self.code = code
        self.response = response
        # call base with a string representation so exceptions print nicely
        super().__init__(self.__str__())

    def __str__(self) -> str:
        base = f"[CurseForgeError] {self.message}"
        if self.code is not None:
            base += f" (code={self.code})"
        return base

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} code={self.code!r} message={self.message!r}>"


class BadRequestError(CurseForgeError):
    """HTTP 400 - Client sent invalid data (bad parameters / payload)."""


class UnauthorizedError(CurseForgeError):
    """HTTP 401 - Missing or invalid API credentials (x-api-key)."""


class ForbiddenError(CurseForgeError):
    """HTTP 403 - Authenticated but not allowed to access resource."""


class NotFoundError(CurseForgeError):
    """HTTP 404 - Requested resource not found."""


class RateLimitError(CurseForgeError):
    """HTTP 429 - Rate limit exceeded."""


class ServerError(CurseForgeError):
    """5xx - Server-side error from the API."""


class NetworkError(CurseForgeError):
    """Network / transport related error (timeouts, connection failures)."""


class ConfigurationError(CurseForgeError):
    """Raised when client/configuration is invalid or incomplete."""


class InvalidResponseError(CurseForgeError):
    """
    Raised when the API returns a body that cannot be decoded as JSON.

    The undecoded bytes are kept on `body` so callers can inspect what the
    server actually sent.
    """

    def __init__(
        self,
        message: str,
        code: Optional[int] = None,
        response: Optional[Any] = None,
        body: Optional[bytes] = None,
    ):
        self.body = body
        super().__init__(message, code, response)


class DataValidationError(InvalidResponseError):
    """
    Raised when a JSON payload does not match the expected shape.

    `path` lists the keys and list indexes leading to the offending value,
    outermost first, e.g. ``["data", "latestFiles", 0, "fileStatus"]``.
    """

    def __init__(
        self,
        message: str,
        path: Optional[Sequence[Union[str, int]]] = None,
        code: Optional[int] = None,
        response: Optional[Any] = None,
        body: Optional[bytes] = None,
    ):
        self.reason = message
        self.path: List[Union[str, int]] = list(path or [])
        super().__init__(message, code, response, body)

    @property
    def location(self) -> str:
        """Dotted rendering of `path`, ``latestFiles[0].fileStatus`` style."""
        out = ""
        for part in self.path:
            if isinstance(part, int):
                out += f"[{part}]"
            else:
                out += f".{part}" if out else str(part)
        return out

    def __str__(self) -> str:
        loc = self.location
        base = f"[CurseForgeError] {self.reason}"
        if loc:
            base += f" at {loc!r}"
        if self.code is not None:
            base += f" (code={self.code})"
        return base

    def with_prefix(self, part: Union[str, int]) -> "DataValidationError":
        """Return a copy of this error whose path starts with `part`."""
        err = DataValidationError(self.reason, [part, *self.path], self.code, self.response, self.body)
        err.__cause__ = self.__cause__
        return err


def map_http_status(status_code: int, message: str = "", response: Optional[Any] = None) -> CurseForgeError:
    """
    Convert an HTTP status code + message into an appropriate CurseForgeError instance.

    Parameters
    ----------
    status_code : int
        HTTP status code returned by the server.
    message : str
        Response text or short explanation.
    response : Any
        Raw response object (optional) to attach to the exception instance.

    Returns
    -------
    CurseForgeError
        An instance of a subclass representing the status.
    """
    if status_code == 400:
        return BadRequestError(message or "Bad Request", status_code, response)
    if status_code == 401:
        return UnauthorizedError(message or "Unauthorized", status_code, response)
    if status_code == 403:
        return ForbiddenError(message or "Forbidden", status_code, response)
    if status_code == 404:
        return NotFoundError(message or "Not Found", status_code, response)
    if status_code == 429:
        return RateLimitError(message or "Rate Limited", status_code, response)
    if 500 <= status_code <= 599:
        return ServerError(message or "Server Error", status_code, response)
    # fallback
    return CurseForgeError(message or f"HTTP {status_code}", status_code, response)
