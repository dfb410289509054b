"""
exceptions.py
-------------

Errors raised by the CarsXE client.  Every failure of an endpoint call
surfaces as exactly one subclass of :class:`CarsXEError`; none of them
are retried.  Validation errors are raised before any network I/O.
"""

from __future__ import annotations

from typing import Optional


class CarsXEError(Exception):
    """Base class for all client errors."""


class InvalidURL(CarsXEError):
    """The base URL, path and query could not form a well-formed URL."""

    def __init__(self, url: str, cause: Optional[BaseException] = None) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Invalid URL: {url}")


class MissingRequiredParameter(CarsXEError):
    """A required parameter was absent or blank."""

    def __init__(self, name: str, message: Optional[str] = None) -> None:
        self.name = name
        super().__init__(message or f"Missing required parameter: {name}")


class NetworkError(CarsXEError):
    """The request could not be completed (connection failure, timeout...)."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Network error: {cause}")


class HttpError(CarsXEError):
    """The API answered with a non-2xx status code."""

    def __init__(self, status_code: int, body: bytes = b"") -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"HTTP error: status code {status_code}")

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")


class JsonDecodingError(CarsXEError):
    """A 2xx response body was not valid JSON."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"JSON decoding error: {cause}")
