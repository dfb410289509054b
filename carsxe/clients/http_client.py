"""
clients/http_client.py
----------------------

Thin transport wrappers around ``httpx``.  :class:`HTTPClient` performs
blocking requests with ``httpx.Client``; :class:`AsyncHTTPClient` does
the same with ``httpx.AsyncClient`` for use inside an event loop.

Both send a prebuilt :class:`httpx.Request` exactly once and return the
raw body of a 2xx response.  Transport failures (including the timeout
taken from :mod:`carsxe.core.config`) become
:class:`~carsxe.exceptions.NetworkError`; any other status becomes
:class:`~carsxe.exceptions.HttpError` with the body kept as-is.
Requests are never retried.
"""

from __future__ import annotations

import json
import time
from typing import Any, Dict, Optional

import httpx

from carsxe.core.config import get_settings
from carsxe.exceptions import HttpError, NetworkError
from carsxe.logging_config import log_http_request, logger, redact_url


def _request_body(request: httpx.Request) -> Optional[Dict[str, Any]]:
    if request.method != "POST" or not request.content:
        return None
    return json.loads(request.content)


def _check_response(request: httpx.Request, response: httpx.Response, duration_ms: float) -> bytes:
    log_http_request(request.method, request.url, status=response.status_code, duration_ms=duration_ms)
    if not response.is_success:
        logger.warning(json.dumps({
            "event": "http_error",
            "method": request.method,
            "url": redact_url(request.url),
            "status": response.status_code,
        }))
        raise HttpError(response.status_code, response.content)
    return response.content


def _network_error(request: httpx.Request, exc: httpx.TransportError) -> NetworkError:
    logger.error(json.dumps({
        "event": "network_error",
        "method": request.method,
        "url": redact_url(request.url),
        "detail": str(exc) or exc.__class__.__name__,
    }))
    return NetworkError(exc)


class HTTPClient:
    """Blocking transport.

    When ``client`` is given the caller keeps ownership of it and
    :meth:`close` leaves it open.
    """

    def __init__(self, client: Optional[httpx.Client] = None, timeout: Optional[float] = None) -> None:
        self.timeout = timeout if timeout is not None else get_settings().http_timeout
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=self.timeout)

    def close(self) -> None:
        """Close the underlying HTTPX client if this transport created it."""
        if self._owns_client:
            self._client.close()

    def send(self, request: httpx.Request) -> bytes:
        request.extensions["timeout"] = httpx.Timeout(self.timeout).as_dict()
        log_http_request(request.method, request.url, json_body=_request_body(request))
        start_time = time.time()
        try:
            response = self._client.send(request)
        except httpx.TransportError as exc:
            raise _network_error(request, exc) from exc
        return _check_response(request, response, (time.time() - start_time) * 1000)


class AsyncHTTPClient:
    """Non-blocking transport; same contract as :class:`HTTPClient`."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None, timeout: Optional[float] = None) -> None:
        self.timeout = timeout if timeout is not None else get_settings().http_timeout
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient(timeout=self.timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def send(self, request: httpx.Request) -> bytes:
        request.extensions["timeout"] = httpx.Timeout(self.timeout).as_dict()
        log_http_request(request.method, request.url, json_body=_request_body(request))
        start_time = time.time()
        try:
            response = await self._client.send(request)
        except httpx.TransportError as exc:
            raise _network_error(request, exc) from exc
        return _check_response(request, response, (time.time() - start_time) * 1000)
