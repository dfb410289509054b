"""
logging_config.py
------------------

Shared logging utilities for the CarsXE client.  Messages go through
Python's built-in ``logging`` module under the ``carsxe`` logger and
are serialised as JSON so that they can be parsed downstream.

The library only attaches a ``NullHandler`` on import.  Applications
that want to see the client's log output call
:func:`configure_logging` once at start-up (or configure the
``carsxe`` logger themselves).

The ``log_call`` decorator records entry and exit of endpoint methods
at DEBUG level.  Arguments and results pass through ``_sanitize`` so
that the API key never ends up in the logs.
"""

from __future__ import annotations

import inspect
import json
import logging
import sys
from collections.abc import Mapping
from functools import wraps
from typing import Any, Callable, Dict, Optional

import httpx

logger = logging.getLogger("carsxe")
logger.addHandler(logging.NullHandler())

# Keys removed from anything we log, matched whole or as a "_"/"-" suffix.
_SENSITIVE_KEYWORDS = ("key", "apikey", "token", "password", "secret")

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stdout handler to the ``carsxe`` logger.

    :param level: logging level name; defaults to ``Settings.log_level``
    :return: the configured logger
    """
    from carsxe.core.config import get_settings

    level_name = (level or get_settings().log_level).upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level_name!r}; expected one of: {', '.join(LOG_LEVELS)}")
    if not any(getattr(h, "_carsxe_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        handler._carsxe_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(level_name)
    return logger


def _is_sensitive(name: Any) -> bool:
    lowered = str(name).lower()
    return any(
        lowered == keyword or lowered.endswith((f"_{keyword}", f"-{keyword}"))
        for keyword in _SENSITIVE_KEYWORDS
    )


def _sanitize(obj: Any) -> Any:
    """Recursively sanitise objects for logging.

    Mappings lose any entry named (or suffixed) key, token, password or
    secret.  Byte strings are summarised by length.  Objects that are
    not JSON serialisable are replaced by their ``str``.
    """
    if isinstance(obj, (bytes, bytearray)):
        return f"<binary {len(obj)} bytes>"
    if isinstance(obj, Mapping):
        clean: Dict[str, Any] = {}
        for k, v in obj.items():
            if _is_sensitive(k):
                continue
            clean[k] = _sanitize(v)
        return clean
    if isinstance(obj, (list, tuple)):
        return [_sanitize(i) for i in obj]
    try:
        return json.loads(json.dumps(obj))
    except (TypeError, ValueError):
        return str(obj)


def log_call(func: Callable[..., Any]) -> Callable[..., Any]:
    """Decorator to log entry and exit of endpoint methods.

    Emits a ``call_start`` event before the wrapped function runs and a
    ``call_end`` event after it returns.  The bound client (``self``) is
    not logged.  Coroutine functions are wrapped with an ``async``
    wrapper so the ``call_end`` event fires once the awaited result is
    available.

    Examples
    --------

    >>> @log_call
    ... def add(a, b):
    ...     return a + b
    """

    def _start(args: Any, kwargs: Any) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(json.dumps({
            "event": "call_start",
            "function": func.__name__,
            "args": _sanitize(args[1:]),
            "kwargs": _sanitize(kwargs),
        }))

    def _end(result: Any) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(json.dumps({
            "event": "call_end",
            "function": func.__name__,
            "result": _sanitize(result),
        }))

    if inspect.iscoroutinefunction(func):
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            _start(args, kwargs)
            result = await func(*args, **kwargs)
            _end(result)
            return result

        return async_wrapper

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        _start(args, kwargs)
        result = func(*args, **kwargs)
        _end(result)
        return result

    return wrapper


def redact_url(url: Any) -> str:
    """Return ``url`` as a string with the ``key`` query parameter masked."""
    parsed = httpx.URL(str(url))
    if "key" not in parsed.params:
        return str(parsed)
    return str(parsed.copy_set_param("key", "***"))


def log_http_request(method: str, url: Any, *, params: Dict[str, Any] | None = None,
                     json_body: Dict[str, Any] | None = None,
                     status: int | None = None, duration_ms: float | None = None) -> None:
    """Log an outbound HTTP request at DEBUG level.

    Called by the transport before and after each request.  The API key
    is masked in the URL and dropped from ``params``.

    Parameters
    ----------
    method : str
        The HTTP method (GET or POST).
    url : str or httpx.URL
        The URL being requested.
    params : dict, optional
        Query parameters.
    json_body : dict, optional
        JSON payload for POST requests.
    status : int, optional
        Response status code (log end only).
    duration_ms : float, optional
        Time taken in milliseconds (log end only).
    """
    if not logger.isEnabledFor(logging.DEBUG):
        return
    data: Dict[str, Any] = {
        "event": "http_request",
        "method": method,
        "url": redact_url(url),
    }
    if params:
        data["params"] = _sanitize(params)
    if json_body:
        data["json"] = _sanitize(json_body)
    if status is not None:
        data["status"] = status
    if duration_ms is not None:
        data["duration_ms"] = round(duration_ms, 2)
    logger.debug(json.dumps(data))
