"""
core/request.py
---------------

Builds the ``httpx.Request`` objects sent by the clients.

GET endpoints carry the whole parameter bag in the query string.  The
upload endpoints are POSTed with a JSON body holding only ``image``.
Either way ``key`` and ``source`` are appended to the query last, after
any caller-supplied values of the same name have been dropped.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from carsxe.core.config import BASE_URL, SOURCE
from carsxe.exceptions import InvalidURL

RESERVED_PARAMS = ("key", "source")


def build_url(path: str, params: Mapping[str, str], api_key: str, *, base_url: str = BASE_URL) -> httpx.URL:
    """Join ``base_url`` and ``path`` and encode ``params`` plus the auth tag."""
    query: Dict[str, str] = {k: v for k, v in params.items() if k not in RESERVED_PARAMS}
    query["key"] = api_key
    query["source"] = SOURCE
    raw = f"{base_url.rstrip('/')}/{path.lstrip('/')}"
    try:
        url = httpx.URL(raw, params=query)
    except httpx.InvalidURL as exc:
        raise InvalidURL(raw, exc) from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise InvalidURL(raw)
    return url


def build_request(
    method: str,
    path: str,
    api_key: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    base_url: str = BASE_URL,
) -> httpx.Request:
    """Return a ready-to-send request.

    For POST requests ``params`` is normally empty so the query string
    holds only ``key`` and ``source``; ``json_body`` is serialised with
    ``Content-Type: application/json``.
    """
    url = build_url(path, params or {}, api_key, base_url=base_url)
    headers = {"Accept": "application/json"}
    if method.upper() == "POST":
        headers["Content-Type"] = "application/json"
        return httpx.Request("POST", url, headers=headers, json=json_body or {})
    return httpx.Request(method.upper(), url, headers=headers)
