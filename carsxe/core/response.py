"""
core/response.py
----------------

Turns a successful response body into the mapping returned to callers.
JSON objects pass through; arrays are wrapped under ``"data"`` and
scalars under ``"value"``.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Union

from carsxe.exceptions import JsonDecodingError

# Any value json.loads can produce.
JSONValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]
JSONObject = Dict[str, JSONValue]


def normalize(payload: JSONValue) -> JSONObject:
    if isinstance(payload, dict):
        return payload
    if isinstance(payload, list):
        return {"data": payload}
    return {"value": payload}


def parse_response(body: bytes) -> JSONObject:
    """Decode ``body`` as JSON and normalise its top-level shape.

    :raises JsonDecodingError: if ``body`` is not valid JSON
    """
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise JsonDecodingError(exc) from exc
    return normalize(payload)
