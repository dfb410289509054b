"""
core/validation.py
------------------

Parameter validation applied before any request is sent.

Parameter bags are normalised to ``Dict[str, str]`` first: ``None``
values are dropped and booleans become ``"true"``/``"false"``.  Checks
stop at the first missing parameter.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from carsxe.core.endpoints import IMAGE_ALIASES
from carsxe.exceptions import MissingRequiredParameter

DEFAULT_COUNTRY = "US"
PAKISTAN_COUNTRIES = {"pk", "pakistan"}


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def merge_params(params: Optional[Mapping[str, Any]], extra: Mapping[str, Any]) -> Dict[str, str]:
    """Combine a mapping and keyword arguments into one string bag.

    Keyword arguments override entries of ``params`` with the same name.
    """
    merged: Dict[str, Any] = dict(params or {})
    merged.update(extra)
    return {str(k): _stringify(v) for k, v in merged.items() if v is not None}


def is_blank(params: Mapping[str, str], name: str) -> bool:
    return not params.get(name, "").strip()


def validate_required(params: Mapping[str, str], required: Iterable[str]) -> None:
    """Raise :class:`MissingRequiredParameter` for the first absent or blank name."""
    for name in required:
        if is_blank(params, name):
            raise MissingRequiredParameter(name)


def prepare_plate_params(params: Mapping[str, str]) -> Dict[str, str]:
    """Apply the plate decoder rules and return the bag to send.

    ``country`` defaults to ``US``.  Pakistani plates need both ``state``
    and ``district``; every other country needs ``state``.
    """
    prepared = dict(params)
    if is_blank(prepared, "country"):
        prepared["country"] = DEFAULT_COUNTRY
    validate_required(prepared, ("plate", "country"))

    country = prepared["country"].strip().lower()
    if country in PAKISTAN_COUNTRIES:
        if is_blank(prepared, "state"):
            raise MissingRequiredParameter(
                "state", "Missing required parameter: state (required for Pakistan plates)"
            )
        if is_blank(prepared, "district"):
            raise MissingRequiredParameter(
                "district", "Missing required parameter: district (required for Pakistan plates)"
            )
    elif is_blank(prepared, "state"):
        raise MissingRequiredParameter("state")
    return prepared


def select_image(params: Mapping[str, str]) -> str:
    """Return the image reference for the upload endpoints.

    The first non-blank value among ``upload_url``, ``image`` and
    ``imageUrl`` wins.
    """
    for alias in IMAGE_ALIASES:
        if not is_blank(params, alias):
            return params[alias]
    raise MissingRequiredParameter(
        IMAGE_ALIASES[0],
        "Missing required parameter: upload_url (or one of: image, imageUrl)",
    )
