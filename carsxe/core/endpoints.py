"""
core/endpoints.py
-----------------

Static description of every CarsXE endpoint: its path relative to the
base URL, HTTP verb and the parameters it takes.  The table is built
once at import time and exposed read-only.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

# Keys accepted by the image upload endpoints, in precedence order.
IMAGE_ALIASES: Tuple[str, ...] = ("upload_url", "image", "imageUrl")


class Endpoint(BaseModel):
    """Descriptor for one logical API operation."""

    model_config = ConfigDict(frozen=True)

    path: str
    method: Literal["GET", "POST"] = "GET"
    required: Tuple[str, ...] = ()
    optional: Tuple[str, ...] = ()


ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType({
    "specs": Endpoint(
        path="specs",
        required=("vin",),
        optional=("deepdata", "disableIntVINDecoding"),
    ),
    "market_value": Endpoint(path="v2/marketvalue", required=("vin",), optional=("state",)),
    "history": Endpoint(path="history", required=("vin",)),
    "recalls": Endpoint(path="v1/recalls", required=("vin",)),
    "international_vin_decoder": Endpoint(path="v1/international-vin-decoder", required=("vin",)),
    "plate_decoder": Endpoint(
        path="v2/platedecoder",
        required=("plate", "country"),
        optional=("state", "district"),
    ),
    "images": Endpoint(
        path="images",
        required=("make", "model"),
        optional=("year", "trim", "color", "transparent", "angle", "photoType", "size", "license"),
    ),
    "obd_codes_decoder": Endpoint(path="obdcodesdecoder", required=("code",)),
    # upload endpoints: validated against IMAGE_ALIASES, not ``required``
    "plate_image_recognition": Endpoint(path="platerecognition", method="POST"),
    "vin_ocr": Endpoint(path="v1/vinocr", method="POST"),
    "year_make_model": Endpoint(path="v1/ymm", required=("year", "make", "model"), optional=("trim",)),
    "lien_and_theft": Endpoint(path="v1/lien-theft", required=("vin",)),
})
