"""
carsxe package
--------------

Python client for the CarsXE vehicle data API.  Importing ``carsxe``
exposes the blocking :class:`CarsXE` client, its coroutine counterpart
:class:`AsyncCarsXE`, the endpoint table and the error hierarchy.
"""

from carsxe.client import AsyncCarsXE, CarsXE
from carsxe.core.config import BASE_URL, SOURCE
from carsxe.core.endpoints import ENDPOINTS
from carsxe.exceptions import (
    CarsXEError,
    HttpError,
    InvalidURL,
    JsonDecodingError,
    MissingRequiredParameter,
    NetworkError,
)
from carsxe.logging_config import configure_logging

__all__ = [
    "AsyncCarsXE",
    "CarsXE",
    "BASE_URL",
    "SOURCE",
    "ENDPOINTS",
    "CarsXEError",
    "HttpError",
    "InvalidURL",
    "JsonDecodingError",
    "MissingRequiredParameter",
    "NetworkError",
    "configure_logging",
]
