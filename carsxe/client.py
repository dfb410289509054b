"""
client.py
---------

Public CarsXE clients.

:class:`CarsXE` exposes one blocking method per API endpoint and
:class:`AsyncCarsXE` the same methods as coroutines.  Every method
accepts the parameter bag as a mapping, as keyword arguments or both::

    with CarsXE("my-key") as client:
        client.specs(vin="WBAFR7C57CC811956")
        client.plate_decoder({"plate": "7XER187", "state": "CA"})

and returns the JSON response as a dict (arrays are wrapped under
``"data"``, scalars under ``"value"``).  Parameters are validated before
anything is sent; see :mod:`carsxe.exceptions` for the error contract.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

import httpx

from carsxe.clients.http_client import AsyncHTTPClient, HTTPClient
from carsxe.core.config import BASE_URL, get_settings
from carsxe.core.endpoints import ENDPOINTS
from carsxe.core.request import build_request
from carsxe.core.response import JSONObject, parse_response
from carsxe.core.validation import merge_params, prepare_plate_params, select_image, validate_required
from carsxe.exceptions import MissingRequiredParameter
from carsxe.logging_config import log_call

Params = Optional[Mapping[str, Any]]


class _CarsXEBase:
    """Validation and request building shared by both clients."""

    def __init__(self, api_key: Optional[str] = None) -> None:
        key = api_key if api_key is not None else get_settings().api_key
        if not key or not key.strip():
            raise MissingRequiredParameter("api_key")
        self._api_key = key

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return BASE_URL

    def _prepare(self, name: str, params: Params, extra: Dict[str, Any]) -> httpx.Request:
        endpoint = ENDPOINTS[name]
        bag = merge_params(params, extra)
        if endpoint.method == "POST":
            image = select_image(bag)
            return build_request("POST", endpoint.path, self._api_key, json_body={"image": image})
        if name == "plate_decoder":
            bag = prepare_plate_params(bag)
        else:
            validate_required(bag, endpoint.required)
        return build_request("GET", endpoint.path, self._api_key, params=bag)


class CarsXE(_CarsXEBase):
    """Blocking CarsXE client.

    :param api_key: CarsXE API key; falls back to ``CARSXE_API_KEY``
    :param timeout: request timeout in seconds; falls back to ``CARSXE_HTTP_TIMEOUT``
    :param http_client: optional ``httpx.Client`` to send requests with.
        The caller remains responsible for closing it.
    :raises MissingRequiredParameter: if no API key is available
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        super().__init__(api_key)
        self._http = HTTPClient(http_client, timeout=timeout)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "CarsXE":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _call(self, name: str, params: Params, extra: Dict[str, Any]) -> JSONObject:
        request = self._prepare(name, params, extra)
        return parse_response(self._http.send(request))

    @log_call
    def specs(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Decode a VIN into vehicle specifications.

        Required: ``vin``.  Optional: ``deepdata``, ``disableIntVINDecoding``.
        """
        return self._call("specs", params, kwargs)

    @log_call
    def market_value(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Estimated market value. Required: ``vin``. Optional: ``state``."""
        return self._call("market_value", params, kwargs)

    @log_call
    def history(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Vehicle history report. Required: ``vin``."""
        return self._call("history", params, kwargs)

    @log_call
    def recalls(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return self._call("recalls", params, kwargs)

    @log_call
    def international_vin_decoder(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return self._call("international_vin_decoder", params, kwargs)

    @log_call
    def plate_decoder(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Decode a licence plate.

        Required: ``plate``; ``country`` defaults to ``US``.  ``state`` is
        required for every country; Pakistan (``PK``) also needs
        ``district``.
        """
        return self._call("plate_decoder", params, kwargs)

    @log_call
    def images(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Vehicle images.

        Required: ``make``, ``model``.  Optional: ``year``, ``trim``,
        ``color``, ``transparent``, ``angle``, ``photoType``, ``size``,
        ``license``.
        """
        return self._call("images", params, kwargs)

    @log_call
    def obd_codes_decoder(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Explain an OBD diagnostic code. Required: ``code``."""
        return self._call("obd_codes_decoder", params, kwargs)

    @log_call
    def plate_image_recognition(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Read the licence plate in an image.

        The image URL is taken from ``upload_url``, ``image`` or
        ``imageUrl``, in that order.
        """
        return self._call("plate_image_recognition", params, kwargs)

    @log_call
    def vin_ocr(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Extract a VIN from an image; same image keys as :meth:`plate_image_recognition`."""
        return self._call("vin_ocr", params, kwargs)

    @log_call
    def year_make_model(self, params: Params = None, **kwargs: Any) -> JSONObject:
        """Search by ``year``, ``make`` and ``model`` (all required). Optional: ``trim``."""
        return self._call("year_make_model", params, kwargs)

    @log_call
    def lien_and_theft(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return self._call("lien_and_theft", params, kwargs)


class AsyncCarsXE(_CarsXEBase):
    """Coroutine-based CarsXE client.

    Same parameters and error contract as :class:`CarsXE`, but
    ``http_client`` is an ``httpx.AsyncClient`` and every endpoint method
    must be awaited.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        super().__init__(api_key)
        self._http = AsyncHTTPClient(http_client, timeout=timeout)

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "AsyncCarsXE":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def _call(self, name: str, params: Params, extra: Dict[str, Any]) -> JSONObject:
        request = self._prepare(name, params, extra)
        return parse_response(await self._http.send(request))

    @log_call
    async def specs(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("specs", params, kwargs)

    @log_call
    async def market_value(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("market_value", params, kwargs)

    @log_call
    async def history(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("history", params, kwargs)

    @log_call
    async def recalls(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("recalls", params, kwargs)

    @log_call
    async def international_vin_decoder(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("international_vin_decoder", params, kwargs)

    @log_call
    async def plate_decoder(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("plate_decoder", params, kwargs)

    @log_call
    async def images(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("images", params, kwargs)

    @log_call
    async def obd_codes_decoder(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("obd_codes_decoder", params, kwargs)

    @log_call
    async def plate_image_recognition(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("plate_image_recognition", params, kwargs)

    @log_call
    async def vin_ocr(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("vin_ocr", params, kwargs)

    @log_call
    async def year_make_model(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("year_make_model", params, kwargs)

    @log_call
    async def lien_and_theft(self, params: Params = None, **kwargs: Any) -> JSONObject:
        return await self._call("lien_and_theft", params, kwargs)
