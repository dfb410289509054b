"""Tests for request building, response parsing and the endpoint table."""

from __future__ import annotations

import json

import pytest

from carsxe.core.config import SOURCE
from carsxe.core.endpoints import ENDPOINTS, Endpoint
from carsxe.core.request import build_request, build_url
from carsxe.core.response import parse_response
from carsxe.exceptions import InvalidURL, JsonDecodingError
from tests.endpoint_cases import API_KEY, BASE, VIN


class TestBuildUrl:
    def test_appends_key_and_source_last(self) -> None:
        url = build_url("specs", {"vin": VIN, "deepdata": "1"}, API_KEY)
        assert url.host == "api.carsxe.com"
        assert url.path == "/specs"
        assert url.params.multi_items() == [
            ("vin", VIN),
            ("deepdata", "1"),
            ("key", API_KEY),
            ("source", SOURCE),
        ]

    def test_caller_cannot_override_key_or_source(self) -> None:
        url = build_url("history", {"vin": VIN, "key": "stolen", "source": "other"}, API_KEY)
        assert url.params.get_list("key") == [API_KEY]
        assert url.params.get_list("source") == [SOURCE]

    def test_values_are_encoded(self) -> None:
        url = build_url("images", {"make": "Land Rover", "model": "Range Rover"}, API_KEY)
        assert url.params["make"] == "Land Rover"
        assert url.params["model"] == "Range Rover"

    @pytest.mark.parametrize("base_url", ["not a url", "ftp://api.carsxe.com", "https://"])
    def test_malformed_base_raises_invalid_url(self, base_url: str) -> None:
        with pytest.raises(InvalidURL):
            build_url("specs", {"vin": VIN}, API_KEY, base_url=base_url)


class TestBuildRequest:
    def test_get_has_no_body(self) -> None:
        request = build_request("GET", "v1/recalls", API_KEY, params={"vin": VIN})
        assert request.method == "GET"
        assert request.content == b""
        assert str(request.url).startswith(f"{BASE}/v1/recalls?")

    def test_post_sends_only_image_in_body(self) -> None:
        request = build_request("POST", "v1/vinocr", API_KEY, json_body={"image": "https://x/y.jpg"})
        assert request.method == "POST"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"image": "https://x/y.jpg"}
        assert request.url.params.multi_items() == [("key", API_KEY), ("source", SOURCE)]


class TestParseResponse:
    def test_object_passes_through(self) -> None:
        assert parse_response(b'{"success": true, "input": {"vin": "X"}}') == {
            "success": True,
            "input": {"vin": "X"},
        }

    def test_array_is_wrapped_in_data(self) -> None:
        assert parse_response(b"[1,2,3]") == {"data": [1, 2, 3]}

    @pytest.mark.parametrize(
        "body, expected",
        [(b'"ok"', "ok"), (b"42", 42), (b"1.5", 1.5), (b"true", True), (b"null", None)],
    )
    def test_scalar_is_wrapped_in_value(self, body: bytes, expected: object) -> None:
        assert parse_response(body) == {"value": expected}

    @pytest.mark.parametrize("body", [b"", b"  \n"])
    def test_empty_body_raises(self, body: bytes) -> None:
        with pytest.raises(JsonDecodingError):
            parse_response(body)

    @pytest.mark.parametrize("body", [b"{not json", b"<html>oops</html>", b"\xff\xfe"])
    def test_malformed_json_raises(self, body: bytes) -> None:
        with pytest.raises(JsonDecodingError) as exc_info:
            parse_response(body)
        assert isinstance(exc_info.value.cause, ValueError)
        assert exc_info.value.__cause__ is exc_info.value.cause


class TestEndpointTable:
    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            ENDPOINTS["specs"] = Endpoint(path="other")  # type: ignore[index]

    def test_descriptors_are_frozen(self) -> None:
        with pytest.raises(Exception):
            ENDPOINTS["specs"].path = "other"  # type: ignore[misc]

    def test_upload_endpoints_are_post(self) -> None:
        posts = {name for name, endpoint in ENDPOINTS.items() if endpoint.method == "POST"}
        assert posts == {"plate_image_recognition", "vin_ocr"}
