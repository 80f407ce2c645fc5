"""Tests for the Google geocoder with a mocked HTTP session."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from homestimate.exceptions import GeocodingError
from homestimate.services.geocoder import (
    GEOCODE_URL,
    MISSING_POSTAL_CODE_ERROR,
    NO_RESULTS_ERROR,
    POSTAL_CODE_MISMATCH_ERROR,
    GoogleGeocoder,
)

# ---------------------------------------------------------------------------
# Fixtures / helpers
# ---------------------------------------------------------------------------


def _google_result(postal_code: str | None = "M5V 2T6") -> dict[str, Any]:
    components: list[dict[str, Any]] = [
        {"long_name": "290", "short_name": "290", "types": ["street_number"]},
        {"long_name": "Toronto", "short_name": "Toronto", "types": ["locality", "political"]},
        {
            "long_name": "Ontario",
            "short_name": "ON",
            "types": ["administrative_area_level_1", "political"],
        },
    ]
    if postal_code is not None:
        components.append(
            {"long_name": postal_code, "short_name": postal_code, "types": ["postal_code"]}
        )
    return {
        "formatted_address": "290 Bremner Blvd, Toronto, ON M5V 2T6, Canada",
        "geometry": {"location": {"lat": 43.6426, "lng": -79.3871}},
        "address_components": components,
    }


def _session(payload: Any) -> MagicMock:
    response = MagicMock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    session = MagicMock(spec=requests.Session)
    session.get.return_value = response
    return session


def _sent_params(session: MagicMock) -> dict[str, str]:
    return session.get.call_args.kwargs["params"]


@pytest.fixture()
def ok_session() -> MagicMock:
    return _session({"status": "OK", "results": [_google_result()]})


# ---------------------------------------------------------------------------
# Query construction
# ---------------------------------------------------------------------------


class TestQuery:
    def test_postal_code_query_gets_region_hint(self, ok_session: MagicMock) -> None:
        geocoder = GoogleGeocoder(api_key="test-key", session=ok_session)
        geocoder.validate_address("m5v 2t6")

        params = _sent_params(ok_session)
        assert params["address"] == "M5V2T6, Ontario, Canada"
        assert params["components"] == "country:CA"
        assert params["key"] == "test-key"

    def test_address_query_uppercased(self, ok_session: MagicMock) -> None:
        geocoder = GoogleGeocoder(api_key="k", session=ok_session)
        geocoder.validate_address("  290 Bremner Blvd, Toronto ")
        assert _sent_params(ok_session)["address"] == "290 BREMNER BLVD, TORONTO, Canada"

    def test_request_target_and_timeout(self, ok_session: MagicMock) -> None:
        geocoder = GoogleGeocoder(api_key="k", session=ok_session, timeout=3.5)
        geocoder.validate_address("M5V2T6")
        args, kwargs = ok_session.get.call_args
        assert args[0] == GEOCODE_URL
        assert kwargs["timeout"] == 3.5


# ---------------------------------------------------------------------------
# Result handling
# ---------------------------------------------------------------------------


class TestValidateAddress:
    def test_success(self, ok_session: MagicMock) -> None:
        geocoder = GoogleGeocoder(api_key="k", session=ok_session)
        result = geocoder.validate_address("M5V 2T6")

        assert result.success
        assert result.data is not None
        assert result.data.postal_code == "M5V2T6"
        assert result.data.province_abbreviation == "ON"
        assert result.data.lat == pytest.approx(43.6426)
        assert result.data.lon == pytest.approx(-79.3871)

    def test_zero_results(self) -> None:
        session = _session({"status": "ZERO_RESULTS", "results": []})
        result = GoogleGeocoder(api_key="k", session=session).validate_address("nowhere st")
        assert not result.success
        assert result.error == NO_RESULTS_ERROR

    def test_ok_status_without_results(self) -> None:
        session = _session({"status": "OK", "results": []})
        result = GoogleGeocoder(api_key="k", session=session).validate_address("M5V2T6")
        assert result.error == NO_RESULTS_ERROR

    def test_missing_postal_code(self) -> None:
        session = _session({"status": "OK", "results": [_google_result(postal_code=None)]})
        result = GoogleGeocoder(api_key="k", session=session).validate_address("Toronto ON")
        assert not result.success
        assert result.error == MISSING_POSTAL_CODE_ERROR

    def test_postal_code_mismatch(self) -> None:
        session = _session({"status": "OK", "results": [_google_result("M5V 3L9")]})
        result = GoogleGeocoder(api_key="k", session=session).validate_address("M5V 2T6")
        assert not result.success
        assert result.error == POSTAL_CODE_MISMATCH_ERROR

    def test_address_query_accepts_any_postal_code(self) -> None:
        session = _session({"status": "OK", "results": [_google_result("M5V 3L9")]})
        result = GoogleGeocoder(api_key="k", session=session).validate_address(
            "290 Bremner Blvd, Toronto"
        )
        assert result.success
        assert result.data is not None
        assert result.data.postal_code == "M5V3L9"


# ---------------------------------------------------------------------------
# Service failures
# ---------------------------------------------------------------------------


class TestServiceErrors:
    def test_connection_error(self) -> None:
        session = MagicMock(spec=requests.Session)
        session.get.side_effect = requests.ConnectionError("refused")
        with pytest.raises(GeocodingError, match="request failed"):
            GoogleGeocoder(api_key="k", session=session).validate_address("M5V2T6")

    def test_http_error(self) -> None:
        session = _session({})
        session.get.return_value.raise_for_status.side_effect = requests.HTTPError("500")
        with pytest.raises(GeocodingError, match="request failed"):
            GoogleGeocoder(api_key="k", session=session).validate_address("M5V2T6")

    def test_invalid_json(self) -> None:
        session = _session(None)
        session.get.return_value.json.side_effect = ValueError("no json")
        with pytest.raises(GeocodingError, match="invalid JSON"):
            GoogleGeocoder(api_key="k", session=session).validate_address("M5V2T6")

    def test_non_object_payload(self) -> None:
        session = _session(["not", "a", "dict"])
        with pytest.raises(GeocodingError, match="Unexpected"):
            GoogleGeocoder(api_key="k", session=session).validate_address("M5V2T6")

    def test_malformed_result(self) -> None:
        session = _session({"status": "OK", "results": [{"formatted_address": "x"}]})
        with pytest.raises(GeocodingError, match="Malformed"):
            GoogleGeocoder(api_key="k", session=session).validate_address("M5V2T6")

    def test_null_coordinate(self) -> None:
        result = _google_result()
        result["geometry"]["location"]["lat"] = None
        session = _session({"status": "OK", "results": [result]})
        with pytest.raises(GeocodingError, match="Malformed"):
            GoogleGeocoder(api_key="k", session=session).validate_address("M5V 2T6")


# ---------------------------------------------------------------------------
# Map embed
# ---------------------------------------------------------------------------


class TestMapEmbedUrl:
    def test_quotes_display_name(self) -> None:
        geocoder = GoogleGeocoder(api_key="abc", session=MagicMock(spec=requests.Session))
        url = geocoder.map_embed_url("290 Bremner Blvd, Toronto, ON")
        assert url == (
            "https://www.google.com/maps/embed/v1/place"
            "?key=abc&q=290%20Bremner%20Blvd%2C%20Toronto%2C%20ON"
        )
