"""Geocoding service: resolves Canadian addresses and postal codes via Google Maps."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import requests
from pydantic import ValidationError

from homestimate.exceptions import GeocodingError
from homestimate.models.address import (
    POSTAL_CODE_TYPE,
    AddressComponent,
    AddressResolution,
    AddressValidationResult,
)
from homestimate.models.postal import is_postal_code, normalize_postal_code

logger = logging.getLogger(__name__)

GEOCODE_URL = "https://maps.googleapis.com/maps/api/geocode/json"
MAP_EMBED_URL = "https://www.google.com/maps/embed/v1/place"

# Province hint added to postal code searches, keyed by first letter.
POSTAL_PREFIX_REGIONS: dict[str, str] = {
    "A": "Newfoundland and Labrador",
    "B": "Nova Scotia",
    "C": "Prince Edward Island",
    "E": "New Brunswick",
    "G": "Quebec",
    "H": "Quebec",
    "J": "Quebec",
    "K": "Ontario",
    "L": "Ontario",
    "M": "Ontario",
    "N": "Ontario",
    "P": "Ontario",
    "R": "Manitoba",
    "S": "Saskatchewan",
    "T": "Alberta",
    "V": "British Columbia",
    "X": "Northwest Territories and Nunavut",
    "Y": "Yukon",
}

MISSING_POSTAL_CODE_ERROR = "Please enter a valid Canadian address with postal code"
POSTAL_CODE_MISMATCH_ERROR = (
    "The provided postal code could not be found. Please verify and try again."
)
NO_RESULTS_ERROR = (
    "No results found for this address. Please try a different address or postal code."
)


class GoogleGeocoder:
    """Validates Canadian addresses with the Google Geocoding API.

    A result is only accepted when it carries a postal code; when the query
    itself was a postal code, the returned one must match it exactly.
    """

    def __init__(
        self,
        api_key: str,
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._api_key = api_key
        self._session = session or requests.Session()
        self._timeout = timeout

    def validate_address(self, query: str) -> AddressValidationResult:
        """Resolve *query* (an address or postal code) to a Canadian address.

        Returns an :class:`AddressValidationResult` whose ``error`` is
        suitable for showing to the user when resolution fails.

        Raises
        ------
        GeocodingError
            If the geocoding service cannot be reached or returns an
            unreadable response.
        """
        clean_query = query.strip().upper()
        postal_code = normalize_postal_code(clean_query)
        query_is_postal_code = is_postal_code(postal_code)

        if query_is_postal_code:
            region = POSTAL_PREFIX_REGIONS.get(postal_code[0], "")
            search_address = f"{postal_code}, {region}, Canada"
        else:
            search_address = f"{clean_query}, Canada"

        logger.info("Geocoding %r", search_address)
        payload = self._fetch(search_address)

        results = payload.get("results") or []
        if payload.get("status") != "OK" or not results:
            logger.info(
                "No geocoding results for %r (status %s)",
                search_address,
                payload.get("status"),
            )
            return AddressValidationResult.failure(NO_RESULTS_ERROR)

        resolution = self._parse_result(results[0])

        if resolution.postal_code is None:
            return AddressValidationResult.failure(MISSING_POSTAL_CODE_ERROR)

        if query_is_postal_code and resolution.postal_code != postal_code:
            logger.info(
                "Postal code mismatch: searched %s, got %s",
                postal_code,
                resolution.postal_code,
            )
            return AddressValidationResult.failure(POSTAL_CODE_MISMATCH_ERROR)

        logger.info(
            "Geocoded %r -> %s (%.5f, %.5f)",
            query,
            resolution.display_name,
            resolution.lat,
            resolution.lon,
        )
        return AddressValidationResult.ok(resolution)

    def map_embed_url(self, display_name: str) -> str:
        """Google Maps embed URL centred on *display_name*."""
        return f"{MAP_EMBED_URL}?key={self._api_key}&q={quote(display_name, safe='')}"

    def _fetch(self, search_address: str) -> dict[str, Any]:
        params = {
            "address": search_address,
            "components": "country:CA",
            "key": self._api_key,
        }
        try:
            response = self._session.get(GEOCODE_URL, params=params, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            msg = f"Geocoding request failed: {exc}"
            raise GeocodingError(msg) from exc
        except ValueError as exc:
            msg = "Geocoding service returned invalid JSON"
            raise GeocodingError(msg) from exc

        if not isinstance(payload, dict):
            msg = f"Unexpected geocoding response type: {type(payload).__name__}"
            raise GeocodingError(msg)
        return payload

    @staticmethod
    def _parse_result(result: dict[str, Any]) -> AddressResolution:
        try:
            location = result["geometry"]["location"]
            return AddressResolution(
                display_name=result["formatted_address"],
                lat=location["lat"],
                lon=location["lng"],
                components=[
                    AddressComponent(
                        long_name=c["long_name"],
                        short_name=c["short_name"],
                        types=list(c.get("types", [])),
                    )
                    for c in result.get("address_components", [])
                ],
            )
        except (KeyError, TypeError) as exc:
            msg = f"Malformed geocoding result: missing {exc}"
            raise GeocodingError(msg) from exc
        except ValidationError as exc:
            msg = f"Malformed geocoding result: {exc.error_count()} invalid field(s)"
            raise GeocodingError(msg) from exc
