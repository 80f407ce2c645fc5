"""Custom exception hierarchy for Homestimate."""

from __future__ import annotations


class HomestimateError(Exception):
    """Base exception for all Homestimate errors."""


class InvalidQueryError(HomestimateError):
    """Raised when search text is neither a postal code nor a usable address."""


class AddressValidationError(HomestimateError):
    """Raised when the geocoder cannot resolve an address to a postal code."""


class GeocodingError(HomestimateError):
    """Raised when the geocoding service cannot be reached or fails."""
