"""Dependency injection for FastAPI endpoints."""

from __future__ import annotations

import logging
import os

from homestimate.factory import create_default_estimator
from homestimate.services.geocoder import GoogleGeocoder
from homestimate.services.pipeline import EstimationPipeline

logger = logging.getLogger(__name__)

_DEFAULT_GEOCODE_TIMEOUT = 10.0
_DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def create_pipeline() -> EstimationPipeline:
    """Create an EstimationPipeline with default configuration.

    Reads GOOGLE_MAPS_API_KEY (required) and HOMESTIMATE_GEOCODE_TIMEOUT
    (optional, seconds) from the environment. Raises ValueError if the key
    is not set or the timeout is not a positive number.
    """
    api_key = os.environ.get("GOOGLE_MAPS_API_KEY", "")
    if not api_key:
        msg = (
            "GOOGLE_MAPS_API_KEY environment variable is not set. "
            "Set it to use the /api/estimate endpoint."
        )
        raise ValueError(msg)

    raw_timeout = os.environ.get("HOMESTIMATE_GEOCODE_TIMEOUT", "")
    timeout = _DEFAULT_GEOCODE_TIMEOUT
    if raw_timeout:
        try:
            timeout = float(raw_timeout)
        except ValueError as exc:
            msg = f"HOMESTIMATE_GEOCODE_TIMEOUT must be a number, got {raw_timeout!r}"
            raise ValueError(msg) from exc
        if timeout <= 0:
            msg = f"HOMESTIMATE_GEOCODE_TIMEOUT must be positive, got {timeout}"
            raise ValueError(msg)

    logger.info("Creating estimation pipeline (geocode timeout %.1fs)", timeout)
    geocoder = GoogleGeocoder(api_key=api_key, timeout=timeout)
    return EstimationPipeline(geocoder=geocoder, estimator=create_default_estimator())


def cors_origins() -> list[str]:
    """Allowed CORS origins from HOMESTIMATE_CORS_ORIGINS (comma separated)."""
    raw = os.environ.get("HOMESTIMATE_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
