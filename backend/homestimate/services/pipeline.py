"""Estimation pipeline: orchestrates query checks, geocoding, and house estimation."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from homestimate.exceptions import AddressValidationError, InvalidQueryError
from homestimate.models.postal import looks_like_postal_code, normalize_postal_code

if TYPE_CHECKING:
    from homestimate.engine import HouseEstimator
    from homestimate.models.address import AddressResolution
    from homestimate.models.estimate import EstimateResult
    from homestimate.services.geocoder import GoogleGeocoder

logger = logging.getLogger(__name__)

_MIN_ADDRESS_LENGTH = 5

INVALID_QUERY_ERROR = "Please enter a valid Canadian postal code or full address"


@dataclass(frozen=True)
class PipelineResult:
    """Result of the full estimation pipeline."""

    address: AddressResolution
    estimate: EstimateResult
    map_embed_url: str
    processing_time_seconds: float


def validate_query(query: str) -> None:
    """Reject search text that is neither a postal code nor a plausible address.

    Raises
    ------
    InvalidQueryError
        If *query* is not postal-code shaped and shorter than five characters.
    """
    if not looks_like_postal_code(query) and len(query.strip()) < _MIN_ADDRESS_LENGTH:
        raise InvalidQueryError(INVALID_QUERY_ERROR)


class EstimationPipeline:
    """Orchestrates query → geocoder → HouseEstimator in a single call."""

    def __init__(
        self,
        geocoder: GoogleGeocoder,
        estimator: HouseEstimator,
    ) -> None:
        self._geocoder = geocoder
        self._estimator = estimator

    def run(
        self,
        query: str,
        house_size_override: int | None = None,
    ) -> PipelineResult:
        """Geocode *query* and estimate the house at the resolved address.

        Steps:
            1. Reject obviously invalid search text
            2. Validate the address with the geocoder
            3. Extract the canonical postal code and province abbreviation
            4. Run the estimator, with the manual size override if given

        Raises
        ------
        InvalidQueryError
            If the query fails the pre-check.
        AddressValidationError
            If the geocoder cannot resolve the query to a postal code.
        GeocodingError
            If the geocoding service fails.
        """
        start = time.monotonic()

        validate_query(query)

        validation = self._geocoder.validate_address(query)
        if not validation.success or validation.data is None:
            raise AddressValidationError(validation.error or INVALID_QUERY_ERROR)

        address = validation.data
        postal_code = address.postal_code
        if postal_code is None:
            logger.warning("No postal code component for %r; using the query", query)
            postal_code = normalize_postal_code(query)

        estimate = self._estimator.estimate(
            postal_code,
            province=address.province_abbreviation,
            house_size_override=house_size_override,
        )

        elapsed = time.monotonic() - start
        logger.info(
            "Estimated %s in %.2fs: %d sq ft",
            postal_code,
            elapsed,
            estimate.house_size,
        )

        return PipelineResult(
            address=address,
            estimate=estimate,
            map_embed_url=self._geocoder.map_embed_url(address.display_name),
            processing_time_seconds=elapsed,
        )
