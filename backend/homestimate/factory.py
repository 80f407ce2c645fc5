"""Factory functions for creating pre-configured HouseEstimator instances."""

from __future__ import annotations

from homestimate.data.provinces import PROVINCE_PROFILES
from homestimate.data.repository import ProvinceDataRepository
from homestimate.engine import HouseEstimator


def create_default_estimator() -> HouseEstimator:
    """Create a HouseEstimator wired up with the built-in provincial profiles.

    This is the recommended way to create a HouseEstimator for typical usage.
    It wires up a ProvinceDataRepository with the bundled 2021 provincial
    averages so callers don't need to understand the internal wiring.

    Returns:
        A HouseEstimator ready to produce estimates.

    Example::

        from homestimate import create_default_estimator

        estimator = create_default_estimator()
        result = estimator.estimate("M5V 2T6")
    """
    repository = ProvinceDataRepository(PROVINCE_PROFILES.values())
    return HouseEstimator(repository)
