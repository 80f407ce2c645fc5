"""Module-level estimator functions backed by the default provincial data.

These are thin wrappers around a shared :class:`HouseEstimator`. The
estimator holds no mutable state, so sharing one instance is safe across
threads and requests.
"""

from __future__ import annotations

from functools import cache
from typing import TYPE_CHECKING

from homestimate.factory import create_default_estimator

if TYPE_CHECKING:
    from homestimate.engine import HouseEstimator
    from homestimate.models.estimate import EnergyUsage


@cache
def default_estimator() -> HouseEstimator:
    return create_default_estimator()


def estimate_house_size(postal_code: str, province: str | None = None) -> int:
    """Estimated floor area in sq ft for *postal_code*."""
    return default_estimator().estimate_house_size(postal_code, province)


def estimate_windows(house_size: float, is_rural: bool, province: str | None = None) -> int:
    """Estimated window count for a house of *house_size* sq ft."""
    return default_estimator().estimate_windows(house_size, is_rural, province)


def estimate_energy_usage(
    house_size: float,
    postal_code: str,
    province: str | None = None,
) -> EnergyUsage:
    """Estimated annual electricity (kWh) and total energy (GJ)."""
    return default_estimator().estimate_energy_usage(house_size, postal_code, province)
