"""Homestimate house size, window and energy estimation engine.

Usage::

    from homestimate import create_default_estimator

    estimator = create_default_estimator()
    result = estimator.estimate("M5V 2T6")
"""

from homestimate.engine import HouseEstimator, ProvinceResolution
from homestimate.estimators import (
    estimate_energy_usage,
    estimate_house_size,
    estimate_windows,
)
from homestimate.factory import create_default_estimator
from homestimate.models.address import (
    AddressComponent,
    AddressResolution,
    AddressValidationResult,
)
from homestimate.models.enums import Confidence, ProvinceName
from homestimate.models.estimate import (
    Assumption,
    EnergyFactors,
    EnergyUsage,
    EstimateMetadata,
    EstimateResult,
    WindowSplit,
)

__all__ = [
    "AddressComponent",
    "AddressResolution",
    "AddressValidationResult",
    "Assumption",
    "Confidence",
    "EnergyFactors",
    "EnergyUsage",
    "EstimateMetadata",
    "EstimateResult",
    "HouseEstimator",
    "ProvinceName",
    "ProvinceResolution",
    "WindowSplit",
    "create_default_estimator",
    "estimate_energy_usage",
    "estimate_house_size",
    "estimate_windows",
]
