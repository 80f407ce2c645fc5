"""Domain models for the Homestimate engine."""

from homestimate.models.address import (
    AddressComponent,
    AddressResolution,
    AddressValidationResult,
)
from homestimate.models.enums import (
    Confidence,
    ProvinceName,
    ProvinceSource,
    Setting,
    SizeSource,
)
from homestimate.models.estimate import (
    Assumption,
    EnergyFactors,
    EnergyUsage,
    EstimateMetadata,
    EstimateResult,
    WindowSplit,
)
from homestimate.models.requests import (
    AddressEstimateRequest,
    PostalCodeEstimateRequest,
)

__all__ = [
    "AddressComponent",
    "AddressEstimateRequest",
    "AddressResolution",
    "AddressValidationResult",
    "Assumption",
    "Confidence",
    "EnergyFactors",
    "EnergyUsage",
    "EstimateMetadata",
    "EstimateResult",
    "PostalCodeEstimateRequest",
    "ProvinceName",
    "ProvinceSource",
    "Setting",
    "SizeSource",
    "WindowSplit",
]
