"""Provincial data layer for the Homestimate engine."""

from homestimate.data.profile import ClimateRegion, ProvinceProfile
from homestimate.data.repository import ProvinceDataRepository

__all__ = [
    "ClimateRegion",
    "ProvinceDataRepository",
    "ProvinceProfile",
]
