"""Schema for provincial profile entries."""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

from homestimate.models.enums import ProvinceName


class ClimateRegion(BaseModel):
    """A climate sub-region of a province.

    ``pattern`` is a regular expression matched against the start of the
    normalized postal code. A region without a pattern is a catch-all.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    factor: float = Field(gt=0)
    pattern: str | None = None

    @property
    def is_catch_all(self) -> bool:
        return self.pattern is None

    def matches(self, postal_code: str) -> bool:
        if self.pattern is None:
            return True
        return re.match(self.pattern, postal_code) is not None


class ProvinceProfile(BaseModel):
    """Housing and energy averages for one province or territory.

    Window ratios are windows per 1000 sq ft. Energy intensities are annual
    kWh of electricity and GJ of total energy per sq ft.
    """

    model_config = ConfigDict(frozen=True)

    name: ProvinceName
    abbreviation: str = Field(min_length=2, max_length=2)
    postal_prefixes: tuple[str, ...]
    urban_house_size: int = Field(gt=0)
    rural_house_size: int = Field(gt=0)
    urban_window_ratio: float = Field(gt=0)
    rural_window_ratio: float = Field(gt=0)
    urban_window_floor: int = Field(default=4, ge=0)
    rural_window_floor: int = Field(default=6, ge=0)
    electricity_per_sf: float = Field(gt=0)
    total_energy_per_sf: float = Field(gt=0)
    seasonal_factor: float = Field(gt=0)
    rural_pattern: str | None = None
    climate_regions: tuple[ClimateRegion, ...]

    @model_validator(mode="after")
    def last_region_is_catch_all(self) -> ProvinceProfile:
        if not self.climate_regions or not self.climate_regions[-1].is_catch_all:
            msg = f"{self.name} must end its climate regions with a catch-all region"
            raise ValueError(msg)
        catch_alls = [r.name for r in self.climate_regions[:-1] if r.is_catch_all]
        if catch_alls:
            msg = (
                f"{self.name} has catch-all regions {catch_alls} before the last "
                f"position; later regions would never match"
            )
            raise ValueError(msg)
        return self

    def is_rural(self, postal_code: str) -> bool:
        """Classify *postal_code* as rural for this province.

        Provinces with a ``rural_pattern`` use it; all others treat a second
        digit of 0 as rural.
        """
        if self.rural_pattern is not None:
            return re.match(self.rural_pattern, postal_code) is not None
        return postal_code[1:2] == "0"

    def house_size(self, is_rural: bool) -> int:
        return self.rural_house_size if is_rural else self.urban_house_size

    def window_ratio(self, is_rural: bool) -> float:
        return self.rural_window_ratio if is_rural else self.urban_window_ratio

    def window_floor(self, is_rural: bool) -> int:
        return self.rural_window_floor if is_rural else self.urban_window_floor

    def climate_region(self, postal_code: str) -> ClimateRegion:
        """Return the first climate region matching *postal_code*."""
        for region in self.climate_regions:
            if region.matches(postal_code):
                return region
        # Unreachable while the last region is a catch-all.
        return self.climate_regions[-1]
