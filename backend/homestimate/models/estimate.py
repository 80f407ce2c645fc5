"""Estimate output models for the Homestimate engine."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from homestimate.models.enums import (
    Confidence,
    ProvinceName,
    ProvinceSource,
    Setting,
    SizeSource,
)

# Display split of the window total into standard and large windows.
STANDARD_WINDOW_SHARE = 0.6
LARGE_WINDOW_SHARE = 0.4


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 going up.

    Python's built-in ``round`` rounds halves to even, which would shift
    estimates sitting exactly on a half.
    """
    return math.floor(value + 0.5)


class EnergyUsage(BaseModel):
    """Annual energy usage for a house.

    ``electricity`` is in kWh, ``total`` is all fuels combined in GJ.
    """

    model_config = ConfigDict(frozen=True)

    electricity: int = Field(ge=0)
    total: float = Field(ge=0)


class EnergyFactors(BaseModel):
    """Multipliers applied on top of the province's per-sq-ft intensities."""

    model_config = ConfigDict(frozen=True)

    climate: float = Field(gt=0)
    rural: float = Field(gt=0)
    seasonal: float = Field(gt=0)
    climate_region: str

    @property
    def combined(self) -> float:
        return self.climate * self.rural * self.seasonal


class WindowSplit(BaseModel):
    """Standard/large breakdown of a window count, for display only.

    Each part is rounded on its own, so the parts are not forced to add up
    to the total.
    """

    model_config = ConfigDict(frozen=True)

    standard: int
    large: int

    @classmethod
    def from_total(cls, total: int) -> WindowSplit:
        return cls(
            standard=round_half_up(total * STANDARD_WINDOW_SHARE),
            large=round_half_up(total * LARGE_WINDOW_SHARE),
        )


class Assumption(BaseModel):
    """A documented assumption made during estimation."""

    model_config = ConfigDict(frozen=True)

    parameter: str
    assumed_value: str
    reasoning: str
    confidence: Confidence


class EstimateMetadata(BaseModel):
    """Metadata about the estimation run."""

    model_config = ConfigDict(frozen=True)

    engine_version: str
    data_version: str
    estimation_method: str = "provincial_averages"
    size_source: SizeSource = SizeSource.ESTIMATED
    province_source: ProvinceSource = ProvinceSource.INPUT


class EstimateResult(BaseModel):
    """Complete house estimate for one postal code.

    Derived entirely from the postal code and province. When the house size
    is overridden the whole result is recomputed, never patched.
    """

    model_config = ConfigDict(frozen=True)

    postal_code: str
    province: ProvinceName
    province_abbreviation: str
    house_size: int = Field(gt=0)
    windows: int = Field(ge=0)
    window_split: WindowSplit
    energy: EnergyUsage
    energy_factors: EnergyFactors
    is_rural: bool
    assumptions: list[Assumption] = Field(default_factory=list)
    metadata: EstimateMetadata
    generated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def window_split_matches_total(self) -> EstimateResult:
        if self.window_split != WindowSplit.from_total(self.windows):
            msg = (
                f"Window split {self.window_split} does not derive from "
                f"{self.windows} windows"
            )
            raise ValueError(msg)
        return self

    @property
    def setting(self) -> Setting:
        return Setting.RURAL if self.is_rural else Setting.URBAN

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display-ready strings."""
        from homestimate.formatting import (
            format_energy_total,
            format_kwh,
            format_square_feet,
        )
        from homestimate.models.postal import format_postal_code

        return {
            "postal_code": format_postal_code(self.postal_code),
            "province": self.province.value,
            "setting": self.setting.value,
            "house_size_formatted": format_square_feet(self.house_size),
            "house_size_source": self.metadata.size_source.value,
            "windows": self.windows,
            "standard_windows": self.window_split.standard,
            "large_windows": self.window_split.large,
            "electricity_formatted": format_kwh(self.energy.electricity),
            "total_energy_formatted": format_energy_total(self.energy.total),
            "climate_region": self.energy_factors.climate_region,
            "num_assumptions": len(self.assumptions),
            "generated_at_formatted": self.generated_at.strftime("%Y-%m-%d %H:%M"),
        }
