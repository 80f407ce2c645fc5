"""Core estimation engine for the Homestimate library.

The HouseEstimator turns a postal code (and optionally a province) into a
rough house profile:

1. **Province resolution**: Use the caller's province when recognized,
   otherwise map the postal code prefix, otherwise fall back to Ontario.
   This happens once per estimate and every step below shares the result.
2. **Rural classification**: Apply the province's rural rule to the code.
3. **House size**: Province urban/rural base size scaled by a local
   variation factor of ``0.9 + second_digit * 0.02``.
4. **Windows**: Province window density per 1000 sq ft, never below the
   urban or rural floor.
5. **Energy**: Province per-sq-ft intensities scaled by the climate
   region, rural and seasonal factors.
6. **Assumption documentation**: Record every default and override so
   estimates stay traceable.

Estimates never fail on unknown provinces or prefixes; they fall back to
Ontario and say so in the assumptions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from homestimate.data.provinces import (
    DATA_VERSION,
    DEFAULT_PROVINCE,
    DEFAULT_SEASONAL_FACTOR,
)
from homestimate.models.enums import (
    Confidence,
    ProvinceName,
    ProvinceSource,
    SizeSource,
)
from homestimate.models.estimate import (
    Assumption,
    EnergyFactors,
    EnergyUsage,
    EstimateMetadata,
    EstimateResult,
    WindowSplit,
    round_half_up,
)
from homestimate.models.postal import normalize_postal_code

if TYPE_CHECKING:
    from homestimate.data.profile import ProvinceProfile
    from homestimate.data.repository import ProvinceDataRepository

logger = logging.getLogger(__name__)

RURAL_ENERGY_FACTOR = 1.15
URBAN_ENERGY_FACTOR = 1.0

# Local variation: 0.9 at second digit 0 up to 1.08 at 9.
_LOCAL_VARIATION_BASE = 0.9
_LOCAL_VARIATION_STEP = 0.02

ENGINE_VERSION = "0.1.0"


@dataclass(frozen=True)
class ProvinceResolution:
    """The province an estimate runs against, and how it was chosen."""

    province: ProvinceName
    profile: ProvinceProfile
    source: ProvinceSource
    assumptions: list[Assumption] = field(default_factory=list)


class HouseEstimator:
    """Core estimation engine that converts a postal code into an EstimateResult.

    Args:
        repository: The province data repository providing profiles and
            province lookups by name, abbreviation and postal prefix.

    Example::

        from homestimate.data.provinces import PROVINCE_PROFILES
        from homestimate.data.repository import ProvinceDataRepository

        repo = ProvinceDataRepository(PROVINCE_PROFILES.values())
        estimator = HouseEstimator(repo)
        result = estimator.estimate("M5V2T6")
    """

    def __init__(self, repository: ProvinceDataRepository) -> None:
        self._repository = repository
        default_profile = repository.get_profile(DEFAULT_PROVINCE)
        if default_profile is None:
            msg = f"Repository has no profile for the default province {DEFAULT_PROVINCE}"
            raise ValueError(msg)
        self._default_profile = default_profile

    # ------------------------------------------------------------------
    # Province resolution
    # ------------------------------------------------------------------

    def resolve_province(
        self,
        postal_code: str,
        province: str | None = None,
    ) -> ProvinceResolution:
        """Choose the province profile for *postal_code*.

        Lookup order:
        1. *province* as a name or abbreviation
        2. The postal code's prefix
        3. Ontario
        """
        code = normalize_postal_code(postal_code)
        requested = self._repository.find_province(province)
        if requested is not None:
            profile = self._repository.get_profile(requested)
            if profile is not None:
                return ProvinceResolution(
                    province=requested,
                    profile=profile,
                    source=ProvinceSource.INPUT,
                )

        assumptions: list[Assumption] = []
        by_prefix = self._repository.province_for_postal_code(code)
        profile = self._repository.get_profile(by_prefix) if by_prefix else None
        if by_prefix is not None and profile is not None:
            if province:
                logger.warning(
                    "Unrecognized province %r; using %s from postal code %s",
                    province,
                    by_prefix,
                    code,
                )
                assumptions.append(
                    Assumption(
                        parameter="province",
                        assumed_value=by_prefix.value,
                        reasoning=(
                            f"Province '{province}' is not recognized; derived "
                            f"{by_prefix.value} from postal code prefix '{code[:1]}'"
                        ),
                        confidence=Confidence.MEDIUM,
                    )
                )
            return ProvinceResolution(
                province=by_prefix,
                profile=profile,
                source=ProvinceSource.POSTAL_CODE,
                assumptions=assumptions,
            )

        logger.warning(
            "No province for postal code %s; defaulting to %s", code, DEFAULT_PROVINCE
        )
        assumptions.append(
            Assumption(
                parameter="province",
                assumed_value=DEFAULT_PROVINCE.value,
                reasoning=(
                    f"Postal code prefix '{code[:1]}' does not map to a province; "
                    f"used {DEFAULT_PROVINCE.value} averages"
                ),
                confidence=Confidence.LOW,
            )
        )
        return ProvinceResolution(
            province=DEFAULT_PROVINCE,
            profile=self._default_profile,
            source=ProvinceSource.DEFAULT,
            assumptions=assumptions,
        )

    def is_rural(self, postal_code: str, province: str | None = None) -> bool:
        """Classify *postal_code* as rural using its province's rule."""
        code = normalize_postal_code(postal_code)
        resolution = self.resolve_province(code, province)
        return resolution.profile.is_rural(code)

    def profiles(self) -> list[ProvinceProfile]:
        """All provincial profiles known to the estimator."""
        return self._repository.all_profiles()

    def seasonal_factor(self, province: str | None) -> float:
        """Province seasonal multiplier, 1.10 when the province is unknown."""
        name = self._repository.find_province(province)
        profile = self._repository.get_profile(name) if name else None
        if profile is None:
            return DEFAULT_SEASONAL_FACTOR
        return profile.seasonal_factor

    # ------------------------------------------------------------------
    # Estimators
    # ------------------------------------------------------------------

    def estimate_house_size(self, postal_code: str, province: str | None = None) -> int:
        """Estimate floor area in sq ft for *postal_code*."""
        code = normalize_postal_code(postal_code)
        resolution = self.resolve_province(code, province)
        return self._house_size(code, resolution.profile)

    def estimate_windows(
        self,
        house_size: float,
        is_rural: bool,
        province: str | None = None,
    ) -> int:
        """Estimate the window count for a house of *house_size* sq ft.

        Uses Ontario's ratios when *province* is absent or unknown.
        """
        name = self._repository.find_province(province)
        profile = self._repository.get_profile(name) if name else None
        return self._windows(house_size, is_rural, profile or self._default_profile)

    def estimate_energy_usage(
        self,
        house_size: float,
        postal_code: str,
        province: str | None = None,
    ) -> EnergyUsage:
        """Estimate annual electricity (kWh) and total energy (GJ).

        The per-sq-ft intensities always come from the resolved province,
        so an unrecognized *province* yields the intensities of the
        province the postal code belongs to, not Ontario's.
        """
        code = normalize_postal_code(postal_code)
        resolution = self.resolve_province(code, province)
        usage, _ = self._energy(house_size, code, resolution.profile)
        return usage

    def estimate(
        self,
        postal_code: str,
        province: str | None = None,
        house_size_override: float | None = None,
    ) -> EstimateResult:
        """Produce a full house estimate for *postal_code*.

        Args:
            postal_code: Canadian postal code; case and whitespace are
                normalized.
            province: Optional province name or abbreviation.
            house_size_override: Manually adjusted floor area. When given the
                size estimator is skipped and windows and energy are
                recomputed from this value.

        Returns:
            A complete EstimateResult with documented assumptions.

        Raises:
            ValueError: If *house_size_override* does not round to a
                positive size.
        """
        code = normalize_postal_code(postal_code)
        resolution = self.resolve_province(code, province)
        profile = resolution.profile
        assumptions = list(resolution.assumptions)

        rural = profile.is_rural(code)

        if house_size_override is not None:
            house_size = round_half_up(house_size_override)
            if house_size <= 0:
                msg = f"house_size_override must be positive, got {house_size_override}"
                raise ValueError(msg)
            size_source = SizeSource.OVERRIDE
            assumptions.append(
                Assumption(
                    parameter="house_size",
                    assumed_value=str(house_size),
                    reasoning="House size was adjusted manually",
                    confidence=Confidence.HIGH,
                )
            )
        else:
            house_size = self._house_size(code, profile)
            size_source = SizeSource.ESTIMATED

        windows = self._windows(house_size, rural, profile)
        energy, factors = self._energy(house_size, code, profile)

        logger.debug(
            "Estimated %s (%s, %s): %d sq ft, %d windows, %d kWh",
            code,
            profile.name,
            "rural" if rural else "urban",
            house_size,
            windows,
            energy.electricity,
        )

        return EstimateResult(
            postal_code=code,
            province=profile.name,
            province_abbreviation=profile.abbreviation,
            house_size=house_size,
            windows=windows,
            window_split=WindowSplit.from_total(windows),
            energy=energy,
            energy_factors=factors,
            is_rural=rural,
            assumptions=assumptions,
            metadata=EstimateMetadata(
                engine_version=ENGINE_VERSION,
                data_version=DATA_VERSION,
                size_source=size_source,
                province_source=resolution.source,
            ),
        )

    # ------------------------------------------------------------------
    # Calculations against a resolved profile
    # ------------------------------------------------------------------

    @staticmethod
    def local_variation_factor(postal_code: str) -> float:
        """Size multiplier derived from the postal code's second digit."""
        digit = postal_code[1:2]
        if not digit.isdigit():
            logger.warning("Postal code %r has no second digit; assuming 0", postal_code)
            digit = "0"
        return _LOCAL_VARIATION_BASE + int(digit) * _LOCAL_VARIATION_STEP

    def _house_size(self, code: str, profile: ProvinceProfile) -> int:
        base_size = profile.house_size(profile.is_rural(code))
        return round_half_up(base_size * self.local_variation_factor(code))

    @staticmethod
    def _windows(house_size: float, is_rural: bool, profile: ProvinceProfile) -> int:
        ratio = profile.window_ratio(is_rural)
        calculated = round_half_up(house_size / 1000 * ratio)
        return max(calculated, profile.window_floor(is_rural))

    @staticmethod
    def _energy(
        house_size: float,
        code: str,
        profile: ProvinceProfile,
    ) -> tuple[EnergyUsage, EnergyFactors]:
        region = profile.climate_region(code)
        rural_factor = RURAL_ENERGY_FACTOR if profile.is_rural(code) else URBAN_ENERGY_FACTOR
        factors = EnergyFactors(
            climate=region.factor,
            rural=rural_factor,
            seasonal=profile.seasonal_factor,
            climate_region=region.name,
        )

        electricity = (
            house_size
            * profile.electricity_per_sf
            * factors.climate
            * factors.rural
            * factors.seasonal
        )
        total = (
            house_size
            * profile.total_energy_per_sf
            * factors.climate
            * factors.rural
            * factors.seasonal
        )
        return (
            EnergyUsage(electricity=round_half_up(electricity), total=round(total, 2)),
            factors,
        )
