"""Tests for the provincial data layer."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from homestimate.data.profile import ClimateRegion, ProvinceProfile
from homestimate.data.provinces import DEFAULT_PROVINCE, PROVINCE_PROFILES
from homestimate.data.repository import ProvinceDataRepository
from homestimate.models.enums import ProvinceName


@pytest.fixture()
def repo() -> ProvinceDataRepository:
    return ProvinceDataRepository(PROVINCE_PROFILES.values())


def _profile(**overrides: object) -> ProvinceProfile:
    defaults: dict[str, object] = {
        "name": ProvinceName.ONTARIO,
        "abbreviation": "ON",
        "postal_prefixes": ("K",),
        "urban_house_size": 1400,
        "rural_house_size": 1800,
        "urban_window_ratio": 4,
        "rural_window_ratio": 6,
        "electricity_per_sf": 5.22,
        "total_energy_per_sf": 0.0558,
        "seasonal_factor": 1.10,
        "climate_regions": (ClimateRegion(name="all", factor=1.0),),
    }
    defaults.update(overrides)
    return ProvinceProfile(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Bundled profile integrity
# ---------------------------------------------------------------------------


class TestBundledProfiles:
    def test_covers_all_provinces_and_territories(self) -> None:
        assert set(PROVINCE_PROFILES) == set(ProvinceName)
        assert len(PROVINCE_PROFILES) == 13

    def test_keys_match_profile_names(self) -> None:
        for name, profile in PROVINCE_PROFILES.items():
            assert profile.name == name

    def test_abbreviations_are_unique(self) -> None:
        abbreviations = [p.abbreviation for p in PROVINCE_PROFILES.values()]
        assert len(abbreviations) == len(set(abbreviations))

    def test_every_profile_ends_with_catch_all(self) -> None:
        for profile in PROVINCE_PROFILES.values():
            assert profile.climate_regions[-1].is_catch_all, profile.name

    def test_rural_sizes_exceed_urban(self) -> None:
        for profile in PROVINCE_PROFILES.values():
            assert profile.rural_house_size > profile.urban_house_size, profile.name

    def test_territories_have_higher_rural_window_floor(self) -> None:
        territories = {
            ProvinceName.YUKON,
            ProvinceName.NORTHWEST_TERRITORIES,
            ProvinceName.NUNAVUT,
        }
        for name, profile in PROVINCE_PROFILES.items():
            expected = 8 if name in territories else 6
            assert profile.rural_window_floor == expected, name
            assert profile.urban_window_floor == 4

    def test_default_province_has_profile(self) -> None:
        assert DEFAULT_PROVINCE in PROVINCE_PROFILES

    def test_prefixes_cover_every_valid_first_letter(
        self, repo: ProvinceDataRepository
    ) -> None:
        for letter in "ABCEGHJKLMNPRSTVXY":
            assert repo.province_for_postal_code(f"{letter}1A1A1") is not None, letter


# ---------------------------------------------------------------------------
# Climate regions
# ---------------------------------------------------------------------------


class TestClimateRegions:
    def test_first_match_wins(self) -> None:
        ontario = PROVINCE_PROFILES[ProvinceName.ONTARIO]
        assert ontario.climate_region("P3E1A1").name == "northern"
        assert ontario.climate_region("M5V2T6").name == "southern"
        assert ontario.climate_region("L4C1A1").name == "southern"
        assert ontario.climate_region("K1A0B1").name == "central"

    def test_british_columbia_order(self) -> None:
        bc = PROVINCE_PROFILES[ProvinceName.BRITISH_COLUMBIA]
        assert bc.climate_region("V6B1A1").factor == 0.9
        assert bc.climate_region("V0N1B0").factor == 1.2
        assert bc.climate_region("V1Y1A1").factor == 1.1

    def test_every_code_matches_exactly_one_first_region(self) -> None:
        for profile in PROVINCE_PROFILES.values():
            for prefix in profile.postal_prefixes:
                for digit in range(10):
                    code = (prefix + f"{digit}A1A1A1")[:6]
                    matched = [r for r in profile.climate_regions if r.matches(code)]
                    assert matched, code
                    assert profile.climate_region(code) == matched[0]

    def test_reordering_changes_result(self) -> None:
        southern = ClimateRegion(name="southern", factor=0.95, pattern=r"^[ML]")
        gta = ClimateRegion(name="gta", factor=0.9, pattern=r"^M")
        catch_all = ClimateRegion(name="central", factor=1.05)
        first = _profile(climate_regions=(southern, gta, catch_all))
        second = _profile(climate_regions=(gta, southern, catch_all))
        assert first.climate_region("M5V2T6").name == "southern"
        assert second.climate_region("M5V2T6").name == "gta"

    def test_missing_catch_all_rejected(self) -> None:
        with pytest.raises(ValidationError, match="catch-all"):
            _profile(
                climate_regions=(
                    ClimateRegion(name="north", factor=1.2, pattern=r"^P"),
                )
            )

    def test_early_catch_all_rejected(self) -> None:
        with pytest.raises(ValidationError, match="never match"):
            _profile(
                climate_regions=(
                    ClimateRegion(name="all", factor=1.0),
                    ClimateRegion(name="north", factor=1.2, pattern=r"^P"),
                    ClimateRegion(name="rest", factor=1.0),
                )
            )

    def test_empty_regions_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _profile(climate_regions=())


# ---------------------------------------------------------------------------
# Repository lookups
# ---------------------------------------------------------------------------


class TestRepository:
    def test_find_by_name(self, repo: ProvinceDataRepository) -> None:
        assert repo.find_province("Nova Scotia") == ProvinceName.NOVA_SCOTIA

    def test_find_is_case_insensitive(self, repo: ProvinceDataRepository) -> None:
        assert repo.find_province("  nova SCOTIA ") == ProvinceName.NOVA_SCOTIA
        assert repo.find_province("bc") == ProvinceName.BRITISH_COLUMBIA

    def test_find_ignores_accents(self, repo: ProvinceDataRepository) -> None:
        assert repo.find_province("Québec") == ProvinceName.QUEBEC

    def test_find_unknown(self, repo: ProvinceDataRepository) -> None:
        assert repo.find_province("Atlantis") is None
        assert repo.find_province("") is None
        assert repo.find_province(None) is None

    def test_prefix_lookup_prefers_longest(self, repo: ProvinceDataRepository) -> None:
        assert repo.province_for_postal_code("X0A0H0") == ProvinceName.NUNAVUT
        assert repo.province_for_postal_code("X1A2B3") == ProvinceName.NORTHWEST_TERRITORIES

    def test_prefix_lookup_unknown(self, repo: ProvinceDataRepository) -> None:
        assert repo.province_for_postal_code("Z1Z1Z1") is None
        assert repo.province_for_postal_code("") is None

    def test_get_profile_missing(self) -> None:
        repo = ProvinceDataRepository([PROVINCE_PROFILES[ProvinceName.ALBERTA]])
        assert repo.get_profile(ProvinceName.ONTARIO) is None
        assert len(repo.all_profiles()) == 1


# ---------------------------------------------------------------------------
# Profile helpers
# ---------------------------------------------------------------------------


class TestProfile:
    def test_default_rural_rule(self) -> None:
        profile = _profile()
        assert profile.is_rural("K0A1A0") is True
        assert profile.is_rural("K1A0B1") is False

    def test_pattern_rural_rule(self) -> None:
        profile = _profile(rural_pattern=r"^K1")
        assert profile.is_rural("K1A0B1") is True
        assert profile.is_rural("K0A1A0") is False

    def test_selectors(self) -> None:
        profile = _profile()
        assert profile.house_size(True) == 1800
        assert profile.house_size(False) == 1400
        assert profile.window_ratio(True) == 6
        assert profile.window_floor(False) == 4

    def test_profile_is_immutable(self) -> None:
        profile = _profile()
        with pytest.raises(ValidationError):
            profile.seasonal_factor = 2.0  # type: ignore[misc]
