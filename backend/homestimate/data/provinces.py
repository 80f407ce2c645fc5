"""Provincial housing and energy profiles.

House sizes are typical detached-house floor areas (sq ft). Energy
intensities are 2021 provincial residential averages: electricity in kWh per
sq ft and total energy (all fuels) in GJ per sq ft. Territorial figures are
rougher than the provincial ones and should be read as order-of-magnitude.

Climate regions are evaluated in the order listed; the first whose pattern
matches the postal code wins. The final region of every province has no
pattern and matches everything.
"""

from __future__ import annotations

from homestimate.data.profile import ClimateRegion, ProvinceProfile
from homestimate.models.enums import ProvinceName

# Matches a second digit of 0, or any G/H/J code whose third letter is not
# H, I or O. Most of Quebec therefore classifies as rural.
_QUEBEC_RURAL_PATTERN = r"^.0|^[GHJ][1-9][ABCDEFGJKLMNPQRSTUVWXYZ]"

PROVINCE_PROFILES: dict[ProvinceName, ProvinceProfile] = {
    ProvinceName.NEWFOUNDLAND_AND_LABRADOR: ProvinceProfile(
        name=ProvinceName.NEWFOUNDLAND_AND_LABRADOR,
        abbreviation="NL",
        postal_prefixes=("A",),
        urban_house_size=1400,
        rural_house_size=1900,
        urban_window_ratio=5,
        rural_window_ratio=7,
        electricity_per_sf=9.47,
        total_energy_per_sf=0.0431,
        seasonal_factor=1.10,
        climate_regions=(
            ClimateRegion(name="coastal", factor=0.95, pattern=r"^A[1-9]"),
            ClimateRegion(name="inland", factor=1.05),
        ),
    ),
    ProvinceName.PRINCE_EDWARD_ISLAND: ProvinceProfile(
        name=ProvinceName.PRINCE_EDWARD_ISLAND,
        abbreviation="PE",
        postal_prefixes=("C",),
        urban_house_size=1300,
        rural_house_size=1800,
        urban_window_ratio=5,
        rural_window_ratio=7,
        electricity_per_sf=6.44,
        total_energy_per_sf=0.0467,
        seasonal_factor=1.05,
        climate_regions=(
            ClimateRegion(name="standard", factor=1.0),
        ),
    ),
    ProvinceName.NOVA_SCOTIA: ProvinceProfile(
        name=ProvinceName.NOVA_SCOTIA,
        abbreviation="NS",
        postal_prefixes=("B",),
        urban_house_size=1400,
        rural_house_size=1900,
        urban_window_ratio=5,
        rural_window_ratio=7,
        electricity_per_sf=6.86,
        total_energy_per_sf=0.0441,
        seasonal_factor=1.05,
        climate_regions=(
            ClimateRegion(name="coastal", factor=0.95, pattern=r"^B[3-9]"),
            ClimateRegion(name="inland", factor=1.05),
        ),
    ),
    ProvinceName.NEW_BRUNSWICK: ProvinceProfile(
        name=ProvinceName.NEW_BRUNSWICK,
        abbreviation="NB",
        postal_prefixes=("E",),
        urban_house_size=1500,
        rural_house_size=2000,
        urban_window_ratio=5,
        rural_window_ratio=7,
        electricity_per_sf=10.42,
        total_energy_per_sf=0.0428,
        seasonal_factor=1.10,
        climate_regions=(
            ClimateRegion(name="coastal", factor=0.95, pattern=r"^E[12]"),
            ClimateRegion(name="inland", factor=1.05),
        ),
    ),
    ProvinceName.QUEBEC: ProvinceProfile(
        name=ProvinceName.QUEBEC,
        abbreviation="QC",
        postal_prefixes=("G", "H", "J"),
        urban_house_size=1300,
        rural_house_size=1700,
        urban_window_ratio=4,
        rural_window_ratio=6,
        electricity_per_sf=11.42,
        total_energy_per_sf=0.0455,
        seasonal_factor=1.10,
        rural_pattern=_QUEBEC_RURAL_PATTERN,
        climate_regions=(
            ClimateRegion(name="northern", factor=1.15, pattern=r"^G"),
            ClimateRegion(name="southern", factor=0.95, pattern=r"^H"),
            ClimateRegion(name="central", factor=1.05),
        ),
    ),
    ProvinceName.ONTARIO: ProvinceProfile(
        name=ProvinceName.ONTARIO,
        abbreviation="ON",
        postal_prefixes=("K", "L", "M", "N", "P"),
        urban_house_size=1400,
        rural_house_size=1800,
        urban_window_ratio=4,
        rural_window_ratio=6,
        electricity_per_sf=5.22,
        total_energy_per_sf=0.0558,
        seasonal_factor=1.10,
        climate_regions=(
            ClimateRegion(name="northern", factor=1.15, pattern=r"^P"),
            ClimateRegion(name="southern", factor=0.95, pattern=r"^[ML]"),
            ClimateRegion(name="central", factor=1.05),
        ),
    ),
    ProvinceName.MANITOBA: ProvinceProfile(
        name=ProvinceName.MANITOBA,
        abbreviation="MB",
        postal_prefixes=("R",),
        urban_house_size=1400,
        rural_house_size=2200,
        urban_window_ratio=4,
        rural_window_ratio=6,
        electricity_per_sf=7.17,
        total_energy_per_sf=0.0557,
        seasonal_factor=1.15,
        climate_regions=(
            ClimateRegion(name="northern", factor=1.2, pattern=r"^R0"),
            ClimateRegion(name="southern", factor=1.0),
        ),
    ),
    ProvinceName.SASKATCHEWAN: ProvinceProfile(
        name=ProvinceName.SASKATCHEWAN,
        abbreviation="SK",
        postal_prefixes=("S",),
        urban_house_size=1600,
        rural_house_size=2600,
        urban_window_ratio=5,
        rural_window_ratio=7,
        electricity_per_sf=4.11,
        total_energy_per_sf=0.0596,
        seasonal_factor=1.15,
        climate_regions=(
            ClimateRegion(name="northern", factor=1.2, pattern=r"^S[09]"),
            ClimateRegion(name="southern", factor=1.0),
        ),
    ),
    ProvinceName.ALBERTA: ProvinceProfile(
        name=ProvinceName.ALBERTA,
        abbreviation="AB",
        postal_prefixes=("T",),
        urban_house_size=1800,
        rural_house_size=2400,
        urban_window_ratio=5,
        rural_window_ratio=7,
        electricity_per_sf=3.58,
        total_energy_per_sf=0.0677,
        seasonal_factor=1.15,
        climate_regions=(
            ClimateRegion(name="northern", factor=1.2, pattern=r"^T[01]"),
            ClimateRegion(name="southern", factor=1.0),
        ),
    ),
    ProvinceName.BRITISH_COLUMBIA: ProvinceProfile(
        name=ProvinceName.BRITISH_COLUMBIA,
        abbreviation="BC",
        postal_prefixes=("V",),
        urban_house_size=1500,
        rural_house_size=2200,
        urban_window_ratio=6,
        rural_window_ratio=8,
        electricity_per_sf=5.47,
        total_energy_per_sf=0.0492,
        seasonal_factor=1.05,
        climate_regions=(
            # Vancouver and Victoria
            ClimateRegion(name="coastal", factor=0.9, pattern=r"^V[67]"),
            ClimateRegion(name="northern", factor=1.2, pattern=r"^V0"),
            ClimateRegion(name="interior", factor=1.1),
        ),
    ),
    ProvinceName.YUKON: ProvinceProfile(
        name=ProvinceName.YUKON,
        abbreviation="YT",
        postal_prefixes=("Y",),
        urban_house_size=1500,
        rural_house_size=1900,
        urban_window_ratio=4,
        rural_window_ratio=6,
        rural_window_floor=8,
        electricity_per_sf=6.10,
        total_energy_per_sf=0.0640,
        seasonal_factor=1.20,
        climate_regions=(
            ClimateRegion(name="whitehorse", factor=1.25, pattern=r"^Y1A"),
            ClimateRegion(name="northern", factor=1.35),
        ),
    ),
    ProvinceName.NORTHWEST_TERRITORIES: ProvinceProfile(
        name=ProvinceName.NORTHWEST_TERRITORIES,
        abbreviation="NT",
        # Every X code outside the Nunavut sortation areas.
        postal_prefixes=("X",),
        urban_house_size=1300,
        rural_house_size=1600,
        urban_window_ratio=4,
        rural_window_ratio=6,
        rural_window_floor=8,
        electricity_per_sf=4.85,
        total_energy_per_sf=0.0720,
        seasonal_factor=1.25,
        climate_regions=(
            ClimateRegion(name="yellowknife", factor=1.35, pattern=r"^X1A"),
            ClimateRegion(name="northern", factor=1.45),
        ),
    ),
    ProvinceName.NUNAVUT: ProvinceProfile(
        name=ProvinceName.NUNAVUT,
        abbreviation="NU",
        postal_prefixes=("X0A", "X0B", "X0C"),
        urban_house_size=1100,
        rural_house_size=1300,
        urban_window_ratio=4,
        rural_window_ratio=6,
        rural_window_floor=8,
        electricity_per_sf=4.40,
        total_energy_per_sf=0.0810,
        seasonal_factor=1.25,
        climate_regions=(
            ClimateRegion(name="arctic", factor=1.55),
        ),
    ),
}

# Province used whenever neither the caller nor the postal code identifies one.
DEFAULT_PROVINCE: ProvinceName = ProvinceName.ONTARIO

# Seasonal multiplier used when no province profile is available.
DEFAULT_SEASONAL_FACTOR: float = 1.10

DATA_VERSION = "2021.1"
