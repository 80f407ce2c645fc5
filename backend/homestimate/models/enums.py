"""Enums for the Homestimate domain models."""

from enum import StrEnum


class ProvinceName(StrEnum):
    """Canadian provinces and territories, valued by their English name."""

    NEWFOUNDLAND_AND_LABRADOR = "Newfoundland and Labrador"
    PRINCE_EDWARD_ISLAND = "Prince Edward Island"
    NOVA_SCOTIA = "Nova Scotia"
    NEW_BRUNSWICK = "New Brunswick"
    QUEBEC = "Quebec"
    ONTARIO = "Ontario"
    MANITOBA = "Manitoba"
    SASKATCHEWAN = "Saskatchewan"
    ALBERTA = "Alberta"
    BRITISH_COLUMBIA = "British Columbia"
    YUKON = "Yukon"
    NORTHWEST_TERRITORIES = "Northwest Territories"
    NUNAVUT = "Nunavut"


class Setting(StrEnum):
    """Urban or rural classification of a postal code."""

    URBAN = "urban"
    RURAL = "rural"


class SizeSource(StrEnum):
    """Where the house size used for an estimate came from."""

    ESTIMATED = "estimated"
    OVERRIDE = "override"


class ProvinceSource(StrEnum):
    """How the province for an estimate was determined."""

    INPUT = "input"
    POSTAL_CODE = "postal_code"
    DEFAULT = "default"


class Confidence(StrEnum):
    """Confidence level for assumed values."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
