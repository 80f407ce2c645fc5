"""Formatting helpers for estimate output.

Numbers are rounded for display the way a homeowner would read them
(e.g., '1,400 sq ft', '7,637 kWh/year').
"""

from __future__ import annotations


def format_square_feet(area: float) -> str:
    """Format a floor area as '1,400 sq ft'."""
    return f"{area:,.0f} sq ft"


def format_kwh(kwh: float) -> str:
    """Format annual electricity as '7,637 kWh/year'."""
    return f"{kwh:,.0f} kWh/year"


def format_energy_total(gj: float) -> str:
    """Format annual total energy as '81.64 GJ/year'."""
    return f"{gj:,.2f} GJ/year"
