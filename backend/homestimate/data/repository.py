"""Province data repository for looking up provincial profiles."""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from homestimate.models.enums import ProvinceName

if TYPE_CHECKING:
    from collections.abc import Iterable

    from homestimate.data.profile import ProvinceProfile


def _fold(value: str) -> str:
    """Lowercase and strip accents so 'Québec' and 'quebec' compare equal."""
    decomposed = unicodedata.normalize("NFKD", value.strip())
    return "".join(c for c in decomposed if not unicodedata.combining(c)).lower()


class ProvinceDataRepository:
    """Repository for looking up provincial profiles.

    Wraps in-memory profiles and resolves provinces from names,
    abbreviations and postal code prefixes.
    """

    def __init__(self, profiles: Iterable[ProvinceProfile]) -> None:
        self._profiles: dict[ProvinceName, ProvinceProfile] = {
            p.name: p for p in profiles
        }
        self._by_key: dict[str, ProvinceName] = {}
        for profile in self._profiles.values():
            self._by_key[_fold(profile.name.value)] = profile.name
            self._by_key[_fold(profile.abbreviation)] = profile.name
        # Longest prefixes first so 'X0A' wins over a bare 'X'.
        self._prefixes: list[tuple[str, ProvinceName]] = sorted(
            (
                (prefix, profile.name)
                for profile in self._profiles.values()
                for prefix in profile.postal_prefixes
            ),
            key=lambda item: len(item[0]),
            reverse=True,
        )

    def get_profile(self, province: ProvinceName) -> ProvinceProfile | None:
        return self._profiles.get(province)

    def all_profiles(self) -> list[ProvinceProfile]:
        return list(self._profiles.values())

    def find_province(self, value: str | None) -> ProvinceName | None:
        """Look up a province by English name or postal abbreviation.

        Matching is case- and accent-insensitive. Returns None for unknown
        or empty values.
        """
        if not value:
            return None
        return self._by_key.get(_fold(value))

    def province_for_postal_code(self, postal_code: str) -> ProvinceName | None:
        """Map a normalized postal code to its province by prefix.

        Returns None when no province claims the prefix.
        """
        for prefix, province in self._prefixes:
            if postal_code.startswith(prefix):
                return province
        return None
