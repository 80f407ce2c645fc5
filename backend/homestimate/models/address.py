"""Address resolution models produced by the geocoding collaborator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from homestimate.models.postal import normalize_postal_code

POSTAL_CODE_TYPE = "postal_code"
PROVINCE_TYPE = "administrative_area_level_1"


class AddressComponent(BaseModel):
    """A single typed part of a resolved address (street, city, province...)."""

    model_config = ConfigDict(frozen=True)

    long_name: str
    short_name: str
    types: list[str] = Field(default_factory=list)


class AddressResolution(BaseModel):
    """A normalized address returned by the geocoder."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    lat: float
    lon: float
    components: list[AddressComponent] = Field(default_factory=list)

    def find_component(self, component_type: str) -> AddressComponent | None:
        """Return the first component tagged with *component_type*."""
        for component in self.components:
            if component_type in component.types:
                return component
        return None

    @property
    def postal_code(self) -> str | None:
        """Canonical postal code (uppercase, no whitespace), if present."""
        component = self.find_component(POSTAL_CODE_TYPE)
        if component is None:
            return None
        return normalize_postal_code(component.long_name)

    @property
    def province_abbreviation(self) -> str | None:
        component = self.find_component(PROVINCE_TYPE)
        if component is None:
            return None
        return component.short_name


class AddressValidationResult(BaseModel):
    """Outcome of validating a free-text address or postal code.

    Exactly one of ``data`` (on success) or ``error`` (on failure) is set.
    """

    success: bool
    data: AddressResolution | None = None
    error: str | None = None

    @model_validator(mode="after")
    def data_or_error(self) -> AddressValidationResult:
        if self.success and self.data is None:
            msg = "A successful validation must carry address data"
            raise ValueError(msg)
        if not self.success and not self.error:
            msg = "A failed validation must carry an error message"
            raise ValueError(msg)
        return self

    @classmethod
    def ok(cls, data: AddressResolution) -> AddressValidationResult:
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, error: str) -> AddressValidationResult:
        return cls(success=False, error=error)
