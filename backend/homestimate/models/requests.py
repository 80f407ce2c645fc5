"""Request bodies accepted by the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from homestimate.models.postal import is_postal_code, normalize_postal_code

# Manual size adjustments are limited to this range (sq ft).
MIN_HOUSE_SIZE = 500
MAX_HOUSE_SIZE = 5000


class AddressEstimateRequest(BaseModel):
    """Estimate from a free-text address or postal code."""

    query: str = Field(min_length=1)
    house_size: int | None = Field(default=None, ge=MIN_HOUSE_SIZE, le=MAX_HOUSE_SIZE)


class PostalCodeEstimateRequest(BaseModel):
    """Estimate directly from a postal code, skipping geocoding."""

    postal_code: str
    province: str | None = None
    house_size: int | None = Field(default=None, ge=MIN_HOUSE_SIZE, le=MAX_HOUSE_SIZE)

    @field_validator("postal_code")
    @classmethod
    def postal_code_must_be_valid(cls, v: str) -> str:
        if not is_postal_code(v):
            msg = f"'{v}' is not a valid Canadian postal code"
            raise ValueError(msg)
        return normalize_postal_code(v)
