"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from homestimate.api.deps import cors_origins
from homestimate.exceptions import (
    AddressValidationError,
    GeocodingError,
    InvalidQueryError,
)
from homestimate.models.requests import (  # noqa: TCH001 (FastAPI resolves at runtime)
    AddressEstimateRequest,
    PostalCodeEstimateRequest,
)

if TYPE_CHECKING:
    from homestimate.engine import HouseEstimator
    from homestimate.services.pipeline import EstimationPipeline

logger = logging.getLogger(__name__)

API_VERSION = "0.1.0"

GEOCODING_UNAVAILABLE_ERROR = "Error validating address. Please try again."


def create_app(
    *,
    pipeline: EstimationPipeline | None = None,
    estimator: HouseEstimator | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    pipeline
        Optional pre-built pipeline for dependency injection (e.g. tests).
        If not provided, one is created from environment variables on first
        request to /api/estimate.
    estimator
        Optional pre-built estimator for the postal code and province
        endpoints. If not provided, one is created via
        create_default_estimator on first request.
    """
    app = FastAPI(title="Homestimate", version=API_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.pipeline = pipeline
    app.state.estimator = estimator

    def _get_pipeline() -> EstimationPipeline:
        pl: EstimationPipeline | None = app.state.pipeline
        if pl is not None:
            return pl
        # Lazy-create from environment
        from homestimate.api.deps import create_pipeline

        pl = create_pipeline()
        app.state.pipeline = pl
        return pl

    def _get_estimator() -> HouseEstimator:
        est: HouseEstimator | None = app.state.estimator
        if est is not None:
            return est
        from homestimate.factory import create_default_estimator

        est = create_default_estimator()
        app.state.estimator = est
        return est

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": API_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(request: AddressEstimateRequest) -> dict[str, Any]:
        try:
            pl = _get_pipeline()
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        try:
            result = pl.run(request.query, house_size_override=request.house_size)
        except (InvalidQueryError, AddressValidationError) as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        except GeocodingError as exc:
            logger.exception("Geocoding failed for %r", request.query)
            raise HTTPException(
                status_code=502, detail=GEOCODING_UNAVAILABLE_ERROR
            ) from exc

        return {
            "address": result.address.model_dump(mode="json"),
            "estimate": result.estimate.model_dump(mode="json"),
            "summary_dict": result.estimate.to_summary_dict(),
            "map_embed_url": result.map_embed_url,
            "processing_time_seconds": result.processing_time_seconds,
        }

    # ------------------------------------------------------------------
    # POST /api/estimate/postal-code
    # ------------------------------------------------------------------

    @app.post("/api/estimate/postal-code")
    def estimate_postal_code(request: PostalCodeEstimateRequest) -> dict[str, Any]:
        est = _get_estimator()
        result = est.estimate(
            request.postal_code,
            province=request.province,
            house_size_override=request.house_size,
        )
        return {
            "estimate": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # GET /api/provinces
    # ------------------------------------------------------------------

    @app.get("/api/provinces")
    def provinces() -> list[dict[str, Any]]:
        est = _get_estimator()
        return [profile.model_dump(mode="json") for profile in est.profiles()]

    return app
