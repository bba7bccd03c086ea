"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from the project root or backend/
_backend_dir = Path(__file__).resolve().parent.parent.parent
load_dotenv(_backend_dir.parent / ".env")
load_dotenv(_backend_dir / ".env")

from versneller.api.schemas import (  # noqa: E402
    BudgetRequest,
    CalculationRequest,
    CompareRequest,
)
from versneller.config import cors_origins_from_env  # noqa: E402
from versneller.engine import ENGINE_VERSION  # noqa: E402
from versneller.exceptions import VersnellerError  # noqa: E402

if TYPE_CHECKING:
    from versneller.engine import RetrofitEngine

logger = logging.getLogger(__name__)


def create_app(*, engine: RetrofitEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built engine for dependency injection (e.g. tests).
        If not provided, one is created from environment variables on the
        first request.
    """
    app = FastAPI(title="Versneller", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins_from_env(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.engine = engine

    def _get_engine() -> RetrofitEngine:
        eng: RetrofitEngine | None = app.state.engine
        if eng is not None:
            return eng
        from versneller.api.deps import create_engine

        eng = create_engine()
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/calculate
    # ------------------------------------------------------------------

    @app.post("/api/calculate")
    def calculate(request: CalculationRequest) -> dict[str, Any]:
        eng = _get_engine()
        try:
            scenario = eng.calculate_scenario(
                request.name,
                request.residence_id,
                request.type_id,
                request.building,
                request.measures,
                estimated_labor_hours=request.estimated_labor_hours,
            )
        except VersnellerError as exc:
            logger.warning("Calculation failed for %s: %s", request.residence_id, exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc

        return {
            "scenario": scenario.model_dump(mode="json"),
            "summary_dict": scenario.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # POST /api/compare
    # ------------------------------------------------------------------

    @app.post("/api/compare")
    def compare(request: CompareRequest) -> dict[str, Any]:
        eng = _get_engine()
        try:
            comparison = eng.compare_profiles(request.profiles)
        except VersnellerError as exc:
            logger.warning("Comparison rejected: %s", exc)
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return comparison.model_dump(mode="json")

    # ------------------------------------------------------------------
    # POST /api/budget
    # ------------------------------------------------------------------

    @app.post("/api/budget")
    def budget(request: BudgetRequest) -> dict[str, Any]:
        eng = _get_engine()
        breakdown = eng.budget(request.scenario, number_of_units=request.number_of_units)
        return breakdown.model_dump(mode="json")

    # ------------------------------------------------------------------
    # GET /api/sample-calculation
    # ------------------------------------------------------------------

    @app.get("/api/sample-calculation")
    def sample_calculation() -> dict[str, Any]:
        from versneller.data.seed import SAMPLE_BUILDING, SAMPLE_MEASURES

        eng = _get_engine()
        scenario = eng.calculate_scenario(
            "Voorbeeld renovatie",
            "voorbeeld-woning",
            "tussenwoning",
            SAMPLE_BUILDING,
            SAMPLE_MEASURES,
        )
        return {
            "scenario": scenario.model_dump(mode="json"),
            "summary_dict": scenario.to_summary_dict(),
            "building": SAMPLE_BUILDING.model_dump(mode="json"),
        }

    return app
