import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from app.core.rate_limit import estimate_limiter
from app.schemas.yield_estimate import (
    MeteorologyResponse,
    YieldEstimateRequest,
    YieldEstimateResponse,
)
from app.services.yield_service import fetch_meteorology, get_provider, run_estimate
from engine.solar.validation import ValidationError
from engine.weather import MeteorologicalProvider

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/estimate",
    response_model=YieldEstimateResponse,
    summary="Estimate PV energy yield",
    description="Compute monthly and annual AC energy for a PV system at the given site. "
    "Panel efficiency and system losses are given in percent.",
)
async def estimate(
    body: YieldEstimateRequest,
    request: Request,
    provider: MeteorologicalProvider = Depends(get_provider),
):
    estimate_limiter.check(request)

    try:
        return await run_estimate(body, provider)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=str(exc),
        )
    except Exception:
        logger.exception("Yield estimate failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Error calculating solar potential. Please check your inputs and try again.",
        )


@router.get(
    "/meteorology",
    response_model=MeteorologyResponse,
    summary="Monthly meteorology for a site",
    description="Return the 12 monthly records the estimate would use, and whether they "
    "came from NASA POWER or the fallback climatology.",
)
async def meteorology(
    request: Request,
    latitude: float = Query(..., ge=-90.0, le=90.0, description="Site latitude"),
    longitude: float = Query(..., ge=-180.0, le=180.0, description="Site longitude"),
    provider: MeteorologicalProvider = Depends(get_provider),
):
    estimate_limiter.check(request)
    return await fetch_meteorology(latitude, longitude, provider)
