"""Yield estimate orchestrator.

Wires the validator, a meteorological provider, the monthly energy model
and the annual roll-up into one estimate. Only the meteorology fetch is
asynchronous; everything after it is a pure function of its inputs.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from engine.solar.annual import AnnualSummary, summarize
from engine.solar.pv_system import monthly_energy_series
from engine.solar.validation import SystemParameters, validate_parameters
from engine.weather.climatology import MONTHS, MonthlyMeteorology
from engine.weather.provider import MeteorologicalProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class YieldEstimate:
    """Annual summary together with the meteorology that produced it."""

    summary: AnnualSummary
    meteorology: tuple[MonthlyMeteorology, ...]
    meteorology_source: str


def calculate(
    params: SystemParameters,
    meteorology: Sequence[MonthlyMeteorology],
) -> AnnualSummary:
    """Compute the annual summary for already-fetched meteorology.

    ``params`` is assumed to be validated. ``meteorology`` must hold exactly
    one record per month, January..December.
    """
    months = tuple(m.month for m in meteorology)
    if months != MONTHS:
        raise ValueError(
            f"Expected meteorology for months 1..12 in order, got {list(months)}"
        )

    monthly_results = monthly_energy_series(params, meteorology)
    return summarize(monthly_results, params.system_size)


async def estimate_yield(
    params: SystemParameters,
    provider: MeteorologicalProvider,
) -> YieldEstimate:
    """Validate, fetch meteorology for the site, and compute the estimate.

    Raises:
        ValidationError: before any fetch, if a parameter is out of range
    """
    validate_parameters(params)

    meteorology, source = await provider.fetch_with_source(
        params.latitude, params.longitude
    )
    summary = calculate(params, meteorology)

    logger.info(
        "Yield estimate (%.4f, %.4f) %.1f kWp: %.0f kWh/year from %s data",
        params.latitude,
        params.longitude,
        params.system_size,
        summary.annual_energy,
        source,
        extra={
            "latitude": params.latitude,
            "longitude": params.longitude,
            "system_size": params.system_size,
            "annual_energy": summary.annual_energy,
            "meteorology_source": source,
        },
    )

    return YieldEstimate(
        summary=summary,
        meteorology=tuple(meteorology),
        meteorology_source=source,
    )


async def estimate_many(
    param_sets: Sequence[SystemParameters],
    provider: MeteorologicalProvider,
) -> list[YieldEstimate]:
    """Run independent estimates concurrently, preserving input order.

    Every parameter set is validated up front, so a bad entry fails the
    batch before any network traffic.
    """
    for params in param_sets:
        validate_parameters(params)

    return list(
        await asyncio.gather(*(estimate_yield(p, provider) for p in param_sets))
    )
