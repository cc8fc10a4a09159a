"""Annual roll-up of monthly PV energy results."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from engine.weather.climatology import MONTHS

from .pv_system import MonthlyResult

DAYS_PER_YEAR: int = 365

# Grid-average emission factor
CO2_KG_PER_KWH_GRID: float = 0.5


@dataclass(frozen=True)
class AnnualSummary:
    """Annual totals plus the twelve monthly results they were built from."""

    annual_energy: float        # kWh
    specific_yield: float       # kWh/kWp
    peak_sun_hours: float       # equivalent full-sun hours per day
    co2_offset: float           # kg CO2
    monthly_results: tuple[MonthlyResult, ...]


def summarize(
    monthly_results: Sequence[MonthlyResult],
    system_size: float,
) -> AnnualSummary:
    """Aggregate twelve monthly results into an :class:`AnnualSummary`.

    Args:
        monthly_results: Results for months 1..12, in order
        system_size: Installed capacity in kWp (> 0)

    Raises:
        ValueError: if the results are not exactly months 1..12 in order
    """
    months = tuple(r.month for r in monthly_results)
    if months != MONTHS:
        raise ValueError(
            f"Expected monthly results for months 1..12 in order, got {list(months)}"
        )

    annual_energy = sum(r.energy_production for r in monthly_results)

    return AnnualSummary(
        annual_energy=annual_energy,
        specific_yield=annual_energy / system_size,
        peak_sun_hours=annual_energy / (system_size * DAYS_PER_YEAR),
        co2_offset=annual_energy * CO2_KG_PER_KWH_GRID,
        monthly_results=tuple(monthly_results),
    )
