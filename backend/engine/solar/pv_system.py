"""
Monthly PV energy model.

Chains solar position, plane-of-array transfer and a linear temperature
derating into AC energy per month. The twelve months are processed as
numpy vectors (no Python-level month loop in the maths).

Model
-----
    temp_correction = 1 - 0.004 * (T - 25)
    dc  = POA * system_size * panel_efficiency * temp_correction
    ac  = dc * (1 - system_losses)
    E_m = ac * 30

POA is a daily total (kWh/m^2/day), so ``dc`` and ``ac`` are kWh/day and
``E_m`` is kWh per month using a flat 30-day month. Panel efficiency is
applied on top of the POA-to-power conversion exactly as written above.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike, NDArray

from engine.weather.climatology import MonthlyMeteorology

from .irradiance import midday_elevation, plane_of_array_irradiance, solar_declination
from .validation import SystemParameters

# Temperature derating, referenced to STC cell temperature
TEMP_COEFFICIENT: float = 0.004     # per degC, fixed (not panel-specific)
STC_TEMPERATURE_C: float = 25.0

DAYS_PER_MONTH: int = 30


@dataclass(frozen=True)
class MonthlyResult:
    """Energy estimate for one month, with the irradiance inputs carried through."""

    month: int
    global_horizontal_irradiance: float
    direct_normal_irradiance: float
    diffuse_horizontal_irradiance: float
    plane_of_array_irradiance: float    # kWh/m^2/day
    energy_production: float            # kWh AC


def temperature_correction(temperature: ArrayLike) -> NDArray[np.float64]:
    """Linear output derating factor for ambient temperature in degC."""
    temperature = np.asarray(temperature, dtype=np.float64)
    return 1.0 - TEMP_COEFFICIENT * (temperature - STC_TEMPERATURE_C)


def monthly_energy_series(
    params: SystemParameters,
    meteorology: Sequence[MonthlyMeteorology],
) -> list[MonthlyResult]:
    """Estimate AC energy for each month in ``meteorology``.

    Parameters
    ----------
    params : SystemParameters
        Validated system description.
    meteorology : sequence of MonthlyMeteorology
        Monthly inputs; output order follows input order.

    Returns
    -------
    list of MonthlyResult
        One result per input month. Energies are never negative.
    """
    if not meteorology:
        return []

    months = np.array([m.month for m in meteorology], dtype=np.float64)
    ghi = np.array([m.global_horizontal_irradiance for m in meteorology], dtype=np.float64)
    temperature = np.array([m.temperature for m in meteorology], dtype=np.float64)

    declination = solar_declination(months)
    elevation = midday_elevation(params.latitude, declination)
    poa = plane_of_array_irradiance(
        ghi, elevation, params.tilt_angle, params.azimuth_angle
    )

    dc_energy = poa * params.system_size * params.panel_efficiency * temperature_correction(temperature)
    ac_energy = dc_energy * (1.0 - params.system_losses)
    energy = np.maximum(ac_energy * DAYS_PER_MONTH, 0.0)

    return [
        MonthlyResult(
            month=met.month,
            global_horizontal_irradiance=met.global_horizontal_irradiance,
            direct_normal_irradiance=met.direct_normal_irradiance,
            diffuse_horizontal_irradiance=met.diffuse_horizontal_irradiance,
            plane_of_array_irradiance=float(poa[i]),
            energy_production=float(energy[i]),
        )
        for i, met in enumerate(meteorology)
    ]


def monthly_energy(
    params: SystemParameters,
    meteorology: MonthlyMeteorology,
) -> MonthlyResult:
    """Estimate AC energy for a single month."""
    return monthly_energy_series(params, [meteorology])[0]
