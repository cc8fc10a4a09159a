"""Monthly meteorology records and the latitude-based fallback climatology.

The fallback model needs nothing but latitude, so it is used whenever
NASA POWER is unreachable and as the deterministic reference for tests.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

MONTHS: tuple[int, ...] = tuple(range(1, 13))

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Fallback model constants
_BASE_GHI_MAX = 7.0         # kWh/m^2/day at the equator
_BASE_GHI_MIN = 3.0         # floor for high latitudes
_BASE_GHI_LAT_SCALE = 15.0  # deg latitude per kWh/m^2/day
_SEASONAL_MAX = 0.5
_SEASONAL_LAT_SCALE = 90.0
_DIRECT_SHARE = 0.7
_DIFFUSE_SHARE = 0.3
_MEAN_TEMP_C = 20.0
_TEMP_SWING_C = 10.0
_TEMP_PEAK_MONTH = 7
_DEFAULT_WIND_MS = 5.0


@dataclass(frozen=True)
class MonthlyMeteorology:
    """Monthly-mean conditions for one calendar month.

    Irradiance values are daily totals in kWh/m^2/day.
    """

    month: int
    global_horizontal_irradiance: float
    direct_normal_irradiance: float
    diffuse_horizontal_irradiance: float
    temperature: float      # degC
    wind_speed: float       # m/s


def fallback_climatology(latitude: float) -> list[MonthlyMeteorology]:
    """Typical monthly meteorology derived from latitude alone.

    GHI falls off linearly with |latitude| down to a floor, with a cosine
    seasonal swing whose phase depends on the hemisphere. Temperature
    follows a fixed cosine peaking in July; wind is constant.

    Returns 12 records ordered January..December.
    """
    is_northern = latitude >= 0
    abs_lat = abs(latitude)

    base_ghi = max(_BASE_GHI_MIN, _BASE_GHI_MAX - abs_lat / _BASE_GHI_LAT_SCALE)
    seasonal_variation = min(_SEASONAL_MAX, abs_lat / _SEASONAL_LAT_SCALE)
    phase = 1 if is_northern else 7

    months = np.arange(1, 13, dtype=np.float64)
    seasonal_factor = 1.0 + seasonal_variation * np.cos(
        2.0 * np.pi * (months - phase) / 12.0
    )
    ghi = base_ghi * seasonal_factor
    temperature = _MEAN_TEMP_C + _TEMP_SWING_C * np.cos(
        2.0 * np.pi * (months - _TEMP_PEAK_MONTH) / 12.0
    )

    return [
        MonthlyMeteorology(
            month=m,
            global_horizontal_irradiance=float(ghi[i]),
            direct_normal_irradiance=float(ghi[i] * _DIRECT_SHARE),
            diffuse_horizontal_irradiance=float(ghi[i] * _DIFFUSE_SHARE),
            temperature=float(temperature[i]),
            wind_speed=_DEFAULT_WIND_MS,
        )
        for i, m in enumerate(MONTHS)
    ]
