"""Shared test fixtures for SolarYield engine and API tests."""

from __future__ import annotations

import pytest

from engine.solar.validation import SystemParameters
from engine.weather.climatology import MonthlyMeteorology, fallback_climatology


# ======================================================================
# System fixtures
# ======================================================================

@pytest.fixture
def la_system() -> SystemParameters:
    """10 kWp equator-facing rooftop system near Los Angeles."""
    return SystemParameters(
        latitude=35.0,
        longitude=-118.0,
        system_size=10.0,
        panel_efficiency=0.20,
        tilt_angle=20.0,
        azimuth_angle=180.0,
        system_losses=0.14,
        albedo=0.2,
    )


@pytest.fixture
def southern_system() -> SystemParameters:
    """5 kWp system in the southern hemisphere (Sydney-ish)."""
    return SystemParameters(
        latitude=-33.9,
        longitude=151.2,
        system_size=5.0,
        panel_efficiency=0.18,
        tilt_angle=30.0,
        azimuth_angle=0.0,
        system_losses=0.10,
        albedo=0.25,
    )


# ======================================================================
# Weather fixtures
# ======================================================================

@pytest.fixture
def la_meteorology() -> list[MonthlyMeteorology]:
    """Fallback climatology for latitude 35."""
    return fallback_climatology(35.0)


@pytest.fixture
def flat_meteorology() -> list[MonthlyMeteorology]:
    """12 identical months at 25 degC (no temperature derating)."""
    return [
        MonthlyMeteorology(
            month=m,
            global_horizontal_irradiance=5.0,
            direct_normal_irradiance=3.5,
            diffuse_horizontal_irradiance=1.5,
            temperature=25.0,
            wind_speed=5.0,
        )
        for m in range(1, 13)
    ]


def _nasa_power_payload(
    ghi: float = 5.5,
    clear_sky: float = 7.0,
    temperature: float = 18.0,
    wind: float = 3.2,
    years: tuple[int, ...] = (2020, 2021, 2022),
) -> dict:
    """NASA POWER monthly-endpoint style payload with YYYYMM keys."""

    def _series(value: float) -> dict[str, float]:
        series: dict[str, float] = {}
        for year in years:
            for month in range(1, 13):
                series[f"{year}{month:02d}"] = value
            series[f"{year}13"] = value  # annual entry
        return series

    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [-118.0, 35.0, 0.0]},
        "properties": {
            "parameter": {
                "ALLSKY_SFC_SW_DWN": _series(ghi),
                "CLRSKY_SFC_SW_DWN": _series(clear_sky),
                "T2M": _series(temperature),
                "WS10M": _series(wind),
            }
        },
    }


@pytest.fixture
def nasa_payload():
    """Factory for NASA POWER responses; call with overrides."""
    return _nasa_power_payload
