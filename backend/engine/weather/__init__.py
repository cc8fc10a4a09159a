"""Weather data module (NASA POWER client, fallback climatology, providers)."""

from .climatology import MONTH_NAMES, MONTHS, MonthlyMeteorology, fallback_climatology
from .nasa_power import DataSourceError, fetch_nasa_power_monthly, parse_monthly_parameters
from .provider import (
    SOURCE_FALLBACK,
    SOURCE_NASA_POWER,
    ClimatologyProvider,
    MeteorologicalProvider,
    NasaPowerProvider,
)

__all__ = [
    "MONTHS",
    "MONTH_NAMES",
    "MonthlyMeteorology",
    "fallback_climatology",
    "DataSourceError",
    "fetch_nasa_power_monthly",
    "parse_monthly_parameters",
    "MeteorologicalProvider",
    "ClimatologyProvider",
    "NasaPowerProvider",
    "SOURCE_NASA_POWER",
    "SOURCE_FALLBACK",
]
