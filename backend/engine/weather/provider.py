"""Meteorological providers used by the yield runner.

A provider turns a site location into 12 monthly meteorology records. The
NASA POWER provider never raises on data-source problems: it logs the
failure and substitutes the fallback climatology, so callers always get
usable data.
"""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from .climatology import MonthlyMeteorology, fallback_climatology
from .nasa_power import NASA_POWER_URL, DataSourceError, fetch_nasa_power_monthly

logger = logging.getLogger(__name__)

SOURCE_NASA_POWER = "nasa_power"
SOURCE_FALLBACK = "fallback"


class MeteorologicalProvider(Protocol):
    """Anything that can supply monthly meteorology for a location."""

    async def fetch(self, latitude: float, longitude: float) -> list[MonthlyMeteorology]:
        ...

    async def fetch_with_source(
        self, latitude: float, longitude: float
    ) -> tuple[list[MonthlyMeteorology], str]:
        ...


class ClimatologyProvider:
    """Offline provider backed by the latitude-only fallback model."""

    async def fetch(self, latitude: float, longitude: float) -> list[MonthlyMeteorology]:
        return fallback_climatology(latitude)

    async def fetch_with_source(
        self, latitude: float, longitude: float
    ) -> tuple[list[MonthlyMeteorology], str]:
        return fallback_climatology(latitude), SOURCE_FALLBACK


class NasaPowerProvider:
    """NASA POWER provider with transparent fallback.

    Holds only request configuration, so one instance can serve
    concurrent requests.
    """

    def __init__(
        self,
        url: str = NASA_POWER_URL,
        timeout: float = 30.0,
        start_year: int = 2020,
        end_year: int = 2022,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.start_year = start_year
        self.end_year = end_year
        self.client = client

    async def fetch(self, latitude: float, longitude: float) -> list[MonthlyMeteorology]:
        records, _ = await self.fetch_with_source(latitude, longitude)
        return records

    async def fetch_with_source(
        self, latitude: float, longitude: float
    ) -> tuple[list[MonthlyMeteorology], str]:
        """Fetch records and report whether NASA data or the fallback was used."""
        try:
            records = await fetch_nasa_power_monthly(
                latitude,
                longitude,
                start_year=self.start_year,
                end_year=self.end_year,
                url=self.url,
                timeout=self.timeout,
                client=self.client,
            )
        except DataSourceError as exc:
            logger.warning(
                "NASA POWER unavailable for (%.4f, %.4f), using fallback climatology: %s",
                latitude,
                longitude,
                exc,
                extra={
                    "latitude": latitude,
                    "longitude": longitude,
                    "meteorology_source": SOURCE_FALLBACK,
                },
            )
            return fallback_climatology(latitude), SOURCE_FALLBACK
        return records, SOURCE_NASA_POWER
