"""NASA POWER API client for monthly meteorology.

Fetches monthly all-sky/clear-sky shortwave irradiance, 2 m temperature and
10 m wind speed from the NASA POWER ``temporal/monthly`` endpoint over a
multi-year window and reduces them to one record per calendar month.

Parsing is deliberately lenient: a month that is missing from the response
(or carries NASA's -999 fill value or a non-finite number) takes a default
instead of failing. A partial response therefore yields zero-irradiance
months rather than an error. Structural failures (transport, HTTP status, JSON, no parameter
block) raise :class:`DataSourceError`.
"""

from __future__ import annotations

import math
from collections import defaultdict
from typing import Any

import httpx

from .climatology import MONTHS, MonthlyMeteorology

NASA_POWER_URL = "https://power.larc.nasa.gov/api/temporal/monthly/point"

# Requested for completeness; only the four below are consumed
REQUEST_PARAMETERS = (
    "ALLSKY_KT",
    "ALLSKY_SFC_SW_DWN",
    "CLRSKY_SFC_SW_DWN",
    "ALLSKY_NKT",
    "ALLSKY_SFC_LW_DWN",
    "T2M",
    "T2M_MIN",
    "T2M_MAX",
    "T2M_RANGE",
    "WS10M",
    "WS10M_MIN",
    "WS10M_MAX",
)

GHI_KEY = "ALLSKY_SFC_SW_DWN"
DNI_KEY = "CLRSKY_SFC_SW_DWN"
TEMP_KEY = "T2M"
WIND_KEY = "WS10M"

FILL_VALUE = -999.0

# Defaults for months the response does not cover. Temperature and wind
# default to 20 degC and 5 m/s, never 0: a 0 degC month would get a 10%
# cold-weather boost in the temperature correction.
DEFAULT_IRRADIANCE = 0.0
DEFAULT_TEMPERATURE = 20.0
DEFAULT_WIND_SPEED = 5.0

# No diffuse parameter is requested; estimate it from GHI
DIFFUSE_FRACTION = 0.3


class DataSourceError(RuntimeError):
    """The meteorological data source could not be fetched or parsed."""


async def fetch_nasa_power_monthly(
    lat: float,
    lon: float,
    *,
    start_year: int = 2020,
    end_year: int = 2022,
    url: str = NASA_POWER_URL,
    timeout: float = 30.0,
    client: httpx.AsyncClient | None = None,
) -> list[MonthlyMeteorology]:
    """Fetch monthly meteorology from NASA POWER.

    Args:
        lat: Latitude (-90 to 90)
        lon: Longitude (-180 to 180)
        start_year: First year of the averaging window
        end_year: Last year of the averaging window
        url: Endpoint URL
        timeout: Request timeout in seconds (ignored when ``client`` is given)
        client: Optional pre-configured client, e.g. with a mock transport

    Returns:
        12 MonthlyMeteorology records, January..December

    Raises:
        DataSourceError: on transport, HTTP, or decoding failure
    """
    params = {
        "parameters": ",".join(REQUEST_PARAMETERS),
        "community": "RE",
        "longitude": lon,
        "latitude": lat,
        "format": "JSON",
        "start": start_year,
        "end": end_year,
    }

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=timeout) as own_client:
                response = await own_client.get(url, params=params)
        else:
            response = await client.get(url, params=params)
        response.raise_for_status()
        data = response.json()
    except httpx.HTTPError as exc:
        raise DataSourceError(f"NASA POWER request failed: {exc}") from exc
    except ValueError as exc:
        raise DataSourceError(f"NASA POWER returned invalid JSON: {exc}") from exc

    try:
        props = data["properties"]["parameter"]
    except (KeyError, TypeError) as exc:
        raise DataSourceError("NASA POWER response has no parameter block") from exc
    if not isinstance(props, dict):
        raise DataSourceError("NASA POWER parameter block is not a mapping")

    return parse_monthly_parameters(props)


def _monthly_means(raw: Any) -> dict[int, float]:
    """Reduce one parameter map to ``{month: value}``.

    Keys may be two-digit months (``"01"``) or ``"YYYYMM"``; the latter are
    averaged per month across years. ``"YYYY13"`` annual entries, fill
    values and numbers that are not finite as floats are ignored.
    """
    if not isinstance(raw, dict):
        return {}

    direct: dict[int, float] = {}
    by_year: dict[int, list[float]] = defaultdict(list)

    for key, value in raw.items():
        if not isinstance(value, (int, float)) or isinstance(value, bool):
            continue
        try:
            number = float(value)
        except OverflowError:
            continue
        if not math.isfinite(number) or number == FILL_VALUE:
            continue
        key = str(key)
        if len(key) == 2 and key.isdigit():
            direct[int(key)] = number
        elif len(key) == 6 and key.isdigit():
            by_year[int(key[4:])].append(number)

    means: dict[int, float] = {}
    for month in MONTHS:
        if month in direct:
            means[month] = direct[month]
        elif by_year.get(month):
            values = by_year[month]
            means[month] = sum(values) / len(values)
    return means


def parse_monthly_parameters(props: dict[str, Any]) -> list[MonthlyMeteorology]:
    """Build 12 monthly records from a NASA POWER ``parameter`` block.

    Missing months default to 0 irradiance, 20 degC and 5 m/s. Diffuse
    horizontal irradiance is estimated as 30% of GHI.
    """
    ghi = _monthly_means(props.get(GHI_KEY))
    dni = _monthly_means(props.get(DNI_KEY))
    temp = _monthly_means(props.get(TEMP_KEY))
    wind = _monthly_means(props.get(WIND_KEY))

    records = []
    for month in MONTHS:
        month_ghi = ghi.get(month, DEFAULT_IRRADIANCE)
        records.append(
            MonthlyMeteorology(
                month=month,
                global_horizontal_irradiance=month_ghi,
                direct_normal_irradiance=dni.get(month, DEFAULT_IRRADIANCE),
                diffuse_horizontal_irradiance=month_ghi * DIFFUSE_FRACTION,
                temperature=temp.get(month, DEFAULT_TEMPERATURE),
                wind_speed=wind.get(month, DEFAULT_WIND_SPEED),
            )
        )
    return records
