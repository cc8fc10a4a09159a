"""
Solar position and plane-of-array transfer for monthly yield estimates.

Both models work on a single solar-noon snapshot per month which is then
taken as representative of the whole day. This is an estimation-grade
approximation, not a diurnal irradiance integration.

Simplifications
---------------
- The declination formula is fed the month number (1-12) where a
  day-of-year would normally go, so declination stays near its winter
  minimum all year.
- Hour angle is fixed at zero (solar noon).
- No ground-reflected (albedo) or separate diffuse term; the incidence
  modifier is applied to GHI directly.

All functions accept scalars or numpy arrays and work in degrees at the
call boundary.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Peak declination (deg) and the spring-equinox day offset
DECLINATION_AMPLITUDE: float = 23.45
EQUINOX_DAY_OFFSET: float = 81.0
DAYS_PER_YEAR: float = 365.0

# Panel azimuth that faces the equator
EQUATOR_FACING_AZIMUTH: float = 180.0


def solar_declination(month: ArrayLike) -> NDArray[np.float64]:
    """Solar declination in degrees for a month number used as day proxy.

    Parameters
    ----------
    month : array_like
        Month number(s), 1-12.

    Returns
    -------
    ndarray
        Declination in degrees.
    """
    day_proxy = np.asarray(month, dtype=np.float64)
    return DECLINATION_AMPLITUDE * np.sin(
        2.0 * np.pi * (day_proxy - EQUINOX_DAY_OFFSET) / DAYS_PER_YEAR
    )


def midday_elevation(
    latitude: float,
    declination: ArrayLike,
) -> NDArray[np.float64]:
    """Solar elevation at solar noon in degrees.

    Parameters
    ----------
    latitude : float
        Site latitude in degrees (positive north).
    declination : array_like
        Solar declination in degrees.

    Returns
    -------
    ndarray
        Elevation angle in degrees, [-90, 90].
    """
    lat_rad = np.radians(latitude)
    decl_rad = np.radians(np.asarray(declination, dtype=np.float64))
    hour_angle = 0.0  # solar noon

    sin_elevation = (
        np.sin(lat_rad) * np.sin(decl_rad)
        + np.cos(lat_rad) * np.cos(decl_rad) * np.cos(hour_angle)
    )
    sin_elevation = np.clip(sin_elevation, -1.0, 1.0)
    return np.degrees(np.arcsin(sin_elevation))


def incidence_modifier(
    elevation: ArrayLike,
    tilt: float,
    azimuth: float,
) -> NDArray[np.float64]:
    """Fraction of horizontal irradiance reaching the panel plane.

    Parameters
    ----------
    elevation : array_like
        Solar elevation in degrees.
    tilt : float
        Panel tilt from horizontal in degrees.
    azimuth : float
        Panel azimuth in degrees, 180 = equator-facing.

    Returns
    -------
    ndarray
        max(0, cos(incident angle)), always within [0, 1].
    """
    elev_r = np.radians(np.asarray(elevation, dtype=np.float64))
    tilt_r = np.radians(tilt)
    az_r = np.radians(azimuth - EQUATOR_FACING_AZIMUTH)

    cos_arg = (
        np.sin(elev_r) * np.sin(tilt_r)
        + np.cos(elev_r) * np.cos(tilt_r) * np.cos(az_r)
    )
    incident_angle = np.arccos(np.clip(cos_arg, -1.0, 1.0))

    # Sun behind the panel contributes nothing
    return np.maximum(0.0, np.cos(incident_angle))


def plane_of_array_irradiance(
    ghi: ArrayLike,
    elevation: ArrayLike,
    tilt: float,
    azimuth: float,
) -> NDArray[np.float64]:
    """Plane-of-array irradiance in the units of ``ghi`` (kWh/m^2/day).

    Parameters
    ----------
    ghi : array_like
        Global horizontal irradiance, kWh/m^2/day.
    elevation : array_like
        Solar elevation in degrees.
    tilt : float
        Panel tilt in degrees.
    azimuth : float
        Panel azimuth in degrees, 180 = equator-facing.
    """
    ghi = np.asarray(ghi, dtype=np.float64)
    return ghi * incidence_modifier(elevation, tilt, azimuth)
