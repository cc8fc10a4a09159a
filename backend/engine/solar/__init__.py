"""
Solar PV engine module.

Provides input validation, a simplified solar-noon position model,
plane-of-array transfer, the monthly energy model and the annual roll-up
used for monthly yield estimates.
"""

from .validation import PARAMETER_BOUNDS, SystemParameters, ValidationError, validate_parameters
from .irradiance import (
    incidence_modifier,
    midday_elevation,
    plane_of_array_irradiance,
    solar_declination,
)
from .pv_system import MonthlyResult, monthly_energy, monthly_energy_series, temperature_correction
from .annual import AnnualSummary, summarize

__all__ = [
    # validation
    "PARAMETER_BOUNDS",
    "SystemParameters",
    "ValidationError",
    "validate_parameters",
    # irradiance
    "solar_declination",
    "midday_elevation",
    "incidence_modifier",
    "plane_of_array_irradiance",
    # pv_system
    "MonthlyResult",
    "temperature_correction",
    "monthly_energy",
    "monthly_energy_series",
    # annual
    "AnnualSummary",
    "summarize",
]
