"""Input parameters for a PV yield estimate and their range checks."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from numbers import Real


@dataclass(frozen=True)
class SystemParameters:
    """Site and system description for a yield estimate.

    ``panel_efficiency`` and ``system_losses`` are fractions (0.20, not 20).
    ``azimuth_angle`` uses 180 deg as the equator-facing orientation.
    ``albedo`` is range-checked but not used by the energy model.
    """

    latitude: float
    longitude: float
    system_size: float          # kWp
    panel_efficiency: float     # fraction
    tilt_angle: float           # deg from horizontal
    azimuth_angle: float        # deg, 180 = equator-facing
    system_losses: float        # fraction
    albedo: float = 0.2


# field -> (label, min, max), in the order checked
PARAMETER_BOUNDS: dict[str, tuple[str, float, float]] = {
    "latitude": ("Latitude", -90.0, 90.0),
    "longitude": ("Longitude", -180.0, 180.0),
    "system_size": ("System Size", 0.1, 1000.0),
    "panel_efficiency": ("Panel Efficiency", 0.1, 0.3),
    "tilt_angle": ("Tilt Angle", 0.0, 90.0),
    "azimuth_angle": ("Azimuth Angle", -180.0, 180.0),
    "system_losses": ("System Losses", 0.0, 0.5),
    "albedo": ("Albedo", 0.0, 1.0),
}


class ValidationError(ValueError):
    """A parameter is non-numeric or outside its allowed range."""

    def __init__(self, field: str, label: str, minimum: float, maximum: float):
        self.field = field
        self.label = label
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(f"{label} must be between {minimum:g} and {maximum:g}")


def validate_parameters(params: SystemParameters) -> None:
    """Raise :class:`ValidationError` for the first out-of-range field.

    Fields are checked in declaration order; NaN and non-numeric values
    fail the same way as out-of-range ones.
    """
    for f in fields(params):
        label, lo, hi = PARAMETER_BOUNDS[f.name]
        value = getattr(params, f.name)
        if (
            isinstance(value, bool)
            or not isinstance(value, Real)
            or math.isnan(value)
            or value < lo
            or value > hi
        ):
            raise ValidationError(f.name, label, lo, hi)
