"""Tests for engine.solar: solar position, POA transfer, and monthly energy."""

from __future__ import annotations

import math
from dataclasses import replace

import numpy as np
import pytest

from engine.solar.annual import AnnualSummary, summarize
from engine.solar.irradiance import (
    incidence_modifier,
    midday_elevation,
    plane_of_array_irradiance,
    solar_declination,
)
from engine.solar.pv_system import (
    MonthlyResult,
    monthly_energy,
    monthly_energy_series,
    temperature_correction,
)
from engine.weather.climatology import MonthlyMeteorology, fallback_climatology


# ======================================================================
# Solar position
# ======================================================================


class TestSolarPosition:
    """Declination uses the month number as a day-of-year stand-in."""

    def test_declination_matches_formula(self):
        for month in range(1, 13):
            expected = 23.45 * math.sin(2 * math.pi * (month - 81) / 365)
            assert float(solar_declination(month)) == pytest.approx(expected, rel=1e-12)

    def test_declination_stays_near_winter_minimum(self):
        """Months 1-12 all map to early-year days, so declination is ~-22..-23 deg."""
        decl = solar_declination(np.arange(1, 13))
        assert np.all(decl < -21.0)
        assert np.all(decl >= -23.45)

    def test_elevation_equator_at_equinox(self):
        assert float(midday_elevation(0.0, 0.0)) == pytest.approx(90.0)

    def test_elevation_is_complement_of_zenith_distance(self):
        """At solar noon, elevation = 90 - |lat - decl|."""
        assert float(midday_elevation(35.0, -23.0)) == pytest.approx(32.0, abs=1e-9)
        assert float(midday_elevation(-33.9, -22.0)) == pytest.approx(78.1, abs=1e-9)

    def test_elevation_vectorised(self):
        decl = solar_declination(np.arange(1, 13))
        elev = midday_elevation(35.0, decl)
        assert elev.shape == (12,)
        assert np.all((elev > 30.0) & (elev < 35.0))


# ======================================================================
# Plane-of-array transfer
# ======================================================================


class TestIncidenceModifier:
    def test_equator_facing_is_cos_of_elevation_minus_tilt(self):
        mod = float(incidence_modifier(32.0, 20.0, 180.0))
        assert mod == pytest.approx(math.cos(math.radians(12.0)))

    def test_flat_panel_gets_cos_elevation(self):
        mod = float(incidence_modifier(40.0, 0.0, 180.0))
        assert mod == pytest.approx(math.cos(math.radians(40.0)))

    def test_back_of_panel_clamps_to_zero(self):
        """Facing away from the sun drives the cosine negative; modifier is 0."""
        assert float(incidence_modifier(32.0, 20.0, 0.0)) == 0.0

    def test_vertical_panel_ignores_azimuth(self):
        """At 90 deg tilt the azimuth term vanishes, leaving sin(elevation)."""
        for azimuth in (-90.0, 0.0, 180.0):
            mod = float(incidence_modifier(10.0, 90.0, azimuth))
            assert mod == pytest.approx(math.sin(math.radians(10.0)))

    def test_modifier_always_in_unit_interval(self):
        elevations = np.linspace(-90.0, 90.0, 37)
        for tilt in (0.0, 15.0, 45.0, 90.0):
            for azimuth in (-180.0, -90.0, 0.0, 90.0, 180.0):
                mod = incidence_modifier(elevations, tilt, azimuth)
                assert np.all(mod >= 0.0)
                assert np.all(mod <= 1.0)
                assert np.all(np.isfinite(mod))

    def test_poa_scales_ghi(self):
        ghi = np.array([2.0, 4.0, 6.0])
        poa = plane_of_array_irradiance(ghi, 32.0, 20.0, 180.0)
        np.testing.assert_allclose(poa, ghi * math.cos(math.radians(12.0)))

    def test_poa_never_exceeds_ghi(self):
        poa = plane_of_array_irradiance(5.0, np.linspace(-30, 90, 25), 30.0, 150.0)
        assert np.all(poa <= 5.0)
        assert np.all(poa >= 0.0)


# ======================================================================
# Monthly energy model
# ======================================================================


def _reference_energy(params, met: MonthlyMeteorology) -> float:
    """Scalar re-statement of the monthly energy formula."""
    decl = 23.45 * math.sin(2 * math.pi * (met.month - 81) / 365)
    lat = math.radians(params.latitude)
    d = math.radians(decl)
    elev = math.asin(math.sin(lat) * math.sin(d) + math.cos(lat) * math.cos(d))
    tilt = math.radians(params.tilt_angle)
    az = math.radians(params.azimuth_angle - 180)
    inc = math.acos(
        math.sin(elev) * math.sin(tilt) + math.cos(elev) * math.cos(tilt) * math.cos(az)
    )
    poa = met.global_horizontal_irradiance * max(0.0, math.cos(inc))
    temp_corr = 1 - 0.004 * (met.temperature - 25)
    dc = poa * params.system_size * 1000 * params.panel_efficiency * temp_corr / 1000
    ac = dc * (1 - params.system_losses)
    return ac * 30


class TestTemperatureCorrection:
    def test_unity_at_stc(self):
        assert float(temperature_correction(25.0)) == pytest.approx(1.0)

    def test_derates_when_hot(self):
        assert float(temperature_correction(35.0)) == pytest.approx(0.96)

    def test_boosts_when_cold(self):
        assert float(temperature_correction(0.0)) == pytest.approx(1.10)


class TestMonthlyEnergy:
    def test_matches_reference_formula(self, la_system, la_meteorology):
        results = monthly_energy_series(la_system, la_meteorology)
        for result, met in zip(results, la_meteorology):
            assert result.energy_production == pytest.approx(
                _reference_energy(la_system, met), rel=1e-12
            )

    def test_single_month_matches_series(self, la_system, la_meteorology):
        series = monthly_energy_series(la_system, la_meteorology)
        single = monthly_energy(la_system, la_meteorology[5])
        assert single.month == 6
        assert single.energy_production == pytest.approx(series[5].energy_production)

    def test_irradiance_carried_through(self, la_system, la_meteorology):
        result = monthly_energy(la_system, la_meteorology[0])
        met = la_meteorology[0]
        assert result.month == 1
        assert result.global_horizontal_irradiance == met.global_horizontal_irradiance
        assert result.direct_normal_irradiance == met.direct_normal_irradiance
        assert result.diffuse_horizontal_irradiance == met.diffuse_horizontal_irradiance

    def test_flat_month_at_stc(self, la_system, flat_meteorology):
        """At 25 degC: E = POA * kWp * eff * (1 - losses) * 30."""
        result = monthly_energy(la_system, flat_meteorology[0])
        expected = result.plane_of_array_irradiance * 10.0 * 0.20 * 0.86 * 30
        assert result.energy_production == pytest.approx(expected)

    def test_energy_scales_linearly_with_size(self, la_system, la_meteorology):
        small = monthly_energy(la_system, la_meteorology[3])
        big = monthly_energy(replace(la_system, system_size=20.0), la_meteorology[3])
        assert big.energy_production == pytest.approx(2 * small.energy_production)

    def test_losses_reduce_energy(self, la_system, la_meteorology):
        lossless = monthly_energy(replace(la_system, system_losses=0.0), la_meteorology[3])
        lossy = monthly_energy(replace(la_system, system_losses=0.5), la_meteorology[3])
        assert lossy.energy_production == pytest.approx(0.5 * lossless.energy_production)

    def test_albedo_does_not_change_output(self, la_system, la_meteorology):
        a = monthly_energy_series(replace(la_system, albedo=0.0), la_meteorology)
        b = monthly_energy_series(replace(la_system, albedo=1.0), la_meteorology)
        assert [r.energy_production for r in a] == [r.energy_production for r in b]

    def test_panel_facing_away_produces_zero(self, la_system, la_meteorology):
        results = monthly_energy_series(replace(la_system, azimuth_angle=0.0), la_meteorology)
        assert all(r.energy_production == 0.0 for r in results)

    def test_energy_never_negative(self, la_meteorology, la_system):
        for lat in (-90.0, -45.0, 0.0, 45.0, 90.0):
            for tilt in (0.0, 45.0, 90.0):
                for az in (-180.0, -90.0, 0.0, 90.0, 180.0):
                    params = replace(la_system, latitude=lat, tilt_angle=tilt, azimuth_angle=az)
                    for r in monthly_energy_series(params, fallback_climatology(lat)):
                        assert r.energy_production >= 0.0
                        assert math.isfinite(r.energy_production)

    def test_empty_input(self, la_system):
        assert monthly_energy_series(la_system, []) == []


# ======================================================================
# Annual roll-up
# ======================================================================


class TestSummarize:
    def _results(self, energies):
        return [
            MonthlyResult(
                month=m,
                global_horizontal_irradiance=5.0,
                direct_normal_irradiance=3.5,
                diffuse_horizontal_irradiance=1.5,
                plane_of_array_irradiance=4.8,
                energy_production=e,
            )
            for m, e in zip(range(1, 13), energies)
        ]

    def test_totals(self):
        summary = summarize(self._results([100.0] * 12), system_size=2.0)
        assert isinstance(summary, AnnualSummary)
        assert summary.annual_energy == 1200.0
        assert summary.specific_yield == 600.0
        assert summary.peak_sun_hours == pytest.approx(1200.0 / (2.0 * 365))
        assert summary.co2_offset == 600.0
        assert len(summary.monthly_results) == 12

    def test_annual_is_exact_sum(self):
        energies = [0.1 * (i + 1) + 1e-7 * i for i in range(12)]
        summary = summarize(self._results(energies), system_size=3.3)
        assert summary.annual_energy == sum(energies)
        assert summary.co2_offset == sum(energies) * 0.5

    def test_rejects_eleven_months(self):
        with pytest.raises(ValueError, match="months 1..12"):
            summarize(self._results([1.0] * 11), system_size=1.0)

    def test_rejects_out_of_order_months(self):
        results = self._results([1.0] * 12)
        results[0], results[1] = results[1], results[0]
        with pytest.raises(ValueError):
            summarize(results, system_size=1.0)
