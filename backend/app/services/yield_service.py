from app.config import settings
from app.schemas.yield_estimate import (
    MeteorologyResponse,
    MonthlyMeteorologyResponse,
    MonthlyResultResponse,
    YieldEstimateRequest,
    YieldEstimateResponse,
)
from engine.simulation.runner import YieldEstimate, estimate_yield
from engine.solar.validation import SystemParameters
from engine.weather import (
    MONTH_NAMES,
    ClimatologyProvider,
    MeteorologicalProvider,
    NasaPowerProvider,
)


def get_provider() -> MeteorologicalProvider:
    """Provider selected by settings; overridable as a FastAPI dependency."""
    if settings.offline_meteorology:
        return ClimatologyProvider()
    return NasaPowerProvider(
        url=settings.nasa_power_url,
        timeout=settings.nasa_power_timeout,
        start_year=settings.nasa_power_start_year,
        end_year=settings.nasa_power_end_year,
    )


def to_system_parameters(body: YieldEstimateRequest) -> SystemParameters:
    """Bind request fields to engine parameters, converting percentages to fractions."""
    return SystemParameters(
        latitude=body.latitude,
        longitude=body.longitude,
        system_size=body.system_size,
        panel_efficiency=body.panel_efficiency / 100,
        tilt_angle=body.tilt_angle,
        azimuth_angle=body.azimuth_angle,
        system_losses=body.system_losses / 100,
        albedo=body.albedo,
    )


def to_response(estimate: YieldEstimate) -> YieldEstimateResponse:
    summary = estimate.summary
    return YieldEstimateResponse(
        annual_energy=summary.annual_energy,
        specific_yield=summary.specific_yield,
        peak_sun_hours=summary.peak_sun_hours,
        co2_offset=summary.co2_offset,
        meteorology_source=estimate.meteorology_source,
        monthly=[
            MonthlyResultResponse(
                month=r.month,
                month_name=MONTH_NAMES[r.month - 1],
                global_horizontal_irradiance=r.global_horizontal_irradiance,
                direct_normal_irradiance=r.direct_normal_irradiance,
                diffuse_horizontal_irradiance=r.diffuse_horizontal_irradiance,
                plane_of_array_irradiance=r.plane_of_array_irradiance,
                energy_production=r.energy_production,
            )
            for r in summary.monthly_results
        ],
    )


async def run_estimate(
    body: YieldEstimateRequest, provider: MeteorologicalProvider
) -> YieldEstimateResponse:
    params = to_system_parameters(body)
    estimate = await estimate_yield(params, provider)
    return to_response(estimate)


async def fetch_meteorology(
    latitude: float, longitude: float, provider: MeteorologicalProvider
) -> MeteorologyResponse:
    records, source = await provider.fetch_with_source(latitude, longitude)
    return MeteorologyResponse(
        latitude=latitude,
        longitude=longitude,
        source=source,
        months=[
            MonthlyMeteorologyResponse(
                month=m.month,
                month_name=MONTH_NAMES[m.month - 1],
                global_horizontal_irradiance=m.global_horizontal_irradiance,
                direct_normal_irradiance=m.direct_normal_irradiance,
                diffuse_horizontal_irradiance=m.diffuse_horizontal_irradiance,
                temperature=m.temperature,
                wind_speed=m.wind_speed,
            )
            for m in records
        ],
    )
