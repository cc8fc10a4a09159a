from pydantic import BaseModel, Field


class YieldEstimateRequest(BaseModel):
    latitude: float = Field(description="Site latitude in degrees, -90 to 90")
    longitude: float = Field(description="Site longitude in degrees, -180 to 180")
    system_size: float = Field(default=10.0, description="Installed capacity in kWp")
    panel_efficiency: float = Field(
        default=20.0, description="Panel efficiency in percent (10-30)"
    )
    tilt_angle: float = Field(default=20.0, description="Panel tilt from horizontal, degrees")
    azimuth_angle: float = Field(
        default=180.0, description="Panel azimuth in degrees, 180 = equator-facing"
    )
    system_losses: float = Field(default=14.0, description="System losses in percent (0-50)")
    albedo: float = Field(
        default=0.2, description="Ground albedo (0-1). Validated, not yet used by the model."
    )


class MonthlyResultResponse(BaseModel):
    month: int
    month_name: str
    global_horizontal_irradiance: float
    direct_normal_irradiance: float
    diffuse_horizontal_irradiance: float
    plane_of_array_irradiance: float
    energy_production: float


class YieldEstimateResponse(BaseModel):
    annual_energy: float
    specific_yield: float
    peak_sun_hours: float
    co2_offset: float
    meteorology_source: str
    monthly: list[MonthlyResultResponse]


class MonthlyMeteorologyResponse(BaseModel):
    month: int
    month_name: str
    global_horizontal_irradiance: float
    direct_normal_irradiance: float
    diffuse_horizontal_irradiance: float
    temperature: float
    wind_speed: float


class MeteorologyResponse(BaseModel):
    latitude: float
    longitude: float
    source: str
    months: list[MonthlyMeteorologyResponse]
