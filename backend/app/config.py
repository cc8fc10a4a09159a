from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "SolarYield"
    cors_origins: str = "http://localhost:3000,http://localhost:5173"
    log_json: bool = False

    # NASA POWER
    nasa_power_url: str = "https://power.larc.nasa.gov/api/temporal/monthly/point"
    nasa_power_timeout: float = 30.0
    nasa_power_start_year: int = 2020
    nasa_power_end_year: int = 2022

    # Skip the network and use the latitude-based climatology
    offline_meteorology: bool = False

    # Requests per minute per client on the estimate endpoints
    estimate_rate_limit: int = 30
    # Key the limiter on X-Forwarded-For; enable only behind a trusted proxy
    trust_forwarded_for: bool = False


settings = Settings()
