"""Configuration management using Pydantic Settings"""

from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "finance-tracker"
    log_level: str = "INFO"

    # Savings defaults, used when a request omits them
    default_savings_percentage: float = Field(default=20.0, ge=0, le=100)
    scenario_percentages: List[float] = [10, 15, 20, 30, 40, 50]
    projection_horizons: List[int] = [1, 3, 5, 10]

    # Months generated per recurring source
    materialize_months: int = 12


settings = Settings()
