from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Reverse-mode fallbacks when neither explicit values nor a segment exist
    default_cost_per_contact: float = 20.0
    default_average_order_value: float = 500.0

    daily_to_monthly_factor: int = 30
    max_contract_months: int = 60

    # Empty string -> bundled market segment table
    benchmark_config_path: str = ""

    class Config:
        env_file = ".env"
        env_prefix = "ROAS_"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
