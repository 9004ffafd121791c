"""Shopping cart configuration"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_PROMO_CODES: dict[str, float] = {"PROMO10": 0.10}


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    model_config = SettingsConfigDict(
        env_prefix="SHOPCART_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Shopping Cart"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Promo codes, code -> fractional discount rate.
    # From the environment as JSON: SHOPCART_PROMO_CODES='{"PROMO10": 0.1}'
    promo_codes: dict[str, float] = dict(DEFAULT_PROMO_CODES)

    # Carts idle longer than this are dropped by CartDatabase.cleanup_old_carts
    cart_max_age_hours: int = 24

    @field_validator("promo_codes")
    @classmethod
    def check_rates(cls, value: dict[str, float]) -> dict[str, float]:
        for code, rate in value.items():
            if not 0 <= rate < 1:
                raise ValueError(f"Discount rate for {code!r} must be in [0, 1), got {rate}")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
