"""Service configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from ``AUTOVINCI_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AUTOVINCI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service
    service_name: str = "autovinci-pricing"
    log_level: str = "INFO"
    log_json: bool = True
    cors_allow_origins: list[str] = ["*"]

    # Calculator defaults used when a request leaves them out
    default_rate_percent: float = 8.75
    default_tenure_months: int = 60
    default_down_payment_pct: float = 20.0


settings = Settings()
