"""Configuration settings for video scraper."""

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Result limits
    default_limit: int = 1  # videos returned when no limit is given
    max_limit: int = 4  # most videos a caller can request

    # Result cache
    cache_ttl_seconds: float = 12 * 60 * 60  # 12 hours

    # Rate limiting (fixed window, per client)
    rate_limit_enabled: bool = True
    rate_limit_max: int = 20  # requests per window
    rate_limit_window_seconds: float = 60.0

    # Upstream
    search_url: str = "https://www.youtube.com/results"
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36"
    )
    fetch_timeout_seconds: float = 10.0

    # Logging
    log_level: str = "INFO"

    @field_validator(
        "default_limit",
        "max_limit",
        "cache_ttl_seconds",
        "rate_limit_max",
        "rate_limit_window_seconds",
    )
    @classmethod
    def _must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"must be positive, got {v!r}")
        return v

    @model_validator(mode="after")
    def _default_within_max(self) -> "Settings":
        if self.default_limit > self.max_limit:
            raise ValueError(
                f"default_limit ({self.default_limit}) exceeds max_limit ({self.max_limit})"
            )
        return self


settings = Settings()
