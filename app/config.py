"""All settings, loaded from the .env file."""
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # App
    app_url: str = "http://localhost:8000"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Extraction behavior
    notes_review_threshold: int = 200  # chars of input before "review recommended" kicks in
    max_thread_chars: int = 200_000
    simulated_latency_ms: int = 0  # feeds the client progress indicator; 0 disables

    # Inbox forwarding (stub only, nothing polls this address)
    forwarding_address: str = "vendor-analysis@example.com"

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_default: str = "120/minute"

    class Config:
        env_file = ".env"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
