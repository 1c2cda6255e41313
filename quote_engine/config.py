"""
Application configuration using Pydantic Settings.
All environment-specific values are centralized here.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ── App ──────────────────────────────────────────────
    app_name: str = "Digitisation Quote Engine"
    debug: bool = False

    # ── Pricing ──────────────────────────────────────────
    default_scenario: str = "conservative"
    quote_cache_size: int = 128  # memoised (inputs, scenario_id) results

    # ── Baseline snapshot ────────────────────────────────
    baseline_dir: str = "./docs/baseline"
    baseline_filename: str = "current.json"

    # ── API ──────────────────────────────────────────────
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    cors_origins: list[str] = ["*"]

    # ── Logging ──────────────────────────────────────────
    log_level: str = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings (singleton)."""
    return Settings()
