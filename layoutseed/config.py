"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    layoutseed_env: str = "development"
    layoutseed_log_level: str = "info"

    # Generation
    layoutseed_max_depth: int | None = 64
    layoutseed_limit_policy: str = "truncate"
    layoutseed_seed: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
