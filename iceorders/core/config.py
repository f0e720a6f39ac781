from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_prefix="ICE_", extra="ignore")

    app_name: str = "Ice Orders"
    env: str = "dev"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    database_url: str = "sqlite+pysqlite:///./iceorders.db"

    # Customer matching: names shorter than the min length must match exactly.
    similarity_threshold: int = Field(default=2, description="max edit distance between customer names")
    similarity_min_length: int = Field(default=4, description="shortest name compared by edit distance")

    silence_seconds: float = 2.0
    recent_orders_limit: int = 50

    def model_post_init(self, __context) -> None:
        if self.env.lower() == "dev":
            return

        invalid_items: list[str] = []
        if self.similarity_threshold < 0:
            invalid_items.append("ICE_SIMILARITY_THRESHOLD")
        if self.similarity_min_length < 1:
            invalid_items.append("ICE_SIMILARITY_MIN_LENGTH")
        if self.silence_seconds <= 0:
            invalid_items.append("ICE_SILENCE_SECONDS")

        if invalid_items:
            raise ValueError("invalid matching settings outside dev mode: " + ", ".join(sorted(invalid_items)))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
