from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Server
    PRISM_HOST: str = "0.0.0.0"
    PRISM_PORT: int = 3030
    LOG_LEVEL: str = "INFO"
    PUBLIC_DIR: str = "public"
    CORS_ORIGINS: str = "*"

    # Outbound requests
    USER_AGENT: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    REQUEST_TIMEOUT_SECONDS: float = 10.0
    NEWS_TIMEOUT_SECONDS: float = 10.0
    VIDEO_TIMEOUT_SECONDS: float = 10.0
    ENRICH_TIMEOUT_SECONDS: float = 5.0

    # Fill empty news thumbnails from each article's og:image
    ENRICH_THUMBNAILS: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
