"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    listing_canvas_env: str = "development"
    listing_canvas_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Resource loading
    image_proxy_url: str = ""  # e.g. "https://app.example.com/api/proxy-image"
    resource_timeout_s: float = 8.0
    hero_timeout_s: float = 20.0
    max_image_bytes: int = 20 * 1024 * 1024

    # Fonts (empty = Pillow's bundled scalable default)
    font_regular_path: str = ""
    font_bold_path: str = ""

    # Branding
    default_logo_ref: str = ""
    default_secondary_logo_ref: str = ""
    default_agent_title: str = "REALTOR®"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
