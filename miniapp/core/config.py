"""Application configuration."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Admin mode
    admin_password: str

    # Restaurant
    restaurant_name: str = "Urban Lunch"

    # Catalog
    menu_file: Optional[str] = None  # Defaults to the packaged menu.yaml

    # Checkout
    amount_multiplier: int = 100  # Rubles -> kopecks
    clear_cart_on_checkout: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
