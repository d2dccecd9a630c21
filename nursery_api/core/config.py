"""Storefront API Configuration"""

import os
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

# config/.env at the project root
ENV_FILE = os.path.join(os.path.dirname(__file__), "..", "..", "config", ".env")


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Fatihas Floral Fantasy - Online Nursery Website Server"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5000

    # MongoDB Configuration
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db_name: str = "fatihas-floral-fantasy"
    mongodb_timeout_ms: int = 5000

    # Stripe Configuration
    stripe_secret_key: Optional[str] = None
    payment_currency: str = "usd"

    # CORS (comma-separated, "*" for any origin)
    cors_allowed_origins: str = "*"

    class Config:
        env_file = ENV_FILE
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        """Parsed list of allowed CORS origins"""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    @property
    def stripe_configured(self) -> bool:
        """Check if a Stripe secret key is configured"""
        return bool(self.stripe_secret_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
