"""
Shared configuration for the content catalog
"""
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration"""
    model_config = SettingsConfigDict(env_prefix="APP_")

    name: str = "content-catalog-api"
    version: str = "1.0.0"
    environment: str = "dev"
    log_level: str = "INFO"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Security
    cors_origins: List[str] = ["*"]


class CatalogConfig(BaseSettings):
    """Catalog store and preset configuration"""
    model_config = SettingsConfigDict(env_prefix="CATALOG_")

    seed_sample_data: bool = True
    seed_file: Optional[str] = None  # JSON array of content payloads

    featured_min_rating: float = Field(8.0, ge=0, le=10)
    featured_limit: int = Field(6, ge=1)
    top_rated_limit: int = Field(10, ge=1)


class Config:
    """Main configuration class"""

    def __init__(self, app: Optional[AppConfig] = None, catalog: Optional[CatalogConfig] = None):
        self.app = app or AppConfig()
        self.catalog = catalog or CatalogConfig()

    @property
    def is_production(self) -> bool:
        return self.app.environment == "prod"

    @property
    def is_development(self) -> bool:
        return self.app.environment == "dev"


# Global config instance
config = Config()
