"""
Configuration settings for the sitemap service
"""

import os
from typing import List
from pydantic import validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings"""

    # Application
    APP_NAME: str = "SitemapService"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Sitemap
    SITEMAP_ROOT_URL: str = os.getenv("SITEMAP_ROOT_URL", "http://localhost:5000")
    SITEMAP_PATH: str = "/sitemap.xml"
    SITEMAP_PRETTY_PRINT: bool = False

    # Security
    ALLOWED_HOSTS: List[str] = ["*"]
    ALLOWED_ORIGINS: List[str] = ["*"]

    @validator("SITEMAP_ROOT_URL")
    def validate_root_url(cls, v):
        v = (v or "").strip().rstrip("/")
        if not v:
            raise ValueError("SITEMAP_ROOT_URL must not be empty")
        if not v.startswith(("http://", "https://")):
            raise ValueError("SITEMAP_ROOT_URL must be an absolute http(s) URL")
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create global settings instance
settings = Settings()
