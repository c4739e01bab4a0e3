"""
Pydantic schemas for sitemap metadata declarations
"""

from .sitemap import (
    SitemapInclude, SitemapImage, SitemapVideo,
    DEFAULT_PRIORITY, DEFAULT_CHANGE_FREQUENCY
)

__all__ = [
    "SitemapInclude", "SitemapImage", "SitemapVideo",
    "DEFAULT_PRIORITY", "DEFAULT_CHANGE_FREQUENCY"
]
