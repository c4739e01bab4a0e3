"""
Service layer for the sitemap service
"""

from .sitemap_registry import EndpointCatalog, SitemapGroup
from .sitemap_collector import UrlRecord, ImageRecord, VideoRecord, collect
from .sitemap_renderer import render
from .sitemap_generator import SitemapGenerator, SitemapConfigurationError

__all__ = [
    "EndpointCatalog",
    "SitemapGroup",
    "UrlRecord",
    "ImageRecord",
    "VideoRecord",
    "collect",
    "render",
    "SitemapGenerator",
    "SitemapConfigurationError"
]
