"""
Middleware components for the sitemap service
"""

from .sitemap_middleware import SitemapMiddleware

__all__ = [
    "SitemapMiddleware"
]
