"""
API routes for the sitemap service
"""

# Import all routers to make them available
from . import pages, sitemap_catalog

__all__ = [
    "pages", "sitemap_catalog"
]
