"""
Sitemap generation service for SEO optimization
"""
from datetime import datetime, timezone
from typing import Callable, List, Optional

from app.services.sitemap_collector import UrlRecord, collect
from app.services.sitemap_registry import EndpointCatalog
from app.services.sitemap_renderer import render


class SitemapConfigurationError(ValueError):
    """Raised when the sitemap is configured without a usable root URL"""
    pass


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SitemapGenerator:
    """Service for generating XML sitemaps from the endpoint catalog"""

    def __init__(
        self,
        root_url: str,
        catalog: EndpointCatalog,
        clock: Optional[Callable[[], datetime]] = None,
        pretty: bool = False
    ):
        root_url = (root_url or "").rstrip("/")
        if not root_url:
            raise SitemapConfigurationError("Sitemap root URL must not be empty")

        self.root_url = root_url
        self.catalog = catalog
        self.clock = clock or utc_now
        self.pretty = pretty

    def build_urls(self) -> List[UrlRecord]:
        """Collect the sitemap records, reading the clock once"""
        return collect(self.root_url, self.catalog, self.clock())

    def render_urls(self, urls: List[UrlRecord]) -> str:
        return render(urls, pretty=self.pretty)

    def generate_sitemap(self) -> str:
        """Generate complete XML sitemap"""
        return self.render_urls(self.build_urls())
