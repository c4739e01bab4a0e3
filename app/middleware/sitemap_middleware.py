"""
Middleware serving the generated sitemap.xml
"""
import logging
import time
from typing import Callable, Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.services.sitemap_generator import SitemapConfigurationError, SitemapGenerator
from app.services.sitemap_registry import EndpointCatalog

logger = logging.getLogger(__name__)

SITEMAP_MEDIA_TYPE = "application/xml"


class SitemapMiddleware(BaseHTTPMiddleware):
    """Answers requests for the sitemap path; everything else passes through.

    Register it on the app with the site's root URL and the endpoint catalog::

        app.add_middleware(SitemapMiddleware, root_url="https://example.com", catalog=catalog)
    """

    def __init__(
        self,
        app,
        root_url: Optional[str] = None,
        catalog: Optional[EndpointCatalog] = None,
        generator: Optional[SitemapGenerator] = None,
        path: str = "/sitemap.xml",
        pretty: bool = False
    ):
        super().__init__(app)
        if generator is None:
            if not root_url:
                raise SitemapConfigurationError("SitemapMiddleware needs a root_url or a generator")
            generator = SitemapGenerator(root_url, catalog or EndpointCatalog(), pretty=pretty)

        self.generator = generator
        self.path = path.lower()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path.lower() != self.path:
            return await call_next(request)

        start_time = time.time()
        urls = self.generator.build_urls()
        sitemap = self.generator.render_urls(urls)
        process_time = time.time() - start_time

        logger.info(f"Served sitemap with {len(urls)} urls in {process_time:.3f}s")
        return Response(content=sitemap, media_type=SITEMAP_MEDIA_TYPE)
