"""
PyTest configuration and fixtures
"""

import pytest
import sys
import os
from datetime import datetime, timezone
from xml.etree import ElementTree

# Add the parent directory to the path so we can import modules
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from app.schemas.sitemap import SitemapImage, SitemapInclude, SitemapVideo
from app.services.sitemap_registry import EndpointCatalog
from app.services.sitemap_renderer import IMAGE_NS, SITEMAP_NS, VIDEO_NS

ROOT_URL = "https://ex.com"
XML_NAMESPACES = {"sm": SITEMAP_NS, "image": IMAGE_NS, "video": VIDEO_NS}


@pytest.fixture
def root_url():
    return ROOT_URL


@pytest.fixture
def fixed_now():
    """Fixed clock reading for deterministic sitemaps"""
    return datetime(2024, 3, 5, 18, 30, tzinfo=timezone.utc)


@pytest.fixture
def empty_catalog():
    return EndpointCatalog()


@pytest.fixture
def sample_catalog():
    """One controller with a marked and an unmarked page, one with a group marker and media"""
    catalog = EndpointCatalog()
    catalog.register_handler(
        "HomeController", "About",
        include=SitemapInclude(priority=0.3, change_frequency="weekly")
    )
    catalog.register_handler("HomeController", "Preview")

    catalog.group("GalleryController", include=SitemapInclude())
    catalog.register_handler(
        "GalleryController", "Photos",
        images=[
            SitemapImage(image_url="/img/sunset.jpg", title="Sunset"),
            SitemapImage(image_url="https://cdn.ex.com/logo.png"),
        ],
        videos=[
            SitemapVideo(thumbnail_url="thumbs/intro.jpg", title="Intro", description="Tour"),
        ]
    )
    return catalog


@pytest.fixture
def parse_sitemap():
    """Parse a rendered sitemap string into its <urlset> element"""
    def _parse(document: str):
        return ElementTree.fromstring(document.encode("utf-8"))
    return _parse


@pytest.fixture
def ns():
    return XML_NAMESPACES


# Pytest configuration
def pytest_configure(config):
    """Configure pytest"""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection"""
    # Add unit marker to tests that don't have other markers
    for item in items:
        if not any(mark.name == 'integration' for mark in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
