"""
Builds sitemap URL records from the endpoint catalog
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import List, Optional, Union

from app.schemas.sitemap import (
    DEFAULT_CHANGE_FREQUENCY, DEFAULT_PRIORITY,
    SitemapImage, SitemapInclude, SitemapVideo
)
from app.services.sitemap_registry import EndpointCatalog, GroupEntry, HandlerEntry, handler_path

logger = logging.getLogger(__name__)

ROOT_CHANGE_FREQUENCY = "daily"
ROOT_PRIORITY = 1.0


@dataclass
class ImageRecord:
    location: str
    title: Optional[str] = None
    caption: Optional[str] = None
    license: Optional[str] = None


@dataclass
class VideoRecord:
    thumbnail_url: str
    title: str = ""
    description: str = ""
    content_url: Optional[str] = None
    player_url: Optional[str] = None
    duration_seconds: Optional[int] = None
    expiration_date: Optional[Union[datetime, date]] = None
    rating: Optional[float] = None
    view_count: Optional[int] = None
    publication_date: Optional[Union[datetime, date]] = None
    tags: List[str] = field(default_factory=list)
    category: Optional[str] = None
    family_friendly: Optional[bool] = None
    allow_embed: Optional[bool] = None
    countries: List[str] = field(default_factory=list)


@dataclass
class UrlRecord:
    """One <url> entry of the sitemap"""
    location: str
    last_modified: datetime
    change_frequency: str
    priority: float
    images: List[ImageRecord] = field(default_factory=list)
    videos: List[VideoRecord] = field(default_factory=list)


def resolve_include(handler: HandlerEntry, group: GroupEntry) -> Optional[SitemapInclude]:
    """Handler-level marker first, then the group's; None excludes the handler"""
    if handler.include is not None:
        return handler.include
    return group.include


def resolve_media_url(url: str, root_url: str) -> str:
    """Keep absolute URLs, anchor relative paths at the root URL"""
    if url.startswith("http"):
        return url
    return f"{root_url}/{url.lstrip('/')}"


def build_image(marker: SitemapImage, root_url: str) -> ImageRecord:
    return ImageRecord(
        location=resolve_media_url(marker.image_url, root_url),
        title=marker.title,
        caption=marker.caption,
        license=marker.license,
    )


def build_video(marker: SitemapVideo, root_url: str) -> VideoRecord:
    return VideoRecord(
        thumbnail_url=resolve_media_url(marker.thumbnail_url, root_url),
        title=marker.title,
        description=marker.description,
        content_url=marker.content_url,
        player_url=marker.player_url,
        duration_seconds=marker.duration_seconds,
        expiration_date=marker.expiration_date,
        rating=marker.rating,
        view_count=marker.view_count,
        publication_date=marker.publication_date,
        tags=list(marker.tags),
        category=marker.category,
        family_friendly=marker.family_friendly,
        allow_embed=marker.allow_embed,
        countries=list(marker.countries),
    )


def collect(root_url: str, catalog: EndpointCatalog, now: datetime) -> List[UrlRecord]:
    """Build the sitemap records for ``catalog``.

    The root URL is always the first record. Every candidate handler whose
    effective inclusion marker is set follows in catalog order; duplicates
    are kept.
    """
    urls = [
        UrlRecord(
            location=root_url,
            last_modified=now,
            change_frequency=ROOT_CHANGE_FREQUENCY,
            priority=ROOT_PRIORITY,
        )
    ]

    for group, handler in catalog:
        if not handler.is_candidate:
            continue

        include = resolve_include(handler, group)
        if include is None:
            continue

        urls.append(UrlRecord(
            location=f"{root_url}/{handler_path(group.name, handler.name)}",
            last_modified=now,
            change_frequency=include.change_frequency or DEFAULT_CHANGE_FREQUENCY,
            priority=include.priority if include.priority is not None else DEFAULT_PRIORITY,
            images=[build_image(image, root_url) for image in handler.images],
            videos=[build_video(video, root_url) for video in handler.videos],
        ))

    logger.debug(f"Collected {len(urls)} sitemap urls from {len(catalog)} handlers")
    return urls
