"""
Sitemap marker schemas declared on page handlers and groups
"""
from datetime import date, datetime
from typing import List, Optional, Union
from pydantic import BaseModel, Field

DEFAULT_PRIORITY = 0.8
DEFAULT_CHANGE_FREQUENCY = "daily"


class SitemapInclude(BaseModel):
    """Opts a handler (or every handler of a group) into the sitemap.

    Fields left unset fall back to DEFAULT_PRIORITY / DEFAULT_CHANGE_FREQUENCY
    when the collector resolves them.
    """
    priority: Optional[float] = Field(None, description="Relative priority, conventionally 0.0-1.0")
    change_frequency: Optional[str] = Field(None, description="always, hourly, daily, weekly, monthly, yearly or never")

    class Config:
        frozen = True


class SitemapImage(BaseModel):
    """Image attached to a handler's sitemap entry"""
    image_url: str = Field(..., description="Absolute URL, or a path relative to the root URL")
    title: Optional[str] = None
    caption: Optional[str] = None
    license: Optional[str] = None

    class Config:
        frozen = True


class SitemapVideo(BaseModel):
    """Video attached to a handler's sitemap entry"""
    thumbnail_url: str = Field(..., description="Absolute URL, or a path relative to the root URL")
    title: str = ""
    description: str = ""
    content_url: Optional[str] = None
    player_url: Optional[str] = None
    duration_seconds: Optional[int] = None
    expiration_date: Optional[Union[datetime, date]] = None
    rating: Optional[float] = None
    view_count: Optional[int] = None
    publication_date: Optional[Union[datetime, date]] = None
    tags: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    family_friendly: Optional[bool] = None
    allow_embed: Optional[bool] = None
    countries: List[str] = Field(default_factory=list)

    class Config:
        frozen = True
