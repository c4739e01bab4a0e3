"""
XML serialization of sitemap records (sitemap 0.9 with image/video extensions)
"""
from datetime import date, datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence, Union
from xml.dom.minidom import parseString
from xml.etree.ElementTree import Element, SubElement, tostring

from app.services.sitemap_collector import ImageRecord, UrlRecord, VideoRecord

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
IMAGE_NS = "http://www.google.com/schemas/sitemap-image/1.1"
VIDEO_NS = "http://www.google.com/schemas/sitemap-video/1.1"

XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'


def format_date(value: Union[datetime, date]) -> str:
    """YYYY-MM-DD in UTC; naive datetimes are taken as UTC"""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return value.isoformat()


def format_decimal(value: float) -> str:
    """One decimal digit, midpoints rounded away from zero, '.' separator whatever the host locale"""
    quantized = Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return format(quantized, "f")


def format_number(value: float) -> str:
    """Shortest round-trip form, without a trailing '.0' on whole numbers"""
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def _child(parent: Element, tag: str, text: str) -> Element:
    element = SubElement(parent, tag)
    element.text = text
    return element


def _optional_child(parent: Element, tag: str, value, formatter=str) -> Optional[Element]:
    """Emit ``tag`` only when ``value`` is present (not None, not an empty string)"""
    if value is None or value == "":
        return None
    return _child(parent, tag, formatter(value))


def _image_element(parent: Element, image: ImageRecord) -> None:
    element = SubElement(parent, "image:image")
    _child(element, "image:loc", image.location)
    _optional_child(element, "image:title", image.title)
    _optional_child(element, "image:caption", image.caption)
    _optional_child(element, "image:license", image.license)


def _video_element(parent: Element, video: VideoRecord) -> None:
    element = SubElement(parent, "video:video")
    _child(element, "video:thumbnail_loc", video.thumbnail_url)
    _child(element, "video:title", video.title or "")
    _child(element, "video:description", video.description or "")
    _optional_child(element, "video:content_loc", video.content_url)
    _optional_child(element, "video:player_loc", video.player_url)
    _optional_child(element, "video:duration", video.duration_seconds)
    _optional_child(element, "video:expiration_date", video.expiration_date, format_date)
    _optional_child(element, "video:rating", video.rating, format_number)
    _optional_child(element, "video:view_count", video.view_count)
    _optional_child(element, "video:publication_date", video.publication_date, format_date)
    for tag in video.tags:
        _child(element, "video:tag", tag)
    _optional_child(element, "video:category", video.category)
    _optional_child(element, "video:family_friendly", video.family_friendly, format_bool)
    _optional_child(element, "video:allow_embed", video.allow_embed, format_bool)
    for country in video.countries:
        _child(element, "video:country", country)


def render(records: Sequence[UrlRecord], pretty: bool = False) -> str:
    """Serialize ``records`` into a sitemap document, in input order"""
    urlset = Element("urlset")
    urlset.set("xmlns", SITEMAP_NS)
    urlset.set("xmlns:image", IMAGE_NS)
    urlset.set("xmlns:video", VIDEO_NS)

    for record in records:
        url = SubElement(urlset, "url")
        _child(url, "loc", record.location)
        _child(url, "lastmod", format_date(record.last_modified))
        _child(url, "changefreq", record.change_frequency)
        _child(url, "priority", format_decimal(record.priority))
        for image in record.images:
            _image_element(url, image)
        for video in record.videos:
            _video_element(url, video)

    body = tostring(urlset, encoding="unicode")
    document = f"{XML_DECLARATION}\n{body}"
    if pretty:
        # toprettyxml rewrites the declaration without an encoding
        pretty_body = parseString(document).documentElement.toprettyxml(indent="  ")
        document = f"{XML_DECLARATION}\n{pretty_body}"
    return document
