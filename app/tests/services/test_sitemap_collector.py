"""
Tests for sitemap record collection from the endpoint catalog
"""

from datetime import date

from app.schemas.sitemap import SitemapImage, SitemapInclude, SitemapVideo
from app.services.sitemap_collector import collect, resolve_include, resolve_media_url
from app.services.sitemap_registry import EndpointCatalog, GroupEntry, HandlerEntry


def test_empty_catalog_yields_root_only(root_url, empty_catalog, fixed_now):
    urls = collect(root_url, empty_catalog, fixed_now)

    assert len(urls) == 1
    root = urls[0]
    assert root.location == root_url
    assert root.priority == 1.0
    assert root.change_frequency == "daily"
    assert root.last_modified == fixed_now
    assert root.images == []
    assert root.videos == []


def test_marked_handler_follows_root_and_unmarked_is_skipped(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.register_handler("HomeController", "About", include=SitemapInclude(priority=0.3, change_frequency="weekly"))
    catalog.register_handler("HomeController", "Preview")

    urls = collect(root_url, catalog, fixed_now)

    assert [url.location for url in urls] == [root_url, f"{root_url}/home/about"]
    assert urls[1].priority == 0.3
    assert urls[1].change_frequency == "weekly"
    assert urls[1].last_modified == fixed_now


def test_group_marker_includes_every_handler(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.group("BlogController", include=SitemapInclude(priority=0.6, change_frequency="monthly"))
    catalog.register_handler("BlogController", "Index")
    catalog.register_handler("BlogController", "Archive")

    urls = collect(root_url, catalog, fixed_now)

    assert [url.location for url in urls[1:]] == [f"{root_url}/blog/index", f"{root_url}/blog/archive"]
    assert all(url.priority == 0.6 for url in urls[1:])
    assert all(url.change_frequency == "monthly" for url in urls[1:])


def test_handler_marker_takes_precedence_over_group(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.group("BlogController", include=SitemapInclude(priority=0.6, change_frequency="monthly"))
    catalog.register_handler("BlogController", "Latest", include=SitemapInclude(priority=0.9, change_frequency="hourly"))

    urls = collect(root_url, catalog, fixed_now)

    assert urls[1].priority == 0.9
    assert urls[1].change_frequency == "hourly"


def test_unset_marker_fields_fall_back_to_defaults(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.register_handler("HomeController", "Contact", include=SitemapInclude())

    urls = collect(root_url, catalog, fixed_now)

    assert urls[1].priority == 0.8
    assert urls[1].change_frequency == "daily"


def test_zero_priority_is_kept(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.register_handler("HomeController", "Legal", include=SitemapInclude(priority=0.0))

    urls = collect(root_url, catalog, fixed_now)

    assert urls[1].priority == 0.0


def test_values_are_passed_through_unvalidated(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.register_handler("HomeController", "Odd", include=SitemapInclude(priority=-2.5, change_frequency="fortnightly"))

    urls = collect(root_url, catalog, fixed_now)

    assert urls[1].priority == -2.5
    assert urls[1].change_frequency == "fortnightly"


def test_non_candidate_handlers_are_skipped(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.group("HomeController", include=SitemapInclude())
    catalog.register_handler("HomeController", "__init__")
    catalog.register_handler("HomeController", "_helper")
    catalog.register_handler("HomeController", "Hidden", public=False)
    catalog.register_handler("HomeController", "Visible")

    urls = collect(root_url, catalog, fixed_now)

    assert [url.location for url in urls] == [root_url, f"{root_url}/home/visible"]


def test_duplicate_locations_are_not_deduplicated(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.register_handler("AController", "B", include=SitemapInclude(priority=0.1))
    catalog.register_handler("a", "b", include=SitemapInclude(priority=0.2))

    urls = collect(root_url, catalog, fixed_now)

    assert [url.location for url in urls[1:]] == [f"{root_url}/a/b", f"{root_url}/a/b"]
    assert [url.priority for url in urls[1:]] == [0.1, 0.2]


def test_catalog_order_is_preserved(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.register_handler("ZetaController", "Last", include=SitemapInclude())
    catalog.register_handler("AlphaController", "First", include=SitemapInclude())
    catalog.register_handler("ZetaController", "Again", include=SitemapInclude())

    urls = collect(root_url, catalog, fixed_now)

    assert [url.location for url in urls[1:]] == [
        f"{root_url}/zeta/last",
        f"{root_url}/zeta/again",
        f"{root_url}/alpha/first",
    ]


def test_media_urls_are_resolved_against_root(root_url, sample_catalog, fixed_now):
    urls = collect(root_url, sample_catalog, fixed_now)

    photos = urls[-1]
    assert photos.location == f"{root_url}/gallery/photos"
    assert [image.location for image in photos.images] == [
        f"{root_url}/img/sunset.jpg",
        "https://cdn.ex.com/logo.png",
    ]
    assert photos.images[0].title == "Sunset"
    assert photos.images[1].title is None
    assert photos.videos[0].thumbnail_url == f"{root_url}/thumbs/intro.jpg"


def test_media_markers_without_inclusion_are_ignored(root_url, fixed_now):
    catalog = EndpointCatalog()
    catalog.register_handler("HomeController", "Gallery", images=[SitemapImage(image_url="a.png")])

    assert len(collect(root_url, catalog, fixed_now)) == 1


def test_video_fields_are_copied_and_unset_optionals_stay_unset(root_url, fixed_now):
    video = SitemapVideo(
        thumbnail_url="https://cdn.ex.com/t.jpg",
        title="Launch",
        description="Launch event",
        player_url="https://ex.com/player?id=1",
        duration_seconds=95,
        expiration_date=date(2030, 1, 1),
        rating=4.5,
        tags=["launch", "event"],
        allow_embed=False,
        countries=["US", "CA"],
    )
    catalog = EndpointCatalog()
    catalog.register_handler("MediaController", "Launch", include=SitemapInclude(), videos=[video])

    record = collect(root_url, catalog, fixed_now)[1].videos[0]

    assert record.thumbnail_url == "https://cdn.ex.com/t.jpg"
    assert record.player_url == "https://ex.com/player?id=1"
    assert record.duration_seconds == 95
    assert record.expiration_date == date(2030, 1, 1)
    assert record.rating == 4.5
    assert record.tags == ["launch", "event"]
    assert record.allow_embed is False
    assert record.countries == ["US", "CA"]
    assert record.content_url is None
    assert record.view_count is None
    assert record.publication_date is None
    assert record.category is None
    assert record.family_friendly is None


def test_resolve_media_url():
    assert resolve_media_url("logo.png", "https://ex.com") == "https://ex.com/logo.png"
    assert resolve_media_url("/logo.png", "https://ex.com") == "https://ex.com/logo.png"
    assert resolve_media_url("https://cdn.ex.com/logo.png", "https://ex.com") == "https://cdn.ex.com/logo.png"


def test_resolve_include_precedence():
    handler_marker = SitemapInclude(priority=0.9)
    group_marker = SitemapInclude(priority=0.1)

    assert resolve_include(HandlerEntry("a", include=handler_marker), GroupEntry("G", include=group_marker)) is handler_marker
    assert resolve_include(HandlerEntry("a"), GroupEntry("G", include=group_marker)) is group_marker
    assert resolve_include(HandlerEntry("a"), GroupEntry("G")) is None
