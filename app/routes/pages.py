"""
Public pages of the site, declared with their sitemap metadata
"""
from datetime import date
from fastapi import APIRouter

from app.routes.sitemap_catalog import catalog
from app.schemas.sitemap import SitemapImage, SitemapInclude, SitemapVideo
from app.services.sitemap_registry import group_segment

home_router = APIRouter(prefix=f"/{group_segment('HomeController')}", tags=["Pages"])
blog_router = APIRouter(prefix=f"/{group_segment('BlogController')}", tags=["Blog"])
media_router = APIRouter(prefix=f"/{group_segment('MediaController')}", tags=["Media"])
account_router = APIRouter(prefix=f"/{group_segment('AccountController')}", tags=["Account"])

home = catalog.group("HomeController", router=home_router)
# Every blog page is listed, handlers may override the group defaults
blog = catalog.group(
    "BlogController",
    include=SitemapInclude(priority=0.6, change_frequency="weekly"),
    router=blog_router
)
media = catalog.group("MediaController", router=media_router)
account = catalog.group("AccountController", router=account_router)


@home.page(
    include=SitemapInclude(priority=0.9, change_frequency="monthly"),
    images=[
        SitemapImage(image_url="/static/img/team.jpg", title="Our team", caption="The people behind the site"),
    ]
)
async def about():
    """
    About page
    """
    return {"page": "about"}


@home.page(include=SitemapInclude())
async def contact():
    """
    Contact page
    """
    return {"page": "contact"}


@home.page()
async def preview():
    """
    Internal preview page, not listed in the sitemap
    """
    return {"page": "preview"}


@blog.page()
async def index():
    """
    Blog index
    """
    return {"page": "blog"}


@blog.page(
    include=SitemapInclude(priority=0.7, change_frequency="daily"),
    images=[SitemapImage(image_url="https://cdn.example.com/blog/latest.png", license="https://creativecommons.org/licenses/by/4.0/")]
)
async def latest():
    """
    Latest blog posts
    """
    return {"page": "latest"}


@media.page(
    include=SitemapInclude(priority=0.5, change_frequency="weekly"),
    videos=[
        SitemapVideo(
            thumbnail_url="/static/video/intro-thumb.jpg",
            title="Getting started",
            description="A two minute tour of the site",
            content_url="https://cdn.example.com/video/intro.mp4",
            duration_seconds=120,
            publication_date=date(2024, 1, 15),
            tags=["tour", "introduction"],
            family_friendly=True,
        )
    ]
)
async def videos():
    """
    Video gallery
    """
    return {"page": "videos"}


@account.page(name="settings")
async def account_settings():
    """
    Account settings, not listed in the sitemap
    """
    return {"page": "settings"}


routers = [home_router, blog_router, media_router, account_router]
