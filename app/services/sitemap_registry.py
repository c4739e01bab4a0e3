"""
Endpoint catalog: explicit registration of sitemap metadata for page handlers
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple

from fastapi import APIRouter

from app.schemas.sitemap import SitemapImage, SitemapInclude, SitemapVideo

logger = logging.getLogger(__name__)

GROUP_SUFFIX = "Controller"


@dataclass
class HandlerEntry:
    """A registered handler and the markers declared on it"""
    name: str
    include: Optional[SitemapInclude] = None
    images: List[SitemapImage] = field(default_factory=list)
    videos: List[SitemapVideo] = field(default_factory=list)
    public: bool = True

    @property
    def is_candidate(self) -> bool:
        """Publicly invokable and not a reserved/special name"""
        if self.name.startswith("__") and self.name.endswith("__"):
            return False
        return self.public and not self.name.startswith("_")


@dataclass
class GroupEntry:
    """A handler group (controller) with its optional group-wide marker"""
    name: str
    include: Optional[SitemapInclude] = None
    handlers: List[HandlerEntry] = field(default_factory=list)


def group_segment(group_name: str) -> str:
    """Path segment for a group: 'BlogController' -> 'blog'"""
    if group_name.endswith(GROUP_SUFFIX):
        group_name = group_name[:-len(GROUP_SUFFIX)]
    return group_name.lower()


def handler_path(group_name: str, handler_name: str) -> str:
    """Relative path of a handler, '{group}/{handler}' lower-cased"""
    return f"{group_segment(group_name)}/{handler_name.lower()}"


class SitemapGroup:
    """Registration handle for one group, optionally bound to an APIRouter"""

    def __init__(self, catalog: "EndpointCatalog", entry: GroupEntry, router: Optional[APIRouter] = None):
        self.catalog = catalog
        self.entry = entry
        self.router = router

    @property
    def name(self) -> str:
        return self.entry.name

    def page(
        self,
        name: Optional[str] = None,
        include: Optional[SitemapInclude] = None,
        images: Iterable[SitemapImage] = (),
        videos: Iterable[SitemapVideo] = (),
        public: bool = True,
        **route_kwargs
    ) -> Callable:
        """Register the decorated function as a handler of this group.

        When the group owns a router the function is also mounted as a GET
        route at ``/{handler}``, so the advertised location is served.
        Handlers that are not sitemap candidates are never mounted.
        """
        def decorator(func: Callable) -> Callable:
            handler_name = name or func.__name__
            handler = self.catalog.register_handler(
                self.entry.name,
                handler_name,
                include=include,
                images=images,
                videos=videos,
                public=public,
            )
            if self.router is not None and handler.is_candidate:
                self.router.add_api_route(
                    f"/{handler_name.lower()}",
                    func,
                    methods=["GET"],
                    **route_kwargs
                )
            return func

        return decorator


class EndpointCatalog:
    """Ordered registry of groups and their handlers.

    Iteration yields ``(group, handler)`` pairs: groups in registration
    order, handlers in registration order within each group.
    """

    def __init__(self):
        self._groups: Dict[str, GroupEntry] = {}

    def group(
        self,
        name: str,
        include: Optional[SitemapInclude] = None,
        router: Optional[APIRouter] = None
    ) -> SitemapGroup:
        """Register a group, or fetch it if it already exists"""
        entry = self._groups.get(name)
        if entry is None:
            entry = GroupEntry(name=name, include=include)
            self._groups[name] = entry
            logger.debug(f"Registered sitemap group {name}")
        elif include is not None:
            entry.include = include
        return SitemapGroup(self, entry, router=router)

    def register_handler(
        self,
        group: str,
        name: str,
        include: Optional[SitemapInclude] = None,
        images: Iterable[SitemapImage] = (),
        videos: Iterable[SitemapVideo] = (),
        public: bool = True
    ) -> HandlerEntry:
        """Register a handler under ``group``, creating the group if needed"""
        entry = self.group(group).entry
        handler = HandlerEntry(
            name=name,
            include=include,
            images=list(images),
            videos=list(videos),
            public=public,
        )
        entry.handlers.append(handler)
        return handler

    @property
    def groups(self) -> List[GroupEntry]:
        return list(self._groups.values())

    def __iter__(self) -> Iterator[Tuple[GroupEntry, HandlerEntry]]:
        for group in self._groups.values():
            for handler in group.handlers:
                yield group, handler

    def __len__(self) -> int:
        return sum(len(group.handlers) for group in self._groups.values())
