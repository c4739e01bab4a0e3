"""
Application-wide endpoint catalog; page routers register their sitemap metadata here
"""
from app.services.sitemap_registry import EndpointCatalog

catalog = EndpointCatalog()
