"""
Sitemap Service FastAPI Backend
Serves the site's pages and a generated sitemap.xml with image/video extensions
"""

import logging
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from config import settings
from app.middleware.sitemap_middleware import SitemapMiddleware
from app.routes import pages
from app.routes.sitemap_catalog import catalog

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    # Startup
    logger.info(f"{settings.APP_NAME} starting, root URL {settings.SITEMAP_ROOT_URL}")
    logger.info(f"Sitemap catalog: {len(catalog.groups)} groups, {len(catalog)} handlers")

    yield

    # Shutdown
    logger.info(f"{settings.APP_NAME} shutting down")


# Create FastAPI app
app = FastAPI(
    title="Sitemap Service API",
    description="Public pages with a generated XML sitemap",
    version=settings.APP_VERSION,
    docs_url="/api/docs" if settings.DEBUG else None,
    redoc_url="/api/redoc" if settings.DEBUG else None,
    lifespan=lifespan
)

# Innermost of the added middlewares; TrustedHost, CORS and the timing middleware run first
app.add_middleware(
    SitemapMiddleware,
    root_url=settings.SITEMAP_ROOT_URL,
    catalog=catalog,
    path=settings.SITEMAP_PATH,
    pretty=settings.SITEMAP_PRETTY_PRINT
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# Trusted host middleware
app.add_middleware(
    TrustedHostMiddleware,
    allowed_hosts=settings.ALLOWED_HOSTS
)


# Performance monitoring middleware
@app.middleware("http")
async def performance_middleware(request: Request, call_next):
    """Add processing time header"""
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    # Log slow requests
    if process_time > 1.0:
        logger.warning(f"Slow request {request.method} {request.url.path}: {process_time:.3f}s")

    return response


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)

    if settings.DEBUG:
        raise exc

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred. Please try again later."
        }
    )


# Health check endpoint
@app.get("/health")
async def health_check():
    """System health check"""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "sitemap": {
            "path": settings.SITEMAP_PATH,
            "handlers": len(catalog)
        }
    }


# Root endpoint
@app.get("/")
async def root():
    """Welcome message and API information"""
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "status": "running",
        "sitemap": settings.SITEMAP_PATH,
        "health_check": "/health"
    }

# Include page routers
for router in pages.routers:
    app.include_router(router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=5000,
        reload=settings.DEBUG,
        access_log=settings.DEBUG
    )
