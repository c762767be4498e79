"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from frinkiac import __version__
from frinkiac.config import get_settings
from frinkiac.core.lifespan import lifespan
from frinkiac.core.middleware import setup_middleware
from frinkiac.middleware.error_handlers import register_error_handlers
from frinkiac.routers import (
    frinkiac_router,
    health_router,
    layout_router,
    view_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Frinkiac Client",
        description="""
        Search Simpsons frames on Frinkiac, browse them in a sized grid and build meme links.

        ## Frinkiac
        - `/api/frinkiac/search` - frames matching a quote
        - `/api/frinkiac/caption` - episode, subtitles and nearby frames for a frame
        - `/api/frinkiac/random` - a random caption
        - `/api/frinkiac/meme-link` - meme link for custom text

        ## Layout
        - `/api/layout/wrap` - wrap caption text into 25-character meme lines
        - `/api/layout/size` - size a grid cell for a container

        ## Rate Limits
        - Frinkiac proxy endpoints: 60 requests/minute per IP (random: 30)
        """,
        version=__version__,
        lifespan=lifespan,
        license_info={
            "name": "MIT",
        },
    )

    setup_middleware(app, settings)

    register_error_handlers(app)

    # View routes (HTML pages and tile fragments) - no prefix
    app.include_router(view_router.router, tags=["views"])
    app.include_router(health_router.router, tags=["health"])

    # API routes
    app.include_router(frinkiac_router.router, prefix="/api/frinkiac", tags=["frinkiac"])
    app.include_router(layout_router.router, prefix="/api/layout", tags=["layout"])

    return app
