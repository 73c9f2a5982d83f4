"""
Tienda - FastAPI Application

Single entry point for the storefront page and the cart API.
Run with: uvicorn tienda.app:app
"""
from fastapi import FastAPI

from tienda import __version__
from tienda.config import get_settings
from tienda.logging import configure_logging, get_logger
from tienda.routers import cart_router, pages_router

logger = get_logger(__name__)


def create_app() -> FastAPI:
    configure_logging(get_settings())
    app = FastAPI(title="Tienda", version=__version__)

    @app.get("/api/health")
    async def health_check():
        return {"status": "ok"}

    app.include_router(cart_router)
    app.include_router(pages_router)
    return app


app = create_app()
