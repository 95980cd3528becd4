"""FastAPI application bootstrap and router wiring."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.api.routers import attributes, categories, health, products, translations
from catalog.core.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Instantiate the FastAPI app and include top-level routers."""
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(title=settings.app_name, version="0.1.0")

    logger.info(f"[CORS] Allowed origins: {settings.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(products.router, prefix="/products", tags=["products"])
    app.include_router(
        attributes.router,
        prefix="/products/{product_id}/attributes",
        tags=["attributes"],
    )
    app.include_router(
        translations.product_router,
        prefix="/products/{product_id}/translations",
        tags=["translations"],
    )
    app.include_router(categories.router, prefix="/categories", tags=["categories"])
    app.include_router(
        translations.category_router,
        prefix="/categories/{category_id}/translations",
        tags=["translations"],
    )

    return app


app = create_app()
