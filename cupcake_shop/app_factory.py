"""
Application factory for the Cupcake Shop API.

create_app() builds a FastAPI application around one OrderSession, the
single in-progress order for the process.
"""

import logging
from typing import Optional

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import API_TITLE, CORS_ORIGINS
from .middleware import RequestIDMiddleware
from .order_session import OrderSession
from .routes import catalog_router, order_router

logger = logging.getLogger(__name__)


def create_app(order_session: Optional[OrderSession] = None) -> FastAPI:
    """
    Create a FastAPI application.

    Args:
        order_session: Session to serve. A fresh one, sharing by email or in
                       mock mode per configuration, is created if omitted.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=API_TITLE,
        description="Guided cupcake ordering: quantity, flavor, pickup date, summary",
        version="1.0.0",
    )
    app.state.order_session = order_session or OrderSession()

    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(order_router)
    api_v1.include_router(catalog_router)
    app.include_router(api_v1)

    app.include_router(order_router)
    app.include_router(catalog_router)

    @app.get("/health", tags=["Health"])
    def health() -> dict[str, str]:
        """Health check endpoint. Returns ok if the service is running."""
        return {"status": "ok"}

    logger.info("Application created")

    return app
