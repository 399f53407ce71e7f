"""
Routes Package for Cupcake Shop
===============================

API route definitions. Routers are registered by app_factory.create_app()
under two prefixes:
1. /api/v1/* - Versioned API (recommended)
2. /* - Root paths

Routes raise HTTPException for error conditions:
- 400: Bad request (quantity not offered)
- 409: Conflict (action not available at the current step)
"""

from .order import order_router, catalog_router, get_order_session

__all__ = [
    "order_router",
    "catalog_router",
    "get_order_session",
]
