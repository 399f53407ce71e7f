"""
Configuration Module for Cupcake Shop
=====================================

Environment-driven settings for the HTTP service. Catalog data (flavors,
quantities, prices) is static and lives in catalog.py; SMTP settings live
with the share service that uses them.

Environment Variables:
----------------------
- API_TITLE: Title shown in the OpenAPI docs (default: "Cupcake Shop API")
- CORS_ORIGINS: Comma-separated allowed origins (default: "*")
- ORDER_SHARE_EMAIL: Recipient of shared order summaries (default: unset,
  which keeps the share service in mock mode)
- LOG_LEVEL: Read by logging_config.setup_logging (default: INFO)

Usage:
------
    from cupcake_shop.config import CORS_ORIGINS, ORDER_SHARE_EMAIL
"""

import os
from typing import List, Optional


# =============================================================================
# API Configuration
# =============================================================================

API_TITLE: str = os.getenv("API_TITLE", "Cupcake Shop API")


# =============================================================================
# CORS Configuration
# =============================================================================
# Format: comma-separated list of origins, e.g. "https://cupcakes.example.com"
# Default "*" allows all origins (suitable for development only)

_cors_origins_env = os.getenv("CORS_ORIGINS", "")
CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in _cors_origins_env.split(",")
    if origin.strip()
] or ["*"]


# =============================================================================
# Order Sharing
# =============================================================================

ORDER_SHARE_EMAIL: Optional[str] = os.getenv("ORDER_SHARE_EMAIL") or None
