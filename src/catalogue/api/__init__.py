"""Catalogue domain API package."""

from catalogue.api.routes import (
    brand_router,
    category_router,
    color_router,
    parameter_router,
    product_router,
    tag_router,
)

__all__ = ["product_router", "category_router", "parameter_router", "tag_router", "color_router", "brand_router"]
