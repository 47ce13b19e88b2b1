"""Ordering domain API package."""

from ordering.api.routes import address_router, basket_router, checkout_router, order_product_router

__all__ = ["basket_router", "order_product_router", "address_router", "checkout_router"]
