"""Storefront FastAPI application.

One web server for the four bounded contexts. Commands are processed
synchronously; each request is wrapped in the correct domain context based
on its URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV selects the config overlay from domain.toml.
from catalogue.domain import catalogue  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from identity.domain import identity  # noqa: E402
from ordering.domain import ordering  # noqa: E402
from reviews.domain import reviews  # noqa: E402

from shared.errors import register_error_handlers
from shared.logging import add_context, clear_context

identity.init()
catalogue.init()
ordering.init()
reviews.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/users": identity,
    "/products": catalogue,
    "/categories": catalogue,
    "/parameters": catalogue,
    "/tags": catalogue,
    "/colors": catalogue,
    "/brands": catalogue,
    "/baskets": ordering,
    "/order-products": ordering,
    "/addresses": ordering,
    "/checkouts": ordering,
    "/reviews": reviews,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path == prefix or path.startswith(prefix + "/"):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="E-commerce storefront: catalogue, ordering, reviews and identity",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    clear_context()
    if domain is not None:
        add_context(domain=domain.name, path=request.url.path)
        with domain.domain_context():
            response = await call_next(request)
        return response
    # Unmapped paths such as /health and /docs pass through
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import (  # noqa: E402
    brand_router,
    category_router,
    color_router,
    parameter_router,
    product_router,
    tag_router,
)
from identity.api import router as identity_router  # noqa: E402
from ordering.api import address_router, basket_router, checkout_router, order_product_router  # noqa: E402
from reviews.api import review_router  # noqa: E402

app.include_router(identity_router)
app.include_router(product_router)
app.include_router(category_router)
app.include_router(parameter_router)
app.include_router(tag_router)
app.include_router(color_router)
app.include_router(brand_router)
app.include_router(basket_router)
app.include_router(order_product_router)
app.include_router(address_router)
app.include_router(checkout_router)
app.include_router(review_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "identity": {"name": identity.name},
                "catalogue": {"name": catalogue.name},
                "ordering": {"name": ordering.name},
                "reviews": {"name": reviews.name},
            },
        }
    )
