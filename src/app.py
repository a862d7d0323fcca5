"""Coffeehouse FastAPI application.

Multi-domain web server that processes commands synchronously via HTTP.
Each request is wrapped in the correct domain context based on URL prefix.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV controls which config overlay is applied:
#   - unset/"test" → event_processing = "sync"  (projectors fire in UoW)
#   - "production" → event_processing = "async" (projectors fire via Engine)
from contextlib import nullcontext

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from menu.domain import menu  # noqa: E402
from ordering.domain import ordering  # noqa: E402
from protean.exceptions import ExpectedVersionError
from protean.integrations.fastapi import register_exception_handlers
from shared.logging import add_context, clear_context
from shared.relay import EventRelay

menu.init()
ordering.init()

from ordering.order.menu_events import MenuPriceEventHandler  # noqa: E402

# ---------------------------------------------------------------------------
# Cross-domain delivery
# ---------------------------------------------------------------------------
# With sync processing no Engine carries menu::coffee_item events to
# Ordering, so requests against Menu replay them on the way out.
_RELAYS = {
    menu.name: EventRelay(menu, ordering, "menu::coffee_item", MenuPriceEventHandler),
}

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
_ROUTE_DOMAIN_MAP = {
    "/coffee-items": menu,
    "/categories": menu,
    "/orders": ordering,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Coffeehouse API",
    description="Coffee shop menu and order management",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.exception_handler(ExpectedVersionError)
async def concurrency_conflict_handler(request: Request, exc: ExpectedVersionError) -> JSONResponse:
    """Someone else saved the same aggregate first; the client should reload and retry."""
    return JSONResponse(status_code=409, content={"error": str(exc)})


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        add_context(domain=domain.name, method=request.method, path=request.url.path)
        relay = _RELAYS.get(domain.name)
        try:
            with domain.domain_context(), relay.watch() if relay else nullcontext():
                response = await call_next(request)
        finally:
            clear_context()
        return response
    # No domain match: health check and docs
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from menu.api import category_router, coffee_item_router  # noqa: E402
from ordering.api import order_router  # noqa: E402

app.include_router(coffee_item_router)
app.include_router(category_router)
app.include_router(order_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "menu": {"name": menu.name},
                "ordering": {"name": ordering.name},
            },
        }
    )
