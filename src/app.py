"""QuickBite FastAPI application.

Web server that processes commands synchronously via HTTP. Every request is
wrapped in the QuickBite domain context.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from quickbite.config import get_settings
from quickbite.domain import quickbite
from quickbite.utils.logging import bind_request_context, clear_request_context

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain is initialized at module level so uvicorn workers share it.
# PROTEAN_ENV controls which config overlay from domain.toml is applied.
quickbite.init()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Seed demo data on startup when enabled and the store is empty."""
    if get_settings().seed_data:
        from quickbite.seed import seed_demo_data

        with quickbite.domain_context():
            seed_demo_data()
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="QuickBite API",
    description="Food ordering: menu, cart, checkout and payments",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the QuickBite domain context and bind request details to the log context."""
    bind_request_context(method=request.method, path=request.url.path)
    try:
        with quickbite.domain_context():
            response = await call_next(request)
    finally:
        clear_request_context()
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from quickbite.api import (  # noqa: E402
    cart_router,
    menu_router,
    order_router,
    payment_router,
    register_error_handlers,
    user_router,
)

app.include_router(user_router)
app.include_router(menu_router)
app.include_router(cart_router)
app.include_router(order_router)
app.include_router(payment_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": quickbite.name})
