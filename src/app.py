"""Product Reviews FastAPI application.

Serves the storefront client API (``/clientApi``) and the merchant admin API
(``/api``). Commands are processed synchronously inside the request.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# The domain (and with it every provider connection) is built once per
# process and shared by all requests served by this worker.
from reviews.domain import reviews  # noqa: E402
from reviews.utils.logging import clear_context

reviews.init()


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ALLOW_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Product Reviews API",
    description="Storefront review submission and merchant review management",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the reviews domain context for each request."""
    clear_context()
    with reviews.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from reviews.api import admin_router, client_router, register_exception_handlers  # noqa: E402

app.include_router(client_router)
app.include_router(admin_router)
register_exception_handlers(app)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok"})
