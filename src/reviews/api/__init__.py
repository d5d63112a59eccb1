"""Reviews API package."""

from reviews.api.errors import register_exception_handlers
from reviews.api.routes import admin_router, client_router

__all__ = ["admin_router", "client_router", "register_exception_handlers"]
