"""Customer API package."""

from grocery.identity.api.routes import router

__all__ = ["router"]
