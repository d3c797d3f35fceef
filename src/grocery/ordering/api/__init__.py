"""Ordering API package."""

from grocery.ordering.api.routes import router

__all__ = ["router"]
