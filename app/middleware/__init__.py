"""HTTP middleware for the FastAPI application."""

from app.middleware.timing import timing_middleware

__all__ = ["timing_middleware"]
