"""API and page route modules for FastAPI endpoints."""

from app.routes.issues import router as issues_router
from app.routes.pages import router as pages_router

__all__ = ["issues_router", "pages_router"]
