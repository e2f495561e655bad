"""API route modules for FastAPI endpoints."""

from fixmycampus.routes.comments import router as comments_router
from fixmycampus.routes.issues import router as issues_router
from fixmycampus.routes.solutions import router as solutions_router

__all__ = ["comments_router", "issues_router", "solutions_router"]
