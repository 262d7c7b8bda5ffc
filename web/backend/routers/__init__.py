"""API route handlers."""

from .generate import router as generate_router
