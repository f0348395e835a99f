"""Shared dependencies for API routes."""

from fastapi import Request


def get_gemini_client(request: Request):
    """Gemini client built at startup, or None when enhancement is not configured."""
    return getattr(request.app.state, "gemini_client", None)
