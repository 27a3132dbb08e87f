"""Responses for the root, health and fallback routes."""

from __future__ import annotations

from typing import Any

from .api_errors import error_body

__all__ = ["index_info", "not_found_response", "health_check"]


def index_info(version: str) -> dict[str, str]:
    """The body served at the root of the API."""
    return {
        "name": "modregistry",
        "version": version,
        "about": "Welcome traveler!",
    }


def not_found_response() -> tuple[int, dict[str, str]]:
    """Status and body for a route that does not exist."""
    return 404, error_body("not_found", "the requested route does not exist")


def health_check(database_ok: bool, search_ready: bool) -> tuple[int, dict[str, Any]]:
    """Status and body reporting whether the service is ready to serve."""
    if not database_ok:
        return 500, {"ready": False, "reason": "Database connection error"}
    if not search_ready:
        return 500, {"ready": False, "reason": "Indexing is not finished"}
    return 200, {"ready": True, "reason": "Everything is OK"}