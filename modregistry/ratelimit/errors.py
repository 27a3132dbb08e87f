"""Errors raised while enforcing request rate limits."""

from __future__ import annotations

from typing import Any

from ..api_errors import error_body

__all__ = ["ARError", "ReadWriteError", "IdentificationError", "LimitedError"]


class ARError(Exception):
    """Base class for rate limiter failures; reported as a JSON error response."""

    status_code: int = 500

    def _headers(self) -> dict[str, str]:
        return {}

    def to_response(self) -> tuple[int, dict[str, str], dict[str, Any]]:
        """Return the HTTP status, extra headers and JSON body for this error."""
        return (
            self.status_code,
            self._headers(),
            error_body("ratelimit_error", str(self)),
        )


class ReadWriteError(ARError):
    """A read or write on the rate limit store failed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"read/write operation failed: {detail}")


class IdentificationError(ARError):
    """The client making the request could not be identified."""

    def __init__(self) -> None:
        super().__init__("client identification failed")


class LimitedError(ARError):
    """The client has used up its allowance for the current interval."""

    status_code = 429

    def __init__(self, max_requests: int, remaining: int, reset: int) -> None:
        self.max_requests = max_requests
        self.remaining = remaining
        self.reset = reset
        super().__init__(
            f"You are being rate-limited. Please wait {reset} seconds. "
            f"{remaining}/{max_requests} remaining."
        )

    def _headers(self) -> dict[str, str]:
        return {
            "x-ratelimit-limit": str(self.max_requests),
            "x-ratelimit-remaining": str(self.remaining),
            "x-ratelimit-reset": str(self.reset),
        }