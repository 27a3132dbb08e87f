"""Per-client request rate limiting backed by an in-memory store."""

__all__ = ["errors", "store", "middleware"]