"""Middleware that limits how many requests a client may make per interval."""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from .errors import IdentificationError, LimitedError
from .store import MemoryStore

__all__ = ["RateLimiter"]

log = logging.getLogger(__name__)

Identifier = Callable[[Any], str]


def _peer_identifier(request: Any) -> str:
    """Identify a client by the address its connection came from."""
    peer = getattr(request, "peer_addr", None)
    if not peer:
        raise IdentificationError()
    return str(peer)


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


@dataclass(frozen=True)
class RateLimiter:
    """Counts requests per client in ``store`` and refuses those over the limit.

    ``handle`` takes a request with ``headers`` (and, for the default
    identifier, ``peer_addr``) and a ``call_next`` callable returning a
    response whose ``headers`` can be written to.
    """

    store: MemoryStore
    interval: float = 0
    max_requests: int = 0
    identifier: Identifier = _peer_identifier
    ignore_key: Optional[str] = None

    def with_interval(self, interval: float) -> "RateLimiter":
        """Return a limiter whose counters reset after ``interval`` seconds."""
        return dataclasses.replace(self, interval=interval)

    def with_max_requests(self, max_requests: int) -> "RateLimiter":
        """Return a limiter allowing ``max_requests`` requests per interval."""
        return dataclasses.replace(self, max_requests=max_requests)

    def with_ignore_key(self, ignore_key: Optional[str]) -> "RateLimiter":
        """Return a limiter that lets requests carrying this key bypass it."""
        return dataclasses.replace(self, ignore_key=ignore_key)

    def with_identifier(self, identifier: Identifier) -> "RateLimiter":
        """Return a limiter that identifies clients with ``identifier``."""
        return dataclasses.replace(self, identifier=identifier)

    def _stamp(self, response: Any, remaining: int, reset: int) -> None:
        response.headers["x-ratelimit-limit"] = str(self.max_requests)
        response.headers["x-ratelimit-remaining"] = str(remaining)
        response.headers["x-ratelimit-reset"] = str(reset)

    def handle(self, request: Any, call_next: Callable[[Any], Any]) -> Any:
        """Pass ``request`` on if the client is within its limit, else raise LimitedError."""
        client = self.identifier(request)

        if self.ignore_key is not None:
            key = _header(request.headers, "x-ratelimit-key")
            if key is not None and key == self.ignore_key:
                return call_next(request)

        interval = int(self.interval)
        remaining = self.store.get(client)

        if remaining is None:
            if self.max_requests < 1:
                raise ValueError("max_requests must be at least 1")
            current = self.max_requests - 1
            self.store.set(client, current, interval)
            response = call_next(request)
            self._stamp(response, current, interval)
            return response

        reset = int(self.store.expire(client))
        if remaining == 0:
            log.info("Limit exceeded for client: %s", client)
            raise LimitedError(self.max_requests, remaining, reset)

        updated = self.store.update(client, 1)
        response = call_next(request)
        self._stamp(response, updated, reset)
        return response