"""Verification and parsing of payment-provider webhook deliveries."""

from __future__ import annotations

import hashlib
import hmac
import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from .api_errors import CryptoError, JsonError

__all__ = [
    "StripeEvent",
    "parse_signature_header",
    "verify_stripe_signature",
    "parse_event",
]

_TOLERANCE = timedelta(minutes=5)
_INT_RE = re.compile(r"[+-]?[0-9]+")
_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_I64_MIN, _I64_MAX = -(1 << 63), (1 << 63) - 1


def _parse_i64(text: str) -> Optional[int]:
    if not _INT_RE.fullmatch(text):
        return None
    value = int(text)
    return value if _I64_MIN <= value <= _I64_MAX else None


def _parse_hex(text: str) -> Optional[bytes]:
    return bytes.fromhex(text) if _HEX_RE.fullmatch(text) else None


def parse_signature_header(header: str) -> tuple[Optional[int], Optional[bytes]]:
    """Return the timestamp and ``v1`` signature named in a signature header.

    Later entries replace earlier ones; a malformed value leaves None.
    """
    timestamp: Optional[int] = None
    signature: Optional[bytes] = None
    for part in header.split(","):
        pieces = part.split("=")
        if len(pieces) != 2:
            continue
        key, value = pieces
        if key == "v1":
            signature = _parse_hex(value)
        elif key == "t":
            timestamp = _parse_i64(value)
    return timestamp, signature


def verify_stripe_signature(
    header: Optional[str],
    body: str,
    secret: str,
    now: Optional[datetime] = None,
) -> int:
    """Check a webhook's signature and freshness; return its timestamp.

    Raises :class:`CryptoError` if the header is missing or malformed, the
    signature does not match, or the timestamp is more than five minutes
    away from ``now``.
    """
    if header is None:
        raise CryptoError("Missing signature header!")
    timestamp, signature = parse_signature_header(header)
    if timestamp is None:
        raise CryptoError("Missing timestamp!")
    if signature is None:
        raise CryptoError("Missing signature!")

    expected = hmac.new(
        secret.encode("utf-8"), f"{timestamp}.{body}".encode("utf-8"), hashlib.sha256
    ).digest()
    if not hmac.compare_digest(expected, signature):
        raise CryptoError("Unable to verify webhook signature!")

    current = now if now is not None else datetime.now(timezone.utc)
    earliest = int((current - _TOLERANCE).timestamp())
    latest = int((current + _TOLERANCE).timestamp())
    if timestamp < earliest or timestamp > latest:
        raise CryptoError("Webhook signature expired!")
    return timestamp


@dataclass(frozen=True)
class StripeEvent:
    """A webhook event: its type and the object it concerns."""

    event_type: str
    data: dict[str, Any] = field(default_factory=dict)


def parse_event(body: str) -> StripeEvent:
    """Parse a webhook body; raises :class:`JsonError` if it is malformed."""
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as exc:
        raise JsonError(str(exc)) from exc
    try:
        event_type = payload["type"]
        obj = payload["data"]["object"]
    except (KeyError, TypeError) as exc:
        raise JsonError(f"missing field {exc}") from exc
    if not isinstance(event_type, str):
        raise JsonError("invalid type: expected a string for `type`")
    return StripeEvent(event_type=event_type, data=obj)