import hashlib
import hmac
import json
from datetime import datetime, timedelta, timezone

import pytest

from modregistry.api_errors import CryptoError, JsonError
from modregistry.webhooks import (
    StripeEvent,
    parse_event,
    parse_signature_header,
    verify_stripe_signature,
)

NOW = datetime(2023, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
SECRET = "secret"
BODY = '{"type": "invoice.paid", "data": {"object": {"customer": "cus"}}}'


def _header(timestamp, body=BODY, secret=SECRET):
    digest = hmac.new(
        secret.encode(), f"{timestamp}.{body}".encode(), hashlib.sha256
    ).hexdigest()
    return f"t={timestamp},v1={digest}"


def test_parse_signature_header():
    assert parse_signature_header("t=123,v1=abcd") == (123, bytes.fromhex("abcd"))


def test_parse_signature_header_malformed_values():
    assert parse_signature_header("t=abc,v1=xyz") == (None, None)
    assert parse_signature_header("t=5,t=oops") == (None, None)
    assert parse_signature_header("v1=abc") == (None, None)
    assert parse_signature_header("t=1=2,other=3") == (None, None)


def test_valid_signature_returns_timestamp():
    ts = int(NOW.timestamp())
    assert verify_stripe_signature(_header(ts), BODY, SECRET, NOW) == ts


def test_missing_header():
    with pytest.raises(CryptoError) as info:
        verify_stripe_signature(None, BODY, SECRET, NOW)
    assert info.value.detail == "Missing signature header!"
    assert info.value.status_code == 403


def test_missing_timestamp():
    with pytest.raises(CryptoError) as info:
        verify_stripe_signature("v1=abcd", BODY, SECRET, NOW)
    assert info.value.detail == "Missing timestamp!"


def test_missing_signature():
    with pytest.raises(CryptoError) as info:
        verify_stripe_signature("t=5", BODY, SECRET, NOW)
    assert info.value.detail == "Missing signature!"


def test_wrong_secret_fails():
    ts = int(NOW.timestamp())
    with pytest.raises(CryptoError) as info:
        verify_stripe_signature(_header(ts, secret="token"), BODY, SECRET, NOW)
    assert info.value.detail == "Unable to verify webhook signature!"


def test_tampered_body_fails():
    ts = int(NOW.timestamp())
    with pytest.raises(CryptoError) as info:
        verify_stripe_signature(_header(ts), BODY + " ", SECRET, NOW)
    assert info.value.detail == "Unable to verify webhook signature!"


@pytest.mark.parametrize("offset", [timedelta(minutes=6), timedelta(minutes=-6)])
def test_stale_timestamp_is_expired(offset):
    ts = int((NOW + offset).timestamp())
    with pytest.raises(CryptoError) as info:
        verify_stripe_signature(_header(ts), BODY, SECRET, NOW)
    assert info.value.detail == "Webhook signature expired!"


def test_parse_event():
    event = parse_event(BODY)
    assert event == StripeEvent("invoice.paid", json.loads(BODY)["data"]["object"])


@pytest.mark.parametrize("body", ["not json", '{"type": "x"}', '{"data": {"object": {}}}'])
def test_parse_event_errors(body):
    with pytest.raises(JsonError) as info:
        parse_event(body)
    assert info.value.status_code == 400