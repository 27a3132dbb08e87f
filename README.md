# modregistry

Building blocks for the HTTP API of a mod registry: base62 identifiers,
user, team and report models, the API error types, an in-memory rate
limiter, a download counter queue, and helpers for the Maven repository,
Forge update and payment webhook endpoints. It uses only the standard
library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `modregistry.ids`: base62 encoding (`to_base62`, `parse_base62`),
  `random_base62` / `random_base62_rng`, and the typed identifiers
  (`ProjectId`, `VersionId`, `UserId`, `TeamId`, `ReportId`,
  `NotificationId`, `ThreadId`, `ThreadMessageId`). Each identifier prints
  as its base62 form, and `ProjectId.parse("AABBCCDD")` reads it back. Bad
  input raises `InvalidBase62Error` or `Base62OverflowError`, both
  `DecodingError`s (and so `ValueError`s).
- `modregistry.users`: `User`, `UserPayoutData`, the `Badges` flags and the
  `Role`, `RecipientType` and `RecipientWallet` enums.
- `modregistry.teams`: `Team`, `TeamMember` and the `Permissions` flags
  (`Permissions.default()` is upload and delete version).
- `modregistry.reports`: `Report` and `ItemType`.

  The models above have `to_dict()` / `from_dict()` for the JSON shapes the
  API uses; ids are written as base62 strings and times as UTC ISO 8601.
- `modregistry.api_errors`: `ApiError` and its subclasses
  (`InvalidInputError`, `AuthenticationError`, `CryptoError`,
  `PaymentsError`, ...), each with a `status_code`, an `error` code and a
  JSON body from `to_dict()`; `error_body(error, description)` builds that
  body.
- `modregistry.ratelimit`:
  - `store.MemoryStore`: per-key counters that expire after a given number
    of seconds (`get`, `set`, `update`, `expire`, `remove`).
  - `middleware.RateLimiter`: counts requests per client, sets the
    `x-ratelimit-limit`, `x-ratelimit-remaining` and `x-ratelimit-reset`
    headers, and raises `LimitedError` once a client's allowance is used
    up. Requests carrying an `x-ratelimit-key` header equal to the
    configured ignore key bypass it.
  - `errors`: `ARError`, `ReadWriteError`, `IdentificationError`,
    `LimitedError`; `to_response()` gives status, headers and JSON body.
- `modregistry.download_queue`: `DownloadQueue`, which collects downloads
  and hands them over in one batch with `index(apply)`.
- `modregistry.service`: bodies for the root route (`index_info`), unknown
  routes (`not_found_response`) and the health check (`health_check`).
- `modregistry.maven`: `maven-metadata.xml` (`build_metadata`,
  `Metadata.to_xml`) and POM (`MavenPom.to_xml`) generation, and lookup of
  requested artifact files and their hashes (`find_file`, `file_hash`,
  `is_pom_request`).
- `modregistry.updates`: Forge `forge_updates.json` bodies
  (`build_forge_updates`, `forge_promos`).
- `modregistry.webhooks`: checking Stripe webhook signatures
  (`verify_stripe_signature`, which allows five minutes of clock skew) and
  parsing events (`parse_event`).

## Examples

```python
from modregistry.ids import ProjectId, parse_base62

pid = ProjectId(parse_base62("AABBCCDD"))
print(pid)                                  # AABBCCDD
print(ProjectId.parse("AABBCCDD") == pid)   # True
```

Rate limiting a request. The request needs `headers` and, for the default
identifier, `peer_addr`; the response returned by `call_next` needs a
writable `headers` mapping:

```python
from modregistry.ratelimit.store import MemoryStore
from modregistry.ratelimit.middleware import RateLimiter
from modregistry.ratelimit.errors import LimitedError

limiter = RateLimiter(MemoryStore()).with_interval(60).with_max_requests(300)

try:
    response = limiter.handle(request, call_next)
except LimitedError as exc:
    status, headers, body = exc.to_response()   # 429 and the x-ratelimit-* headers
```

## What it does not do

The package has no HTTP server, routing or command of its own: it provides
the pieces a web application would call from its handlers. It stores
nothing beyond the in-memory rate limit counters and download queue; there
is no database layer, so fetching projects, versions or users and writing
download counts is left to the caller (for example through the `apply`
callable given to `DownloadQueue.index`). It does not send payouts or call
any payment provider; `modregistry.webhooks` only verifies and parses what
such a provider delivers.