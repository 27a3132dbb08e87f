"""Base62-encoded identifiers used throughout the API."""

from __future__ import annotations

import random
import secrets
from dataclasses import dataclass

__all__ = [
    "DecodingError",
    "InvalidBase62Error",
    "Base62OverflowError",
    "Base62Id",
    "ProjectId",
    "VersionId",
    "UserId",
    "TeamId",
    "ReportId",
    "NotificationId",
    "ThreadId",
    "ThreadMessageId",
    "random_base62",
    "random_base62_rng",
    "to_base62",
    "parse_base62",
]

BASE62_CHARS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
U64_MAX = (1 << 64) - 1

# MULTIPLES[n] is the smallest number whose base62 form has n + 1 characters,
# except the last entry, which caps the 11-character range at the u64 limit.
_MULTIPLES = [62**i for i in range(11)] + [U64_MAX]

_DIGIT_VALUES = {char: index for index, char in enumerate(BASE62_CHARS)}


class DecodingError(ValueError):
    """A string could not be decoded as a base62 number."""


class InvalidBase62Error(DecodingError):
    """A character outside the base62 alphabet was encountered."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid character {char!r} in base62 encoding")
        self.char = char


class Base62OverflowError(DecodingError):
    """The decoded number does not fit in an unsigned 64-bit integer."""

    def __init__(self) -> None:
        super().__init__("Base62 decoding overflowed")


def random_base62_rng(rng: random.Random, n: int) -> int:
    """Return a random integer that is exactly ``n`` base62 characters long."""
    if not 0 < n <= 11:
        raise ValueError(f"base62 length must be between 1 and 11, got {n}")
    return rng.randrange(_MULTIPLES[n - 1], _MULTIPLES[n])


def random_base62(n: int) -> int:
    """Like :func:`random_base62_rng`, using the system's secure generator."""
    return random_base62_rng(secrets.SystemRandom(), n)


def to_base62(num: int) -> str:
    """Encode a non-negative integer as base62; zero encodes to an empty string."""
    if num < 0:
        raise ValueError("cannot encode a negative number as base62")
    digits = []
    while num > 0:
        num, remainder = divmod(num, 62)
        digits.append(BASE62_CHARS[remainder])
    return "".join(reversed(digits))


def parse_base62(string: str) -> int:
    """Decode a base62 string into an unsigned 64-bit integer."""
    num = 0
    for char in string:
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            raise InvalidBase62Error(char)
        num = num * 62 + digit
        if num > U64_MAX:
            raise Base62OverflowError()
    return num


@dataclass(frozen=True)
class Base62Id:
    """An identifier shown to API clients as a base62 string."""

    value: int

    @classmethod
    def parse(cls, string: str) -> "Base62Id":
        return cls(parse_base62(string))

    def __str__(self) -> str:
        return to_base62(self.value)

    def __int__(self) -> int:
        return self.value


class ProjectId(Base62Id):
    """The identifier of a project."""


class VersionId(Base62Id):
    """The identifier of a project version."""


class UserId(Base62Id):
    """The identifier of a user."""


class TeamId(Base62Id):
    """The identifier of a team."""


class ReportId(Base62Id):
    """The identifier of a report."""


class NotificationId(Base62Id):
    """The identifier of a notification."""


class ThreadId(Base62Id):
    """The identifier of a moderation thread."""


class ThreadMessageId(Base62Id):
    """The identifier of a message in a thread."""