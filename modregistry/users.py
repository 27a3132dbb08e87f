"""Users, their roles, badges and payout settings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum, IntFlag
from typing import Any, Mapping, Optional

from .ids import UserId

__all__ = [
    "DELETED_USER",
    "Badges",
    "RecipientType",
    "RecipientWallet",
    "Role",
    "UserPayoutData",
    "User",
]

DELETED_USER = UserId(127155982985829)


def _dt_to_str(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _dt_from_str(text: str) -> datetime:
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class Badges(IntFlag):
    """Profile badges a user has earned."""

    NONE = 0
    MIDAS = 1 << 0
    EARLY_MODPACK_ADOPTER = 1 << 1
    EARLY_RESPACK_ADOPTER = 1 << 2
    EARLY_PLUGIN_ADOPTER = 1 << 3
    ALPHA_TESTER = 1 << 4
    CONTRIBUTOR = 1 << 5
    TRANSLATOR = 1 << 6
    ALL = 0b1111111

    @classmethod
    def default(cls) -> "Badges":
        return cls.NONE


class _WireEnum(str, Enum):
    def __str__(self) -> str:
        return self.value

    @property
    def as_str(self) -> str:
        return self.value


class RecipientType(_WireEnum):
    """How a payout recipient is addressed."""

    EMAIL = "email"
    PHONE = "phone"
    USER_HANDLE = "user_handle"

    @classmethod
    def from_string(cls, string: str) -> "RecipientType":
        if string in ("user_handle", "phone"):
            return cls(string)
        return cls.EMAIL


class RecipientWallet(_WireEnum):
    """The wallet service a payout is sent through."""

    VENMO = "venmo"
    PAYPAL = "paypal"

    @classmethod
    def from_string(cls, string: str) -> "RecipientWallet":
        return cls.VENMO if string == "venmo" else cls.PAYPAL

    def api_name(self) -> str:
        """The wallet name expected by the payment provider."""
        return "Venmo" if self is RecipientWallet.VENMO else "PayPal"


class Role(_WireEnum):
    """A user's site-wide role."""

    DEVELOPER = "developer"
    MODERATOR = "moderator"
    ADMIN = "admin"

    @classmethod
    def from_string(cls, string: str) -> "Role":
        if string in ("admin", "moderator"):
            return cls(string)
        return cls.DEVELOPER

    def is_mod(self) -> bool:
        return self in (Role.MODERATOR, Role.ADMIN)

    def is_admin(self) -> bool:
        return self is Role.ADMIN


@dataclass
class UserPayoutData:
    """A user's balance and where payouts are sent."""

    balance: Decimal
    payout_wallet: Optional[RecipientWallet] = None
    payout_wallet_type: Optional[RecipientType] = None
    payout_address: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "balance": str(self.balance),
            "payout_wallet": None if self.payout_wallet is None else self.payout_wallet.value,
            "payout_wallet_type": None
            if self.payout_wallet_type is None
            else self.payout_wallet_type.value,
            "payout_address": self.payout_address,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserPayoutData":
        wallet = data.get("payout_wallet")
        wallet_type = data.get("payout_wallet_type")
        return cls(
            balance=Decimal(str(data["balance"])),
            payout_wallet=None if wallet is None else RecipientWallet(wallet),
            payout_wallet_type=None if wallet_type is None else RecipientType(wallet_type),
            payout_address=data.get("payout_address"),
        )


_LINKED_ACCOUNTS = (
    "github_id",
    "discord_id",
    "google_id",
    "microsoft_id",
    "apple_id",
    "gitlab_id",
)


@dataclass(kw_only=True)
class User:
    """A user as returned from the API."""

    id: UserId
    kratos_id: Optional[str] = None
    username: str
    name: Optional[str] = None
    email: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    created: datetime
    role: Role = Role.DEVELOPER
    badges: Badges = Badges.NONE
    payout_data: Optional[UserPayoutData] = None
    github_id: Optional[int] = None
    discord_id: Optional[int] = None
    google_id: Optional[int] = None
    microsoft_id: Optional[int] = None
    apple_id: Optional[int] = None
    gitlab_id: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": str(self.id),
            "kratos_id": self.kratos_id,
            "username": self.username,
            "name": self.name,
            "email": self.email,
            "avatar_url": self.avatar_url,
            "bio": self.bio,
            "created": _dt_to_str(self.created),
            "role": self.role.value,
            "badges": int(self.badges),
            "payout_data": None if self.payout_data is None else self.payout_data.to_dict(),
        }
        for key in _LINKED_ACCOUNTS:
            data[key] = getattr(self, key)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "User":
        payout = data.get("payout_data")
        badges = data["badges"]
        if isinstance(badges, bool) or not isinstance(badges, int) or badges < 0:
            raise ValueError(f"badges must be a non-negative integer, got {badges!r}")
        linked = {}
        for key in _LINKED_ACCOUNTS:
            value = data.get(key)
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)
                                      or value < 0):
                raise ValueError(f"{key} must be a non-negative integer, got {value!r}")
            linked[key] = value
        return cls(
            id=UserId.parse(data["id"]),
            kratos_id=data.get("kratos_id"),
            username=data["username"],
            name=data.get("name"),
            email=data.get("email"),
            avatar_url=data.get("avatar_url"),
            bio=data.get("bio"),
            created=_dt_from_str(data["created"]),
            role=Role(data["role"]),
            badges=Badges(badges),
            payout_data=None if payout is None else UserPayoutData.from_dict(payout),
            **linked,
        )