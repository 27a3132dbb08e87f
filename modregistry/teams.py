"""Teams of users that own projects, and their permissions."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import IntFlag
from typing import Any, Mapping, Optional

from .ids import TeamId
from .users import User

__all__ = ["OWNER_ROLE", "DEFAULT_ROLE", "Permissions", "Team", "TeamMember"]

OWNER_ROLE = "Owner"
DEFAULT_ROLE = "Member"


class Permissions(IntFlag):
    """What a team member is allowed to do with the team's project."""

    UPLOAD_VERSION = 1 << 0
    DELETE_VERSION = 1 << 1
    EDIT_DETAILS = 1 << 2
    EDIT_BODY = 1 << 3
    MANAGE_INVITES = 1 << 4
    REMOVE_MEMBER = 1 << 5
    EDIT_MEMBER = 1 << 6
    DELETE_PROJECT = 1 << 7
    VIEW_ANALYTICS = 1 << 8
    VIEW_PAYOUTS = 1 << 9
    ALL = 0b1111111111

    @classmethod
    def default(cls) -> "Permissions":
        return cls.UPLOAD_VERSION | cls.DELETE_VERSION


def _permissions_from(value: Any) -> Permissions:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"permissions must be a non-negative integer, got {value!r}")
    return Permissions(value)


@dataclass(kw_only=True)
class TeamMember:
    """A user who belongs to, or is invited to, a team."""

    team_id: TeamId
    user: User
    role: str
    permissions: Optional[Permissions] = None
    accepted: bool = False
    payouts_split: Optional[Decimal] = None
    ordering: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "team_id": str(self.team_id),
            "user": self.user.to_dict(),
            "role": self.role,
            "permissions": None if self.permissions is None else int(self.permissions),
            "accepted": self.accepted,
            "payouts_split": None
            if self.payouts_split is None
            else float(self.payouts_split),
            "ordering": self.ordering,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TeamMember":
        permissions = data.get("permissions")
        split = data.get("payouts_split")
        return cls(
            team_id=TeamId.parse(data["team_id"]),
            user=User.from_dict(data["user"]),
            role=data["role"],
            permissions=None if permissions is None else _permissions_from(permissions),
            accepted=bool(data["accepted"]),
            payouts_split=None if split is None else Decimal(str(split)),
            ordering=int(data["ordering"]),
        )


@dataclass
class Team:
    """A team of users who control a project."""

    id: TeamId
    members: list[TeamMember] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "members": [member.to_dict() for member in self.members],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Team":
        return cls(
            id=TeamId.parse(data["id"]),
            members=[TeamMember.from_dict(m) for m in data["members"]],
        )