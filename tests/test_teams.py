from datetime import datetime, timezone
from decimal import Decimal

import pytest

from modregistry.ids import TeamId, UserId
from modregistry.teams import DEFAULT_ROLE, OWNER_ROLE, Permissions, Team, TeamMember
from modregistry.users import User


def _user() -> User:
    return User(
        id=UserId(987654),
        username="alice",
        created=datetime(2023, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
    )


def _member(**overrides) -> TeamMember:
    values = dict(
        team_id=TeamId(123456),
        user=_user(),
        role=OWNER_ROLE,
        permissions=Permissions.ALL,
        accepted=True,
        payouts_split=Decimal("25.5"),
        ordering=2,
    )
    values.update(overrides)
    return TeamMember(**values)


def test_all_permissions_bits():
    assert Permissions(0b1111111111) == Permissions.ALL
    assert Permissions(1 << 9) == Permissions.VIEW_PAYOUTS
    assert Permissions(1 << 3) in Permissions.ALL


def test_default_permissions():
    default = Permissions.default()
    assert default == Permissions.UPLOAD_VERSION | Permissions.DELETE_VERSION
    assert Permissions.EDIT_DETAILS not in default


def test_role_constants_in_member():
    owner = _member().to_dict()
    member = _member(role=DEFAULT_ROLE).to_dict()
    assert owner["role"] == "Owner"
    assert member["role"] == "Member"


def test_member_to_dict_fields():
    data = _member().to_dict()
    assert data["team_id"] == str(TeamId(123456))
    assert data["permissions"] == int(Permissions.ALL)
    assert data["payouts_split"] == 25.5
    assert data["user"]["username"] == "alice"


def test_member_round_trip():
    member = _member()
    again = TeamMember.from_dict(member.to_dict())
    assert again == member


def test_member_round_trip_without_private_fields():
    member = _member(permissions=None, payouts_split=None)
    data = member.to_dict()
    assert data["permissions"] is None
    assert data["payouts_split"] is None
    assert TeamMember.from_dict(data) == member


def test_negative_permissions_rejected():
    data = _member().to_dict()
    data["permissions"] = -1
    with pytest.raises(ValueError):
        TeamMember.from_dict(data)


def test_team_round_trip():
    team = Team(id=TeamId(123456), members=[_member(), _member(role=DEFAULT_ROLE)])
    again = Team.from_dict(team.to_dict())
    assert again == team
    assert [m.role for m in again.members] == [OWNER_ROLE, DEFAULT_ROLE]