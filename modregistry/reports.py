"""Reports filed against projects, versions and users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional

from .ids import ReportId, ThreadId, UserId

__all__ = ["ItemType", "Report"]


def _dt_to_str(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def _dt_from_str(text: str) -> datetime:
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


class ItemType(str, Enum):
    """The kind of item a report is about."""

    PROJECT = "project"
    VERSION = "version"
    USER = "user"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value

    @property
    def as_str(self) -> str:
        return self.value


@dataclass(kw_only=True)
class Report:
    """A report filed by a user."""

    id: ReportId
    report_type: str
    item_id: str
    item_type: ItemType
    reporter: UserId
    body: str
    created: datetime
    closed: bool = False
    thread_id: Optional[ThreadId] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "report_type": self.report_type,
            "item_id": self.item_id,
            "item_type": self.item_type.value,
            "reporter": str(self.reporter),
            "body": self.body,
            "created": _dt_to_str(self.created),
            "closed": self.closed,
            "thread_id": None if self.thread_id is None else str(self.thread_id),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Report":
        thread = data.get("thread_id")
        return cls(
            id=ReportId.parse(data["id"]),
            report_type=data["report_type"],
            item_id=data["item_id"],
            item_type=ItemType(data["item_type"]),
            reporter=UserId.parse(data["reporter"]),
            body=data["body"],
            created=_dt_from_str(data["created"]),
            closed=bool(data["closed"]),
            thread_id=None if thread is None else ThreadId.parse(thread),
        )