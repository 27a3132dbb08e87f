"""The Forge update-checker document for a project."""

from __future__ import annotations

from typing import Any, Iterable, Optional

__all__ = ["forge_promos", "build_forge_updates"]


def _is_release(version_type: Any) -> bool:
    return getattr(version_type, "value", version_type) == "release"


def _game_version(value: Any) -> str:
    return str(getattr(value, "value", value))


def forge_promos(versions: Iterable[Any]) -> dict[str, str]:
    """Map ``<game version>-recommended`` and ``-latest`` to the newest version numbers.

    Each version needs ``version_type``, ``version_number``, ``game_versions``
    and ``date_published``.
    """
    promos: dict[str, str] = {}
    for version in sorted(versions, key=lambda v: v.date_published, reverse=True):
        game_versions = [_game_version(g) for g in version.game_versions]
        if _is_release(version.version_type):
            for game in game_versions:
                promos.setdefault(f"{game}-recommended", version.version_number)
        for game in game_versions:
            promos.setdefault(f"{game}-latest", version.version_number)
    return promos


def build_forge_updates(
    site_url: Optional[str], project_id: str, versions: Iterable[Any]
) -> dict[str, Any]:
    """The ``forge_updates.json`` body for a project."""
    return {
        "homepage": f"{site_url or ''}/mod/{project_id}",
        "promos": forge_promos(versions),
    }