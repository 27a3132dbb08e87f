"""Maven repository metadata, POM documents and file lookup for project versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterable, Optional
from xml.sax.saxutils import escape, quoteattr

from .ids import to_base62

__all__ = [
    "DEFAULT_GROUP_ID",
    "MavenFile",
    "MavenVersion",
    "Metadata",
    "MavenPom",
    "build_metadata",
    "is_pom_request",
    "find_file",
    "file_hash",
]

DEFAULT_GROUP_ID = "maven.modregistry"

_XML_DECLARATION = '<?xml version="1.0" encoding="utf-8"?>'
_POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"
_POM_SCHEMA_LOCATION = (
    "http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd"
)
_XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
_FILE_EXTENSIONS = {"mod": "jar", "modpack": "mrpack"}


def _element(tag: str, text: str) -> str:
    return f"<{tag}>{escape(text)}</{tag}>"


def _id_text(value: Any) -> str:
    return to_base62(value) if isinstance(value, int) else str(value)


@dataclass
class MavenFile:
    """A downloadable file of a version."""

    filename: str
    url: str
    primary: bool = False
    hashes: dict[str, str] = field(default_factory=dict)


@dataclass
class MavenVersion:
    """A listed version of a project as the repository sees it."""

    id: int
    version_number: str
    version_type: str = "release"
    files: list[MavenFile] = field(default_factory=list)

    @property
    def encoded_id(self) -> str:
        return _id_text(self.id)


@dataclass
class Metadata:
    """The ``maven-metadata.xml`` document of a project."""

    artifact_id: str
    latest: str
    release: str
    versions: list[str] = field(default_factory=list)
    last_updated: str = ""
    group_id: str = DEFAULT_GROUP_ID

    def to_xml(self) -> str:
        versions = "".join(_element("version", v) for v in self.versions)
        return (
            f"{_XML_DECLARATION}<metadata>"
            f"{_element('groupId', self.group_id)}"
            f"{_element('artifactId', self.artifact_id)}"
            "<versioning>"
            f"{_element('latest', self.latest)}"
            f"{_element('release', self.release)}"
            f"<versions>{versions}</versions>"
            f"{_element('lastUpdated', self.last_updated)}"
            "</versioning></metadata>"
        )


@dataclass
class MavenPom:
    """A minimal POM describing one version of a project."""

    artifact_id: str
    version: str
    name: str
    description: str
    group_id: str = DEFAULT_GROUP_ID
    model_version: str = "4.0.0"

    def to_xml(self) -> str:
        return (
            f"{_XML_DECLARATION}<project xmlns={quoteattr(_POM_NAMESPACE)}"
            f" xsi:schemaLocation={quoteattr(_POM_SCHEMA_LOCATION)}"
            f" xmlns:xsi={quoteattr(_XSI_NAMESPACE)}>"
            f"{_element('modelVersion', self.model_version)}"
            f"{_element('groupId', self.group_id)}"
            f"{_element('artifactId', self.artifact_id)}"
            f"{_element('version', self.version)}"
            f"{_element('name', self.name)}"
            f"{_element('description', self.description)}"
            "</project>"
        )


def build_metadata(
    project_id: Any, versions: Iterable[MavenVersion], updated: datetime
) -> Metadata:
    """Build the metadata for listed ``versions``, oldest first.

    A version number seen before is replaced by the version's encoded id.
    """
    names: list[str] = []
    seen: set[str] = set()
    latest_release: Optional[str] = None
    for version in versions:
        value = version.encoded_id if version.version_number in seen else version.version_number
        seen.add(value)
        if version.version_type == "release":
            latest_release = value
        names.append(value)
    return Metadata(
        artifact_id=_id_text(project_id),
        latest=names[-1] if names else "release",
        release=latest_release or "",
        versions=names,
        last_updated=updated.strftime("%Y%m%d%H%M%S"),
    )


def is_pom_request(project_id: str, version: MavenVersion, file: str) -> bool:
    """Whether ``file`` names the POM of ``version``."""
    return file in (
        f"{project_id}-{version.version_number}.pom",
        f"{project_id}-{version.encoded_id}.pom",
    )


def find_file(
    project_id: str, project_type: str, version: MavenVersion, file: str
) -> Optional[MavenFile]:
    """Find the file of ``version`` that a repository path asks for."""
    for candidate in version.files:
        if candidate.filename == file:
            return candidate

    extension = _FILE_EXTENSIONS.get(project_type)
    if extension is None:
        return None

    if file not in (
        f"{project_id}-{version.version_number}.{extension}",
        f"{project_id}-{version.encoded_id}.{extension}",
    ):
        return None

    primary = next((f for f in version.files if f.primary), None)
    if primary is not None:
        return primary
    return version.files[-1] if version.files else None


def file_hash(
    project_id: str,
    project_type: str,
    version: MavenVersion,
    file: str,
    algorithm: str,
) -> Optional[str]:
    """The ``algorithm`` hash of the requested file, if both exist."""
    found = find_file(project_id, project_type, version, file)
    if found is None:
        return None
    return found.hashes.get(algorithm)