"""Data models for the package report pipeline."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Literal

# "probe_failed": npm info exited non-zero, "unparsable": it succeeded but
# its stdout was not a JSON object.
MetadataStatus = Literal["ok", "probe_failed", "unparsable"]


@dataclass
class DependencyGroup:
    """A named group of declared packages, in manifest order."""

    name: str
    title: str
    packages: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.packages)


@dataclass
class Manifest:
    """The two dependency groups of a ``package.json``."""

    path: Path
    dependencies: DependencyGroup
    dev_dependencies: DependencyGroup

    @property
    def groups(self) -> tuple[DependencyGroup, DependencyGroup]:
        return (self.dependencies, self.dev_dependencies)

    def declared(self) -> Iterator[tuple[str, str]]:
        """Yield every (name, version range) pair across both groups."""
        for group in self.groups:
            yield from group.packages.items()


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one package-manager invocation.

    Exactly one of ``output`` / ``error`` is meaningful, selected by ``ok``.
    """

    ok: bool
    output: str = ""
    error: str = ""


@dataclass(frozen=True)
class PackageMetadata:
    """The subset of ``npm info --json`` the report uses."""

    version: str | None = None
    homepage: str | None = None
    description: str | None = None

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> PackageMetadata:
        return cls(
            version=_as_text(data.get("version")),
            homepage=_as_text(data.get("homepage")),
            description=_as_text(data.get("description")),
        )


@dataclass(frozen=True)
class PackageRecord:
    """Everything collected for a single declared package."""

    name: str
    declared_version: str
    installed: ProbeResult
    metadata: PackageMetadata | None
    metadata_status: MetadataStatus

    @property
    def installed_failed(self) -> bool:
        return not self.installed.ok


@dataclass
class ReportResult:
    """Summary of a single pipeline run."""

    output_path: Path
    dependency_count: int
    dev_dependency_count: int
    failed: list[str] = field(default_factory=list)
    missing_metadata: list[str] = field(default_factory=list)


def _as_text(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)
