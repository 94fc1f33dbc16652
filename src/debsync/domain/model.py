"""Value types shared by the extractor, the registry adapter and the sync engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from .errors import SyncError

UNKNOWN: Final[str] = "-"
"""Placeholder for a package field that could not be determined; matches anything."""

DEB_SUFFIX: Final[str] = ".deb"


@dataclass(frozen=True, slots=True)
class PackageIdentity:
    """Name/architecture/version triple as read from a package or its filename."""

    name: str
    group: str = UNKNOWN
    version: str = UNKNOWN


@dataclass(frozen=True, slots=True)
class ArtifactDescriptor:
    """Identity plus SHA-256 fingerprint of one local artifact."""

    name: str
    group: str
    version: str
    fingerprint: str

    @classmethod
    def from_identity(cls, identity: PackageIdentity, *, fingerprint: str) -> ArtifactDescriptor:
        return cls(
            name=identity.name,
            group=identity.group,
            version=identity.version,
            fingerprint=fingerprint,
        )


@dataclass(frozen=True, slots=True)
class ComponentRecord:
    """One component stored in the registry.

    ``fingerprint`` is ``None`` when the registry has no SHA-256 checksum for the
    component's asset; such records never count as current.
    """

    id: str
    name: str
    group: str = UNKNOWN
    version: str = UNKNOWN
    fingerprint: str | None = None


@dataclass(frozen=True, slots=True)
class InventorySnapshot:
    """Registry contents captured once at the start of a run."""

    repository: str
    records: tuple[ComponentRecord, ...] = ()

    def __iter__(self) -> Iterator[ComponentRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True, slots=True)
class RegistryTask:
    """Scheduled maintenance task registered on the registry."""

    id: str
    type: str
    name: str | None = None


class ReconciliationOutcome(StrEnum):
    SKIPPED = "skipped"
    REPLACED = "replaced"
    CREATED = "created"


@dataclass(slots=True)
class ArtifactReconciliation:
    """What happened to a single artifact during a run."""

    path: Path
    descriptor: ArtifactDescriptor
    outcome: ReconciliationOutcome
    deleted_ids: tuple[str, ...] = ()
    failed_deletion_ids: tuple[str, ...] = ()

    @property
    def deletion_occurred(self) -> bool:
        return bool(self.deleted_ids)

    @property
    def uploaded(self) -> bool:
        return self.outcome is not ReconciliationOutcome.SKIPPED


class IndexRefreshStatus(StrEnum):
    SKIPPED = "skipped"
    TRIGGERED = "triggered"
    UNAVAILABLE = "unavailable"


@dataclass(slots=True)
class SyncRunResult:
    """Outcome of a full run; ``error`` holds the first fatal failure, if any."""

    repository: str
    target: Path
    artifacts: list[ArtifactReconciliation] = field(
        default_factory=list["ArtifactReconciliation"]
    )
    any_deletion_occurred: bool = False
    index_refresh: IndexRefreshStatus = IndexRefreshStatus.SKIPPED
    error: SyncError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def count(self, outcome: ReconciliationOutcome) -> int:
        return sum(1 for artifact in self.artifacts if artifact.outcome is outcome)
