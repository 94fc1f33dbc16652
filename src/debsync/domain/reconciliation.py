"""Per-artifact reconciliation against a registry snapshot.

An artifact is compared with every snapshot record sharing its name. Group and
version must agree unless either side holds the ``UNKNOWN`` placeholder. Each
matching record whose fingerprint differs is deleted on the spot; a record with
an identical fingerprint marks the artifact as current. The artifact is
uploaded only if no match was current.

The snapshot is never refreshed between artifacts, so two artifacts that match
the same record both see it as it was when the run started.
"""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .errors import DeleteFailedError
from .model import UNKNOWN, ArtifactReconciliation, ReconciliationOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from .model import ArtifactDescriptor, ComponentRecord, InventorySnapshot
    from .ports import ComponentRegistry

log = getLogger(__name__)


def _field_matches(remote: str, local: str) -> bool:
    return remote == local or UNKNOWN in (remote, local)


def matches(record: ComponentRecord, descriptor: ArtifactDescriptor) -> bool:
    """Return whether ``record`` denotes the same package as ``descriptor``."""

    return (
        record.name == descriptor.name
        and _field_matches(record.group, descriptor.group)
        and _field_matches(record.version, descriptor.version)
    )


def find_matches(
    descriptor: ArtifactDescriptor,
    records: Iterable[ComponentRecord],
) -> list[ComponentRecord]:
    return [record for record in records if matches(record, descriptor)]


def is_current(record: ComponentRecord, descriptor: ArtifactDescriptor) -> bool:
    return record.fingerprint is not None and record.fingerprint == descriptor.fingerprint


def reconcile_artifact(
    artifact_path: Path,
    descriptor: ArtifactDescriptor,
    snapshot: InventorySnapshot,
    registry: ComponentRegistry,
) -> ArtifactReconciliation:
    """Bring the registry in line with one local artifact.

    Raises ``UploadFailedError`` when the upload fails; deletion failures are
    logged and recorded on the result instead.
    """

    current = False
    deleted: list[str] = []
    failed: list[str] = []

    for record in find_matches(descriptor, snapshot):
        log.info(
            "Matched component %s (name=%s, group=%s, version=%s, sha256=%s)",
            record.id,
            record.name,
            record.group,
            record.version,
            record.fingerprint or UNKNOWN,
        )
        if is_current(record, descriptor):
            log.info("Checksum matches component %s; no upload needed", record.id)
            current = True
            continue

        log.info("Checksum differs from component %s; deleting it", record.id)
        try:
            registry.delete_component(record.id)
        except DeleteFailedError as exc:
            log.warning("Could not delete component %s: %s", exc.component_id, exc)
            failed.append(record.id)
        else:
            deleted.append(record.id)

    if current:
        outcome = ReconciliationOutcome.SKIPPED
    else:
        registry.upload_component(snapshot.repository, artifact_path)
        outcome = ReconciliationOutcome.REPLACED if deleted else ReconciliationOutcome.CREATED

    log.info("%s: %s", artifact_path.name, outcome)
    return ArtifactReconciliation(
        path=artifact_path,
        descriptor=descriptor,
        outcome=outcome,
        deleted_ids=tuple(deleted),
        failed_deletion_ids=tuple(failed),
    )
