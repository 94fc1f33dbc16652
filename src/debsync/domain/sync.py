"""Run coordination: resolve artifacts, snapshot the registry, reconcile, refresh."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from .errors import InvalidInputError, RegistryUnavailableError, UploadFailedError
from .index_refresh import maybe_rebuild_index
from .model import DEB_SUFFIX, InventorySnapshot, ReconciliationOutcome, SyncRunResult
from .reconciliation import reconcile_artifact

if TYPE_CHECKING:
    from pathlib import Path

    from .model import ArtifactReconciliation
    from .ports import ComponentRegistry, DescriptorExtractor

log = getLogger(__name__)

FATAL_ERRORS = (InvalidInputError, RegistryUnavailableError, UploadFailedError)


def _is_deb(path: Path) -> bool:
    return path.name.lower().endswith(DEB_SUFFIX)


def discover_artifacts(target: Path) -> list[Path]:
    """Return the artifacts designated by ``target``.

    A file must carry the ``.deb`` extension. A directory contributes its
    top-level ``.deb`` files (symlinks followed), sorted by name; it may yield none.
    """

    if target.is_file():
        if not _is_deb(target):
            raise InvalidInputError(f"File '{target}' is not a .deb package")
        return [target]

    if target.is_dir():
        try:
            entries = sorted(target.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            raise InvalidInputError(f"Cannot read directory '{target}': {exc}") from exc
        artifacts = [entry for entry in entries if _is_deb(entry) and entry.is_file()]
        log.info("Found %d .deb file(s) in %s", len(artifacts), target)
        return artifacts

    raise InvalidInputError(f"Path '{target}' is neither a file nor a directory")


def load_snapshot(registry: ComponentRegistry, repository: str) -> InventorySnapshot:
    log.info("Fetching components of repository %s", repository)
    records = registry.list_components(repository)
    log.info("Found %d component(s)", len(records))
    return InventorySnapshot(repository=repository, records=tuple(records))


def sync_artifact(
    artifact: Path,
    *,
    snapshot: InventorySnapshot,
    registry: ComponentRegistry,
    extractor: DescriptorExtractor,
) -> ArtifactReconciliation:
    actual = artifact.resolve()
    if actual != artifact.absolute():
        log.info("%s is a symlink to %s", artifact, actual)
    log.info("Processing %s", actual.name)

    try:
        descriptor = extractor(actual)
    except OSError as exc:
        raise InvalidInputError(f"Cannot read artifact '{artifact}': {exc}") from exc
    log.info(
        "Descriptor: name=%s, group=%s, version=%s, sha256=%s",
        descriptor.name,
        descriptor.group,
        descriptor.version,
        descriptor.fingerprint,
    )
    return reconcile_artifact(actual, descriptor, snapshot, registry)


def run_sync(
    repository: str,
    target: Path,
    *,
    registry: ComponentRegistry,
    extractor: DescriptorExtractor,
) -> SyncRunResult:
    """Synchronise ``target`` into ``repository``.

    Artifacts are processed one at a time against a single registry snapshot.
    The first fatal error ends the run and is returned on the result; whether any
    deletion happened is folded across artifacts and decides the index refresh.
    """

    result = SyncRunResult(repository=repository, target=target)
    try:
        artifacts = discover_artifacts(target)
        if not artifacts:
            log.info("Nothing to synchronise in %s", target)
            return result

        snapshot = load_snapshot(registry, repository)
        for artifact in artifacts:
            reconciliation = sync_artifact(
                artifact,
                snapshot=snapshot,
                registry=registry,
                extractor=extractor,
            )
            result.artifacts.append(reconciliation)
            result.any_deletion_occurred = (
                result.any_deletion_occurred or reconciliation.deletion_occurred
            )
    except FATAL_ERRORS as exc:
        log.error("Sync of %s aborted: %s", target, exc)  # noqa: TRY400
        result.error = exc
        return result

    result.index_refresh = maybe_rebuild_index(result.any_deletion_occurred, registry)
    log.info(
        "Sync finished: created=%d, replaced=%d, skipped=%d, index=%s",
        result.count(ReconciliationOutcome.CREATED),
        result.count(ReconciliationOutcome.REPLACED),
        result.count(ReconciliationOutcome.SKIPPED),
        result.index_refresh,
    )
    return result
