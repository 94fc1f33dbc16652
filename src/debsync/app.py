"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from debsync.adapters.debian import select_extractor
from debsync.adapters.nexus import NexusClient
from debsync.config import get_nexus_config
from debsync.domain.sync import run_sync

if TYPE_CHECKING:
    from pathlib import Path

    from debsync.config import NexusConfig
    from debsync.domain.model import SyncRunResult
    from debsync.domain.ports import ComponentRegistry, DescriptorExtractor


log = getLogger(__name__)


def sync_debs(
    repository: str,
    path: Path,
    *,
    config: NexusConfig | None = None,
    registry: ComponentRegistry | None = None,
    extractor: DescriptorExtractor | None = None,
) -> SyncRunResult:
    """Synchronise local ``.deb`` artifacts into a Nexus apt repository."""

    effective_config = config or get_nexus_config()
    effective_registry = registry or NexusClient(config=effective_config)
    effective_extractor = extractor or select_extractor()
    log.info(
        "Starting sync: repository=%s, path=%s, nexus=%s",
        repository,
        path,
        effective_config.base_url,
    )

    result = run_sync(
        repository,
        path,
        registry=effective_registry,
        extractor=effective_extractor,
    )

    if result.succeeded:
        log.info(
            "Finished sync: artifacts=%d, deletions=%s, index=%s",
            len(result.artifacts),
            result.any_deletion_occurred,
            result.index_refresh,
        )
    return result
