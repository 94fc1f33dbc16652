"""Conditional rebuild of the apt metadata index after deletions."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Final

from .errors import IndexRefreshUnavailableError
from .model import IndexRefreshStatus

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .model import RegistryTask
    from .ports import ComponentRegistry

log = getLogger(__name__)

APT_REBUILD_TASK_TYPE: Final[str] = "repository.apt.rebuild.metadata"


def find_rebuild_task(
    tasks: Iterable[RegistryTask],
    *,
    task_type: str = APT_REBUILD_TASK_TYPE,
) -> RegistryTask | None:
    return next((task for task in tasks if task.type == task_type), None)


def maybe_rebuild_index(
    any_deletion_occurred: bool,  # noqa: FBT001
    registry: ComponentRegistry,
) -> IndexRefreshStatus:
    """Start the apt metadata rebuild task if anything was deleted.

    Best effort: a missing task or a failing call is logged and reported as
    ``UNAVAILABLE``, never raised.
    """

    if not any_deletion_occurred:
        log.debug("No components deleted; skipping apt metadata rebuild")
        return IndexRefreshStatus.SKIPPED

    log.info("Components were deleted; requesting apt metadata rebuild")
    try:
        task = find_rebuild_task(registry.list_tasks())
        if task is None:
            log.warning("No %s task is registered; metadata not rebuilt", APT_REBUILD_TASK_TYPE)
            return IndexRefreshStatus.UNAVAILABLE
        log.info("Found apt metadata rebuild task %s", task.id)
        registry.run_task(task.id)
    except IndexRefreshUnavailableError as exc:
        log.warning("Apt metadata rebuild failed: %s", exc)
        return IndexRefreshStatus.UNAVAILABLE

    log.info("Apt metadata rebuild task %s started", task.id)
    return IndexRefreshStatus.TRIGGERED
