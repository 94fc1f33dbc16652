from __future__ import annotations

from debsync.domain.index_refresh import find_rebuild_task, maybe_rebuild_index
from debsync.domain.model import IndexRefreshStatus, RegistryTask
from tests.helpers.artifacts import APT_REBUILD_TASK
from tests.helpers.registry import FakeRegistry

OTHER_TASK = RegistryTask(id="task-blob", type="blobstore.compact", name="Compact blobs")


def test_no_deletion_means_no_registry_calls() -> None:
    registry = FakeRegistry(tasks=[APT_REBUILD_TASK])

    status = maybe_rebuild_index(False, registry)  # noqa: FBT003

    assert status is IndexRefreshStatus.SKIPPED
    assert registry.calls == []


def test_deletion_triggers_the_apt_rebuild_task() -> None:
    registry = FakeRegistry(tasks=[OTHER_TASK, APT_REBUILD_TASK])

    status = maybe_rebuild_index(True, registry)  # noqa: FBT003

    assert status is IndexRefreshStatus.TRIGGERED
    assert registry.calls == [("list_tasks",), ("run_task", "task-apt")]


def test_missing_task_is_reported_but_not_raised() -> None:
    registry = FakeRegistry(tasks=[OTHER_TASK])

    status = maybe_rebuild_index(True, registry)  # noqa: FBT003

    assert status is IndexRefreshStatus.UNAVAILABLE
    assert ("run_task", "task-blob") not in registry.calls


def test_task_endpoint_failure_is_not_fatal() -> None:
    registry = FakeRegistry(tasks_unavailable=True)

    status = maybe_rebuild_index(True, registry)  # noqa: FBT003

    assert status is IndexRefreshStatus.UNAVAILABLE


def test_find_rebuild_task_returns_first_of_type() -> None:
    second = RegistryTask(id="task-apt-2", type=APT_REBUILD_TASK.type)

    assert find_rebuild_task([OTHER_TASK, APT_REBUILD_TASK, second]) is APT_REBUILD_TASK
    assert find_rebuild_task([OTHER_TASK]) is None
