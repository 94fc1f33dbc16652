"""Port for the remote package registry."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from debsync.domain.model import ComponentRecord, RegistryTask


@runtime_checkable
class ComponentRegistry(Protocol):
    """Operations the sync engine needs from a registry.

    Implementations translate transport failures into ``debsync.domain.errors``
    types: listing raises ``RegistryUnavailableError``, deleting raises
    ``DeleteFailedError``, uploading raises ``UploadFailedError`` and task calls
    raise ``IndexRefreshUnavailableError``.
    """

    def list_components(self, repository: str) -> list[ComponentRecord]: ...

    def delete_component(self, component_id: str) -> None: ...

    def upload_component(self, repository: str, artifact: Path) -> None: ...

    def list_tasks(self) -> list[RegistryTask]: ...

    def run_task(self, task_id: str) -> None: ...
