"""Error taxonomy for a sync run.

Fatal errors (``InvalidInputError``, ``RegistryUnavailableError``,
``UploadFailedError``) stop the run. The remaining types are caught where they
occur, logged, and processing continues.
"""

from __future__ import annotations


class SyncError(RuntimeError):
    """Base class for all sync failures."""


class InvalidInputError(SyncError):
    """Target path is not a ``.deb`` file or a readable directory."""


class RegistryUnavailableError(SyncError):
    """Transport, authentication or HTTP-level failure talking to the registry."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ExtractionDegradedError(SyncError):
    """Precise package inspection is unavailable; the filename is used instead."""


class DeleteFailedError(SyncError):
    """A component could not be deleted."""

    def __init__(self, component_id: str, message: str) -> None:
        super().__init__(message)
        self.component_id = component_id


class UploadFailedError(SyncError):
    """An artifact could not be uploaded."""


class IndexRefreshUnavailableError(SyncError):
    """The metadata rebuild task could not be listed or started."""
