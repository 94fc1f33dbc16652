"""Port for deriving artifact descriptors from local files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pathlib import Path

    from debsync.domain.model import ArtifactDescriptor


@runtime_checkable
class DescriptorExtractor(Protocol):
    """Callable port turning an artifact path into its descriptor."""

    def __call__(self, artifact: Path) -> ArtifactDescriptor: ...
