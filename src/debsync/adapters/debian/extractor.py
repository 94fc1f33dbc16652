"""Derive artifact descriptors from ``.deb`` files.

Two strategies exist: reading the control fields with ``dpkg-deb`` and parsing
the conventional ``name_version_arch.deb`` filename. ``select_extractor`` probes
for ``dpkg-deb`` once and binds the strategy for the whole run; if ``dpkg-deb``
later fails on a particular file, that file falls back to its filename.
"""

from __future__ import annotations

import hashlib
import re
import subprocess
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final
from urllib.parse import unquote

from debsync.domain.errors import ExtractionDegradedError
from debsync.domain.model import DEB_SUFFIX, UNKNOWN, ArtifactDescriptor, PackageIdentity

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

log = getLogger(__name__)

DPKG_DEB: Final[str] = "dpkg-deb"
CONTROL_FIELDS: Final[tuple[str, ...]] = ("Package", "Version", "Architecture")
_CHUNK_SIZE: Final[int] = 65536
_FIELD_LINE = re.compile(r"^(?P<key>[A-Za-z0-9][A-Za-z0-9-]*):\s*(?P<value>.*)$")

type CommandRunner = Callable[[Sequence[str]], subprocess.CompletedProcess[str]]
type IdentityInspector = Callable[[Path], PackageIdentity]


def run_command(args: Sequence[str]) -> subprocess.CompletedProcess[str]:
    return subprocess.run(  # noqa: S603
        list(args),
        check=False,
        capture_output=True,
        text=True,
    )


def compute_fingerprint(path: Path) -> str:
    digest = hashlib.sha256()
    with path.open("rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def parse_filename(path: Path) -> PackageIdentity:
    """Split ``name_version_arch.deb`` into its parts.

    The last underscore-separated part is the architecture, everything between
    the first and the last is the version. Percent-encoded epochs (``1%3a2.0``)
    are decoded. Parts that cannot be determined are ``UNKNOWN``.
    """

    stem = path.name
    if stem.lower().endswith(DEB_SUFFIX):
        stem = stem[: -len(DEB_SUFFIX)]
    parts = stem.split("_")
    name = parts[0] or UNKNOWN
    if len(parts) == 1:
        return PackageIdentity(name=name)
    version = unquote("_".join(parts[1:-1]))
    return PackageIdentity(
        name=name,
        group=parts[-1] or UNKNOWN,
        version=version or UNKNOWN,
    )


def parse_control_fields(output: str) -> dict[str, str]:
    fields: dict[str, str] = {}
    for line in output.splitlines():
        match = _FIELD_LINE.match(line.strip())
        if match is None:
            continue
        fields[match["key"].lower()] = match["value"].strip()
    return fields


@dataclass(slots=True)
class DpkgInspector:
    """Read package name, version and architecture with ``dpkg-deb --field``."""

    runner: CommandRunner = field(default=run_command)

    def __call__(self, artifact: Path) -> PackageIdentity:
        try:
            completed = self.runner([DPKG_DEB, "--field", str(artifact), *CONTROL_FIELDS])
        except OSError as exc:
            raise ExtractionDegradedError(f"{DPKG_DEB} could not be executed: {exc}") from exc
        if completed.returncode != 0:
            stderr = completed.stderr.strip()
            raise ExtractionDegradedError(
                f"{DPKG_DEB} exited with {completed.returncode}: {stderr}"
            )

        fields = parse_control_fields(completed.stdout)
        name = fields.get("package")
        version = fields.get("version")
        arch = fields.get("architecture")
        if not (name and version and arch):
            raise ExtractionDegradedError(f"{DPKG_DEB} returned incomplete control fields")
        return PackageIdentity(name=name, group=arch, version=version)


def dpkg_available(runner: CommandRunner = run_command) -> bool:
    try:
        completed = runner([DPKG_DEB, "--version"])
    except OSError:
        return False
    return completed.returncode == 0


@dataclass(slots=True)
class DebExtractor:
    """``DescriptorExtractor`` for ``.deb`` artifacts."""

    inspector: IdentityInspector | None = None

    @property
    def precise(self) -> bool:
        return self.inspector is not None

    def identify(self, artifact: Path) -> PackageIdentity:
        if self.inspector is not None:
            try:
                return self.inspector(artifact)
            except ExtractionDegradedError as exc:
                log.warning("%s; falling back to filename for %s", exc, artifact.name)
        return parse_filename(artifact)

    def __call__(self, artifact: Path) -> ArtifactDescriptor:
        identity = self.identify(artifact)
        return ArtifactDescriptor.from_identity(identity, fingerprint=compute_fingerprint(artifact))


def select_extractor(*, runner: CommandRunner = run_command) -> DebExtractor:
    """Probe for ``dpkg-deb`` and return the extractor to use for this run."""

    if dpkg_available(runner):
        log.info("%s found; reading package metadata from control files", DPKG_DEB)
        return DebExtractor(inspector=DpkgInspector(runner=runner))
    log.warning("%s not found; package metadata will be parsed from filenames", DPKG_DEB)
    return DebExtractor()
