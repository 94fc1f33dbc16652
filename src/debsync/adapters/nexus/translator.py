"""Translate Nexus payloads into domain records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from debsync.domain.model import UNKNOWN, ComponentRecord, RegistryTask

if TYPE_CHECKING:
    from .schema import ComponentItem, TaskItem


def translate_component(item: ComponentItem) -> ComponentRecord:
    # Only the first asset is considered; apt components carry exactly one.
    checksum = item.assets[0].checksum if item.assets else None
    return ComponentRecord(
        id=item.id,
        name=item.name,
        group=item.group or UNKNOWN,
        version=item.version or UNKNOWN,
        fingerprint=checksum.sha256.lower() if checksum and checksum.sha256 else None,
    )


def translate_task(item: TaskItem) -> RegistryTask:
    return RegistryTask(id=item.id, type=item.type, name=item.name)
