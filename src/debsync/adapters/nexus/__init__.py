"""Public interface for the Nexus registry adapter."""

from __future__ import annotations

from .client import NexusClient
from .schema import ComponentItem, ComponentPage, TaskItem, TaskList
from .translator import translate_component, translate_task

__all__ = [
    "ComponentItem",
    "ComponentPage",
    "NexusClient",
    "TaskItem",
    "TaskList",
    "translate_component",
    "translate_task",
]
