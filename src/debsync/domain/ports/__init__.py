"""Domain port definitions for adapters."""

from __future__ import annotations

from .extraction import DescriptorExtractor
from .registry import ComponentRegistry

__all__ = [
    "ComponentRegistry",
    "DescriptorExtractor",
]
