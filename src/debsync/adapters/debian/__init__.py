"""Debian package inspection adapter."""

from __future__ import annotations

from .extractor import (
    DebExtractor,
    DpkgInspector,
    compute_fingerprint,
    parse_filename,
    select_extractor,
)

__all__ = [
    "DebExtractor",
    "DpkgInspector",
    "compute_fingerprint",
    "parse_filename",
    "select_extractor",
]
