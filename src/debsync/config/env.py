"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def require_env_vars(
    names: Sequence[str],
    *,
    overrides: Mapping[str, str | None] | None = None,
) -> dict[str, str]:
    """Return the given settings or raise if any are missing/blank.

    ``overrides`` holds values supplied explicitly (e.g. CLI flags); a non-blank
    override wins over the environment variable of the same name.
    """

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = overrides.get(name) if overrides else None
        if value is None or not value.strip():
            value = os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values
