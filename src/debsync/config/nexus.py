"""Nexus registry configuration values."""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .env import require_env_vars
from .http_resilience import ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from collections.abc import Callable

NEXUS_TIMEOUT_SECONDS = 30.0
NEXUS_URL_VAR = "NEXUS_URL"
NEXUS_USER_VAR = "NEXUS_USER"
NEXUS_PASSWORD_VAR = "NEXUS_PASSWORD"  # noqa: S105


@dataclass(frozen=True, slots=True)
class NexusConfig:
    """Holds the registry endpoint, credentials and HTTP client settings."""

    base_url: str
    username: str
    password: str = field(repr=False)
    resilience: ResilienceConfig


def build_session_headers(
    *,
    clock: Callable[[], float] = time.time,
    rng: random.Random | None = None,
) -> dict[str, str]:
    """Return the UI/anti-CSRF headers Nexus expects, generated once per run."""

    generator = rng or random.Random()  # noqa: S311
    millis = int(clock() * 1000)
    suffix = generator.randint(1_000_000, 9_999_999)
    return {
        "NX-ANTI-CSRF-TOKEN": f"0.{millis}{suffix}",
        "X-Nexus-UI": "true",
        "Accept": "application/json",
    }


def get_nexus_config(
    *,
    base_url: str | None = None,
    username: str | None = None,
    password: str | None = None,
    resilience: ResilienceConfig | None = None,
) -> NexusConfig:
    """Build the registry configuration, preferring explicit values over the environment."""

    values = require_env_vars(
        (NEXUS_URL_VAR, NEXUS_USER_VAR, NEXUS_PASSWORD_VAR),
        overrides={
            NEXUS_URL_VAR: base_url,
            NEXUS_USER_VAR: username,
            NEXUS_PASSWORD_VAR: password,
        },
    )
    effective_url = values[NEXUS_URL_VAR].strip().rstrip("/")
    credentials = (values[NEXUS_USER_VAR], values[NEXUS_PASSWORD_VAR])

    return NexusConfig(
        base_url=effective_url,
        username=credentials[0],
        password=credentials[1],
        resilience=resilience
        or ResilienceConfig(
            name="nexus",
            base_url=effective_url,
            timeout_seconds=NEXUS_TIMEOUT_SECONDS,
            # Registry mutations are not idempotent; failures surface immediately.
            retry=RetryPolicy(total=0),
            default_headers=build_session_headers(),
            auth=credentials,
        ),
    )
