"""Application configuration helpers."""

from __future__ import annotations

from .env import require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .nexus import NexusConfig, build_session_headers, get_nexus_config

__all__ = [
    "ConfigurationError",
    "MissingConfigurationError",
    "NexusConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "build_session_headers",
    "get_nexus_config",
    "require_env_vars",
]
