from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from debsync.adapters.nexus import NexusClient
from tests.helpers.nexus import make_client_factory, make_nexus_config

if TYPE_CHECKING:
    from collections.abc import Callable

    from debsync.config.nexus import NexusConfig
    from tests.helpers.nexus import Handler


@pytest.fixture
def nexus_config() -> NexusConfig:
    return make_nexus_config()


@pytest.fixture
def make_client(nexus_config: NexusConfig) -> Callable[[Handler], NexusClient]:
    def build(handler: Handler) -> NexusClient:
        return NexusClient(config=nexus_config, client_factory=make_client_factory(handler))

    return build
