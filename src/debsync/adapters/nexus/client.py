"""HTTP client for the Nexus REST API."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx
from pydantic import ValidationError

from debsync.adapters.http_resilience import ResilientClient
from debsync.domain.errors import (
    DeleteFailedError,
    IndexRefreshUnavailableError,
    RegistryUnavailableError,
    UploadFailedError,
)

from .schema import ComponentPage, TaskList
from .translator import translate_component, translate_task

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

    from debsync.config.http_resilience import ResilienceConfig
    from debsync.config.nexus import NexusConfig
    from debsync.domain.model import ComponentRecord, RegistryTask

log = getLogger(__name__)

COMPONENTS_PATH: Final[str] = "/service/rest/v1/components"
TASKS_PATH: Final[str] = "/service/rest/v1/tasks"
DEB_CONTENT_TYPE: Final[str] = "application/x-deb"
APT_ASSET_FIELD: Final[str] = "apt.asset"


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


def _describe(response: httpx.Response) -> str:
    body = response.text.strip()
    if len(body) > 500:
        body = body[:500] + "..."
    return f"HTTP {response.status_code}: {body}" if body else f"HTTP {response.status_code}"


class NexusClient:
    """Registry adapter implementing ``ComponentRegistry`` over the Nexus REST API."""

    def __init__(
        self,
        *,
        config: NexusConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or _default_client_factory

    def list_components(self, repository: str) -> list[ComponentRecord]:
        return asyncio.run(self._list_components_async(repository))

    def delete_component(self, component_id: str) -> None:
        asyncio.run(self._delete_component_async(component_id))

    def upload_component(self, repository: str, artifact: Path) -> None:
        asyncio.run(self._upload_component_async(repository, artifact))

    def list_tasks(self) -> list[RegistryTask]:
        return asyncio.run(self._list_tasks_async())

    def run_task(self, task_id: str) -> None:
        asyncio.run(self._run_task_async(task_id))

    async def _list_components_async(self, repository: str) -> list[ComponentRecord]:
        records: list[ComponentRecord] = []
        token: str | None = None
        pages = 0

        async with self._client_factory(self._resilience) as client:
            while True:
                page = await self._request_component_page(
                    client=client,
                    repository=repository,
                    continuation_token=token,
                )
                pages += 1
                records.extend(translate_component(item) for item in page.items)
                token = page.continuation_token
                if token is None:
                    break

        log.debug("Read %d component(s) from %d page(s)", len(records), pages)
        return records

    async def _request_component_page(
        self,
        *,
        client: ResilientClient,
        repository: str,
        continuation_token: str | None,
    ) -> ComponentPage:
        params: dict[str, str] = {"repository": repository}
        if continuation_token is not None:
            params["continuationToken"] = continuation_token

        try:
            response = await client.get(COMPONENTS_PATH, params=params)
        except httpx.HTTPError as exc:
            raise RegistryUnavailableError(f"Listing components failed: {exc}") from exc
        if response.is_error:
            log.error("Listing components failed: %s", _describe(response))
            raise RegistryUnavailableError(
                f"Listing components of {repository} failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return ComponentPage.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise RegistryUnavailableError(
                f"Unexpected component listing payload: {exc}",
                status_code=response.status_code,
            ) from exc

    async def _delete_component_async(self, component_id: str) -> None:
        log.info("Deleting component %s", component_id)
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.delete(f"{COMPONENTS_PATH}/{component_id}")
            except httpx.HTTPError as exc:
                raise DeleteFailedError(component_id, f"Delete request failed: {exc}") from exc

        if response.status_code != httpx.codes.NO_CONTENT:
            raise DeleteFailedError(component_id, f"Delete rejected: {_describe(response)}")
        log.info("Deleted component %s", component_id)

    async def _upload_component_async(self, repository: str, artifact: Path) -> None:
        log.info("Uploading %s to repository %s", artifact, repository)
        try:
            content = artifact.read_bytes()
        except OSError as exc:
            raise UploadFailedError(f"Cannot read {artifact}: {exc}") from exc

        filename = artifact.name
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.post(
                    COMPONENTS_PATH,
                    params={"repository": repository},
                    files={APT_ASSET_FIELD: (filename, content, DEB_CONTENT_TYPE)},
                    data={f"{APT_ASSET_FIELD}.filename": filename},
                )
            except httpx.HTTPError as exc:
                raise UploadFailedError(f"Upload of {filename} failed: {exc}") from exc

        if response.status_code != httpx.codes.NO_CONTENT:
            log.error("Upload of %s rejected: %s", filename, _describe(response))
            raise UploadFailedError(f"Upload of {filename} rejected: {_describe(response)}")
        log.info("Uploaded %s", filename)

    async def _list_tasks_async(self) -> list[RegistryTask]:
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.get(TASKS_PATH)
            except httpx.HTTPError as exc:
                raise IndexRefreshUnavailableError(f"Listing tasks failed: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise IndexRefreshUnavailableError(f"Listing tasks failed: {_describe(response)}")
        try:
            payload = TaskList.model_validate(response.json())
        except (ValueError, ValidationError) as exc:
            raise IndexRefreshUnavailableError(f"Unexpected task listing payload: {exc}") from exc
        return [translate_task(item) for item in payload.items]

    async def _run_task_async(self, task_id: str) -> None:
        async with self._client_factory(self._resilience) as client:
            try:
                response = await client.post(f"{TASKS_PATH}/{task_id}/run", json={})
            except httpx.HTTPError as exc:
                raise IndexRefreshUnavailableError(f"Running task {task_id} failed: {exc}") from exc

        if response.status_code != httpx.codes.NO_CONTENT:
            raise IndexRefreshUnavailableError(
                f"Running task {task_id} failed: {_describe(response)}"
            )
