"""Pydantic models describing the Nexus REST API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class NexusBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class AssetChecksum(NexusBaseModel):
    sha256: str | None = None
    sha1: str | None = None
    md5: str | None = None

    _normalize_sha256 = field_validator("sha256", mode="before")(_blank_to_none)


class AssetItem(NexusBaseModel):
    id: str | None = None
    path: str | None = None
    download_url: str | None = Field(default=None, alias="downloadUrl")
    checksum: AssetChecksum | None = None


class ComponentItem(NexusBaseModel):
    id: str
    repository: str | None = None
    format: str | None = None
    name: str
    group: str | None = None
    version: str | None = None
    assets: list[AssetItem] = Field(default_factory=list)

    _normalize_optional = field_validator("group", "version", mode="before")(_blank_to_none)


class ComponentPage(NexusBaseModel):
    items: list[ComponentItem] = Field(default_factory=list)
    continuation_token: str | None = Field(default=None, alias="continuationToken")

    _normalize_token = field_validator("continuation_token", mode="before")(_blank_to_none)


class TaskItem(NexusBaseModel):
    id: str
    type: str
    name: str | None = None
    current_state: str | None = Field(default=None, alias="currentState")


class TaskList(NexusBaseModel):
    items: list[TaskItem] = Field(default_factory=list)
    continuation_token: str | None = Field(default=None, alias="continuationToken")
