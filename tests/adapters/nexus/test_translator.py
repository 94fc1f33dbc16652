from __future__ import annotations

from debsync.adapters.nexus import ComponentItem, ComponentPage, translate_component
from debsync.domain.model import UNKNOWN


def test_component_page_normalises_blank_values() -> None:
    page = ComponentPage.model_validate(
        {
            "items": [
                {
                    "id": "c1",
                    "name": "foo",
                    "group": "  ",
                    "version": "",
                    "assets": [{"id": "a1", "downloadUrl": "http://x/foo.deb"}],
                    "unexpected": True,
                }
            ],
            "continuationToken": "",
        }
    )

    item = page.items[0]
    assert page.continuation_token is None
    assert item.group is None
    assert item.version is None
    assert item.assets[0].download_url == "http://x/foo.deb"


def test_translate_component_uses_first_asset_checksum() -> None:
    item = ComponentItem.model_validate(
        {
            "id": "c1",
            "name": "foo",
            "group": "amd64",
            "version": "1.0.0",
            "assets": [
                {"id": "a1", "checksum": {"sha256": "ABC123", "sha1": "ignored"}},
                {"id": "a2", "checksum": {"sha256": "def456"}},
            ],
        }
    )

    record = translate_component(item)

    assert record.id == "c1"
    assert (record.name, record.group, record.version) == ("foo", "amd64", "1.0.0")
    assert record.fingerprint == "abc123"


def test_translate_component_without_group_or_checksum() -> None:
    item = ComponentItem.model_validate({"id": "c2", "name": "bar", "assets": [{"id": "a"}]})

    record = translate_component(item)

    assert record.group == UNKNOWN
    assert record.version == UNKNOWN
    assert record.fingerprint is None
