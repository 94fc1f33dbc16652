from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from debsync.domain.errors import UploadFailedError
from debsync.domain.model import SyncRunResult
from debsync.ui import cli as cli_module

if TYPE_CHECKING:
    from pathlib import Path

    from debsync.config import NexusConfig

CREDENTIAL_FLAGS = [
    "--nexus-url",
    "https://nexus.example.com/",
    "--nexus-user",
    "ci",
    "--nexus-password",
    "secret",
]


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("NEXUS_URL", "NEXUS_USER", "NEXUS_PASSWORD", "GITHUB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)


def _fake_sync(
    monkeypatch: pytest.MonkeyPatch,
    captured: dict[str, object],
    *,
    error: Exception | None = None,
) -> None:
    def fake_sync(repository: str, path: Path, *, config: NexusConfig) -> SyncRunResult:
        captured.update(repository=repository, path=path, config=config)
        return SyncRunResult(
            repository=repository,
            target=path,
            error=UploadFailedError(str(error)) if error else None,
        )

    monkeypatch.setattr(cli_module, "sync_debs", fake_sync)


def test_main_cli_passes_arguments(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    captured: dict[str, object] = {}
    _fake_sync(monkeypatch, captured)

    cli_module.main(["apt-hosted", str(tmp_path), *CREDENTIAL_FLAGS])

    assert captured["repository"] == "apt-hosted"
    assert captured["path"] == tmp_path
    config = captured["config"]
    assert config.base_url == "https://nexus.example.com"  # type: ignore[attr-defined]


def test_main_cli_reads_credentials_from_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("NEXUS_URL", "https://env.example.com")
    monkeypatch.setenv("NEXUS_USER", "env-user")
    monkeypatch.setenv("NEXUS_PASSWORD", "env-pass")
    captured: dict[str, object] = {}
    _fake_sync(monkeypatch, captured)

    cli_module.main(["apt-hosted", str(tmp_path)])

    assert captured["config"].username == "env-user"  # type: ignore[attr-defined]


def test_main_cli_missing_configuration_exits_2(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured: dict[str, object] = {}
    _fake_sync(monkeypatch, captured)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apt-hosted", str(tmp_path)])

    assert excinfo.value.code == 2
    assert captured == {}


def test_main_cli_invalid_log_level_exits_2(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _fake_sync(monkeypatch, {})

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apt-hosted", str(tmp_path), *CREDENTIAL_FLAGS, "--log-level", "loud"])

    assert excinfo.value.code == 2


def test_main_cli_failed_run_exits_1_and_reports_failure(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    output = tmp_path / "github_output"
    monkeypatch.setenv("GITHUB_OUTPUT", str(output))
    _fake_sync(monkeypatch, {}, error=RuntimeError("upload rejected"))

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apt-hosted", str(tmp_path), *CREDENTIAL_FLAGS])

    assert excinfo.value.code == 1
    assert output.read_text() == "result=failure\n"


def test_main_cli_unexpected_error_exits_1(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    def exploding_sync(*_: object, **__: object) -> SyncRunResult:
        raise RuntimeError("boom")

    monkeypatch.setattr(cli_module, "sync_debs", exploding_sync)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["apt-hosted", str(tmp_path), *CREDENTIAL_FLAGS])

    assert excinfo.value.code == 1


def test_main_cli_success_writes_github_output(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    output = tmp_path / "github_output"
    output.write_text("previous=1\n")
    monkeypatch.setenv("GITHUB_OUTPUT", str(output))
    _fake_sync(monkeypatch, {})

    cli_module.main(["apt-hosted", str(tmp_path), *CREDENTIAL_FLAGS])

    assert output.read_text() == "previous=1\nresult=success\n"
