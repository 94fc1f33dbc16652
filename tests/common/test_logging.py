from __future__ import annotations

import logging

import pytest

from debsync.common import configure_logging, parse_log_level


@pytest.mark.parametrize(
    ("value", "expected"),
    [("debug", logging.DEBUG), ("INFO", logging.INFO), (" warning ", logging.WARNING)],
)
def test_parse_log_level(value: str, expected: int) -> None:
    assert parse_log_level(value) == expected


def test_parse_log_level_rejects_unknown_names() -> None:
    with pytest.raises(ValueError, match="chatty"):
        parse_log_level("chatty")


def test_configure_logging_keeps_httpx_quiet() -> None:
    configure_logging(level=logging.DEBUG, force=True)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
