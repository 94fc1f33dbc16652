from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from debsync.app import sync_debs
from debsync.common import configure_logging, parse_log_level
from debsync.config import ConfigurationError, get_nexus_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

GITHUB_OUTPUT_VAR = "GITHUB_OUTPUT"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synchronise .deb packages into a Nexus apt repository",
    )
    parser.add_argument("repository", help="Name of the target Nexus repository")
    parser.add_argument("path", help="A .deb file or a directory containing .deb files")
    parser.add_argument(
        "--nexus-url",
        type=str,
        help="Base URL of the Nexus instance (defaults to $NEXUS_URL)",
    )
    parser.add_argument(
        "--nexus-user",
        type=str,
        help="Nexus username (defaults to $NEXUS_USER)",
    )
    parser.add_argument(
        "--nexus-password",
        type=str,
        help="Nexus password (defaults to $NEXUS_PASSWORD)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (default: %(default)s)",
    )
    return parser.parse_args(list(argv))


def _write_github_output(*, succeeded: bool) -> None:
    output_path = os.getenv(GITHUB_OUTPUT_VAR)
    if not output_path:
        return
    result = "success" if succeeded else "failure"
    with Path(output_path).open("a", encoding="utf-8") as handle:
        handle.write(f"result={result}\n")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    try:
        configure_logging(level=parse_log_level(parsed_args.log_level), force=True)
        config = get_nexus_config(
            base_url=parsed_args.nexus_url,
            username=parsed_args.nexus_user,
            password=parsed_args.nexus_password,
        )
    except (ValueError, ConfigurationError):
        log.exception("CLI validation error")
        sys.exit(2)

    log.info("Repository: %s", parsed_args.repository)
    log.info("Path: %s", parsed_args.path)
    log.info("Nexus URL: %s", config.base_url)

    try:
        result = sync_debs(parsed_args.repository, Path(parsed_args.path), config=config)
    except Exception:
        log.exception("Fatal error during sync")
        _write_github_output(succeeded=False)
        sys.exit(1)

    _write_github_output(succeeded=result.succeeded)
    if not result.succeeded:
        log.error("Sync failed: %s", result.error)
        sys.exit(1)
    log.info("Upload completed successfully")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(130)


def run() -> None:
    """Console entry point: load ``.env`` and install the SIGINT handler first."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
