#!/usr/bin/env python3
"""
KiCad Bootstrap
--------------------------------------------------

Installs KiCad from the official KiCad PPA on Debian/Ubuntu systems.

Steps:
  1. Verify the environment (regular user, apt, sudo, network)
  2. Register the KiCad PPA if it is missing
  3. Refresh the apt package lists
  4. Install the KiCad packages, retrying each one on failure

Usage:
  Run as a regular user with sudo rights: kicad-bootstrap
  Set DEBUG=1 for verbose logging.
"""

import signal
import sys
from typing import Any, Optional

import click
from rich.traceback import install as install_rich_traceback

from kicad_bootstrap.config import AppConfig
from kicad_bootstrap.bootstrap import run_bootstrap
from kicad_bootstrap.errors import BootstrapError
from kicad_bootstrap.log import (
    NordColors,
    console,
    create_header,
    logger,
    print_error,
    print_success,
    print_summary,
    setup_logging,
)

_config: Optional[AppConfig] = None


def fail(message: str, log_file: str) -> None:
    """Report a fatal error and terminate with exit code 1."""
    print_error(message)
    print_error(f"Bootstrap failed. Check log file: {log_file}")
    sys.exit(1)


def signal_handler(signum: int, frame: Optional[Any]) -> None:
    sig_name = f"signal {signum}"
    try:
        sig_name = signal.Signals(signum).name
    except ValueError:
        pass

    console.print()
    logger.debug("Received %s", sig_name)
    fail("Script interrupted by user", _config.log_file if _config else "-")


def install_signal_handlers() -> None:
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            signal.signal(sig, signal_handler)
        except (AttributeError, ValueError):
            # Not in the main thread
            pass


# ----------------------------------------------------------------
# Main CLI Entry Point with Click
# ----------------------------------------------------------------
@click.command()
def main() -> None:
    """
    Install KiCad from the KiCad PPA via apt.

    Exits with 0 when every package is installed and 1 otherwise.
    """
    global _config

    install_rich_traceback(show_locals=False)
    config = AppConfig.from_env()
    _config = config

    try:
        setup_logging(config)
    except OSError as e:
        console.print(f"[bold {NordColors.RED}]✗ Cannot open log file {config.log_file}: {e}[/]")
        sys.exit(1)

    install_signal_handlers()

    console.print(create_header(config))
    logger.info("Starting KiCad bootstrap...")
    logger.info("Log file: %s", config.log_file)

    try:
        report = run_bootstrap(config)
    except BootstrapError as e:
        fail(str(e), config.log_file)

    print_summary(report.succeeded, report.failed)
    if not report.ok:
        fail(
            f"{len(report.failed)} package(s) could not be installed",
            config.log_file,
        )

    print_success("KiCad installation completed!")


if __name__ == "__main__":
    main()
