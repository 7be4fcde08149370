"""Console styling and logging setup."""

import logging
from typing import Iterable

import pyfiglet
from rich.box import ROUNDED
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text

from kicad_bootstrap.config import AppConfig

LOGGER_NAME = "kicad_bootstrap"

logger = logging.getLogger(LOGGER_NAME)


# ----------------------------------------------------------------
# Nord-Themed Colors
# ----------------------------------------------------------------
class NordColors:
    SNOW_STORM_1: str = "#D8DEE9"
    SNOW_STORM_2: str = "#E5E9F0"
    FROST_1: str = "#8FBCBB"
    FROST_2: str = "#88C0D0"
    FROST_3: str = "#81A1C1"
    FROST_4: str = "#5E81AC"
    RED: str = "#BF616A"
    GREEN: str = "#A3BE8C"


console: Console = Console(highlight=False)


# ----------------------------------------------------------------
# Logging Setup
# ----------------------------------------------------------------
def setup_logging(config: AppConfig) -> logging.Logger:
    """
    Configure logging with a Rich console handler and a file handler.

    The log file is truncated on every call so each run starts clean.

    Args:
        config: Runtime configuration holding the log path and debug flag

    Returns:
        The package logger
    """
    level = logging.DEBUG if config.debug else logging.INFO

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(config.log_file, mode="w", encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)s | %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
        )
    )

    logger.addHandler(RichHandler(console=console, show_path=False, markup=False))
    logger.addHandler(file_handler)
    logger.setLevel(level)

    logger.debug("Logging initialized: %s (debug=%s)", config.log_file, config.debug)
    return logger


# ----------------------------------------------------------------
# Console Helpers
# ----------------------------------------------------------------
def create_header(config: AppConfig) -> Panel:
    """Build the Pyfiglet banner shown at startup."""
    try:
        ascii_art = pyfiglet.figlet_format(config.app_name, font="slant")
    except Exception:
        ascii_art = config.app_name

    lines = [line for line in ascii_art.split("\n") if line.strip()]
    colors = [NordColors.FROST_1, NordColors.FROST_2, NordColors.FROST_3, NordColors.FROST_4]
    styled = Text()
    for i, line in enumerate(lines):
        styled.append(line + "\n", style=f"bold {colors[i % len(colors)]}")

    return Panel(
        styled,
        border_style=Style(color=NordColors.FROST_1),
        padding=(1, 2),
        box=ROUNDED,
        title=f"[bold {NordColors.SNOW_STORM_2}]v{config.version}[/]",
        title_align="right",
        subtitle=f"[bold {NordColors.SNOW_STORM_1}]{config.app_subtitle}[/]",
        subtitle_align="center",
    )


def print_section(title: str) -> None:
    """Print a section header."""
    console.print()
    console.print(f"[bold {NordColors.FROST_2}]{title}[/]")
    console.print(f"[{NordColors.FROST_3}]{'─' * 60}[/]")
    logger.debug("--- %s ---", title)


def print_success(text: str) -> None:
    logger.info("✓ %s", text)


def print_error(text: str) -> None:
    logger.error("✗ %s", text)


def print_summary(succeeded: Iterable[str], failed: Iterable[str]) -> None:
    """
    Display a table with the final status of every package.

    Args:
        succeeded: Packages that were installed
        failed: Packages that exhausted their retries
    """
    table = Table(
        show_header=True,
        header_style=f"bold {NordColors.FROST_1}",
        border_style=NordColors.FROST_3,
        box=ROUNDED,
        title=f"[bold {NordColors.FROST_2}]Installation Summary[/]",
        title_justify="center",
    )
    table.add_column("Package", style=f"bold {NordColors.FROST_2}")
    table.add_column("Status", justify="center")

    for package in succeeded:
        table.add_row(package, f"[{NordColors.GREEN}]✓ INSTALLED[/]")
    for package in failed:
        table.add_row(package, f"[{NordColors.RED}]✗ FAILED[/]")

    console.print(table)
