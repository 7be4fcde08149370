"""Immutable runtime configuration for the bootstrap run."""

import os
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional, Tuple

from kicad_bootstrap import __version__


# ----------------------------------------------------------------
# Configuration & Constants
# ----------------------------------------------------------------
APP_NAME: str = "KiCad Bootstrap"
APP_SUBTITLE: str = "CAD Suite Installer"

# KiCad PPA and the string that identifies it inside apt source files
KICAD_PPA: str = "ppa:kicad/kicad-9.0-releases"
KICAD_PPA_MARKER: str = "kicad/kicad-9.0-releases"

CAD_PACKAGES: Tuple[str, ...] = ("kicad",)

APT_SOURCES: Tuple[str, ...] = ("/etc/apt/sources.list", "/etc/apt/sources.list.d")

PROBE_URL: str = "https://www.baidu.com"
PROBE_TIMEOUT: float = 5.0

MAX_RETRIES: int = 3
RETRY_DELAY: float = 5.0  # seconds


def default_log_file(script_name: Optional[str] = None) -> str:
    """Return the log path derived from the invoked script's name."""
    name = script_name or Path(sys.argv[0]).name
    # python -m kicad_bootstrap runs as __main__.py
    if not name or name == "__main__.py":
        name = "kicad-bootstrap"
    return os.path.join(tempfile.gettempdir(), f"{name}.log")


@dataclass(frozen=True)
class AppConfig:
    """
    Settings shared by the logger, the preflight checks and the installer.

    Built once at process start via ``from_env`` and passed explicitly to
    every component that needs it.
    """

    app_name: str = APP_NAME
    app_subtitle: str = APP_SUBTITLE
    version: str = __version__
    log_file: str = field(default_factory=default_log_file)
    debug: bool = False
    packages: Tuple[str, ...] = CAD_PACKAGES
    ppa: str = KICAD_PPA
    ppa_marker: str = KICAD_PPA_MARKER
    sources_paths: Tuple[str, ...] = APT_SOURCES
    probe_url: str = PROBE_URL
    probe_timeout: float = PROBE_TIMEOUT
    max_retries: int = MAX_RETRIES
    retry_delay: float = RETRY_DELAY

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        script_name: Optional[str] = None,
    ) -> "AppConfig":
        """
        Build the configuration from the process environment.

        Args:
            environ: Mapping to read from (defaults to os.environ)
            script_name: Name used for the log file (defaults to argv[0])

        Returns:
            A frozen AppConfig instance
        """
        env = os.environ if environ is None else environ
        return cls(
            log_file=default_log_file(script_name),
            debug=debug_enabled(env.get("DEBUG")),
        )


def debug_enabled(value: Optional[str]) -> bool:
    # Only the exact value "1" turns it on
    return value is not None and value.strip() == "1"
