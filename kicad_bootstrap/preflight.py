"""Environment checks run before anything is installed."""

import logging
import os
import subprocess
from typing import Callable

import requests

from kicad_bootstrap.apt import PackageManager
from kicad_bootstrap.errors import DependencyError, NetworkError, PrivilegeError

logger = logging.getLogger(__name__)


class PreflightChecker:
    """Preflight checks to ensure the system is ready for installation."""

    def __init__(self, geteuid: Callable[[], int] = os.geteuid) -> None:
        self._geteuid = geteuid

    def check_root(self) -> None:
        """
        Ensure the script is NOT running as root.

        Package operations go through sudo, so a plain user account is required.

        Raises:
            PrivilegeError: If running as root
        """
        if self._geteuid() == 0:
            raise PrivilegeError(
                "This script should not be run as root. Please run as a regular user."
            )
        logger.debug("Running as a regular user.")

    def check_apt(self, package_manager: PackageManager) -> None:
        if not package_manager.is_available():
            raise DependencyError(
                "This script requires apt package manager (Debian/Ubuntu-based system)"
            )

    def check_sudo(self) -> bool:
        """
        Check whether sudo can run without a password prompt.

        Returns:
            True if cached sudo credentials are available
        """
        try:
            result = subprocess.run(
                ["sudo", "-n", "true"],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
            ok = result.returncode == 0
        except OSError as e:
            logger.debug("sudo probe failed: %s", e)
            ok = False

        if not ok:
            logger.warning(
                "This script requires sudo access. You may be prompted for your password."
            )
        return ok

    def check_network(self, url: str, timeout: float) -> None:
        """
        Probe an external host over HTTP.

        Args:
            url: Address to request
            timeout: Connection timeout in seconds

        Raises:
            NetworkError: If the host cannot be reached
        """
        logger.debug("Checking network connectivity via %s", url)
        try:
            requests.get(url, timeout=timeout)
        except requests.RequestException as e:
            logger.debug("Connectivity probe failed: %s", e)
            raise NetworkError("Internet connection required for package installation") from e

    def run_all(self, package_manager: PackageManager, url: str, timeout: float) -> None:
        """Run every system check in order; the first fatal one raises."""
        logger.info("Checking system requirements...")
        self.check_root()
        self.check_apt(package_manager)
        self.check_sudo()
        self.check_network(url, timeout)
        logger.info("System requirements check passed")
