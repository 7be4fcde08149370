"""Ordered bootstrap workflow: checks, repository, index refresh, install."""

import logging
import time
from typing import Any, Callable, Optional

from kicad_bootstrap.apt import PackageManager
from kicad_bootstrap.config import AppConfig
from kicad_bootstrap.errors import RepositoryError, UpdateError
from kicad_bootstrap.installer import InstallReport, RetryingInstaller
from kicad_bootstrap.log import print_section
from kicad_bootstrap.preflight import PreflightChecker

logger = logging.getLogger(__name__)


def prepare_repository(config: AppConfig, package_manager: PackageManager) -> bool:
    """
    Register the KiCad PPA unless apt already knows about it.

    Returns:
        True if the repository was added during this run

    Raises:
        RepositoryError: If add-apt-repository fails
    """
    logger.info("Checking KiCad PPA repository...")
    if package_manager.has_repository(config.ppa_marker, config.sources_paths):
        logger.info("KiCad PPA repository already exists, skipping...")
        return False

    logger.info("Adding KiCad PPA repository...")
    if not package_manager.add_repository(config.ppa):
        raise RepositoryError("Failed to add KiCad PPA repository")
    return True


def update_packages(package_manager: PackageManager) -> None:
    logger.info("Updating package lists...")
    if not package_manager.update():
        raise UpdateError("Failed to update package lists")


def install_packages(
    config: AppConfig,
    package_manager: PackageManager,
    sleep: Callable[[float], Any] = time.sleep,
) -> InstallReport:
    logger.info("Installing Ubuntu/Debian dependencies...")
    installer = RetryingInstaller(package_manager.install, sleep=sleep)
    report = installer.install_all(config.packages, config.max_retries, config.retry_delay)
    if report.failed:
        logger.error("Failed to install packages: %s", " ".join(report.failed))
    else:
        logger.info("Ubuntu/Debian dependencies installed successfully")
    return report


def run_bootstrap(
    config: AppConfig,
    package_manager: Optional[PackageManager] = None,
    checker: Optional[PreflightChecker] = None,
    sleep: Callable[[float], Any] = time.sleep,
) -> InstallReport:
    """
    Run the whole bootstrap sequence.

    Any fatal step raises a BootstrapError subclass before later steps run.
    Per-package failures do not raise; they are returned in the report.

    Args:
        config: Runtime configuration
        package_manager: apt wrapper (a sudo-backed one by default)
        checker: Preflight checker (the real system by default)
        sleep: Sleep function used between install retries

    Returns:
        The InstallReport for the configured packages
    """
    package_manager = package_manager or PackageManager()
    checker = checker or PreflightChecker()

    print_section("System Checks")
    checker.run_all(package_manager, config.probe_url, config.probe_timeout)

    print_section("Package Sources")
    prepare_repository(config, package_manager)
    update_packages(package_manager)

    print_section("Installing Packages")
    return install_packages(config, package_manager, sleep=sleep)
