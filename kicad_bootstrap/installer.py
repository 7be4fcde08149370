"""Sequential package installation with a bounded retry loop."""

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Tuple

from kicad_bootstrap.retry import retry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallReport:
    """
    Aggregate result of an installation run.

    Attributes:
        succeeded: Packages installed, in input order
        failed: Packages that exhausted their retries, in input order
    """

    succeeded: Tuple[str, ...] = ()
    failed: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failed


class RetryingInstaller:
    """
    Installs packages one at a time, retrying each on failure.

    A package that keeps failing is recorded and the next package is still
    attempted; only the final report tells the caller whether to abort.
    """

    def __init__(
        self,
        install: Callable[[str], bool],
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        self._install = install
        self._sleep = sleep

    def install_package(self, package: str, max_retries: int, retry_delay: float) -> bool:
        """
        Install a single package, retrying up to max_retries times.

        Args:
            package: Name passed to the package manager
            max_retries: Maximum number of install attempts
            retry_delay: Seconds to wait between attempts

        Returns:
            True if one of the attempts succeeded
        """

        def report_failure(attempt: int, total: int) -> None:
            logger.warning("Failed to install %s (attempt %d/%d)", package, attempt, total)
            if attempt < total:
                logger.info("Retrying in %g seconds...", retry_delay)

        result = retry(
            lambda: self._install(package),
            max_retries,
            retry_delay,
            sleep=self._sleep,
            on_failure=report_failure,
        )
        if not result.ok:
            logger.error("Failed to install %s after %d attempts", package, max_retries)
        return result.ok

    def install_all(
        self, packages: Iterable[str], max_retries: int, retry_delay: float
    ) -> InstallReport:
        if max_retries < 1:
            raise ValueError(f"max_retries must be at least 1, got {max_retries}")

        succeeded = []
        failed = []
        # Duplicates are installed once
        for package in dict.fromkeys(packages):
            logger.info("Installing %s...", package)
            if self.install_package(package, max_retries, retry_delay):
                succeeded.append(package)
            else:
                failed.append(package)

        return InstallReport(succeeded=tuple(succeeded), failed=tuple(failed))
