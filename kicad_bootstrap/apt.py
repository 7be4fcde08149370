"""Thin wrapper around apt and add-apt-repository."""

import glob
import logging
import os
import shutil
import subprocess
from typing import Callable, Iterable, List, Optional

logger = logging.getLogger(__name__)


# ----------------------------------------------------------------
# Command Execution Helpers
# ----------------------------------------------------------------
def run_command(cmd: List[str]) -> bool:
    """
    Run a command with its output going straight to the terminal.

    Args:
        cmd: Command and arguments

    Returns:
        True if the command exited with status 0, False otherwise
        (including when it could not be started)
    """
    logger.debug("Executing: %s", " ".join(cmd))
    try:
        result = subprocess.run(cmd, check=False)
    except OSError as e:
        logger.error("Could not execute %s: %s", cmd[0], e)
        return False
    logger.debug("Exit status %d: %s", result.returncode, " ".join(cmd))
    return result.returncode == 0


def sources_files(paths: Iterable[str]) -> List[str]:
    """Expand apt source locations into the list of files they hold."""
    files: List[str] = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(sorted(glob.glob(os.path.join(path, "*"))))
        else:
            files.append(path)
    return files


class PackageManager:
    """apt operations used by the bootstrap, run through sudo."""

    def __init__(
        self,
        runner: Callable[[List[str]], bool] = run_command,
        sudo: bool = True,
        which: Callable[[str], Optional[str]] = shutil.which,
    ) -> None:
        self._run = runner
        self._prefix = ["sudo"] if sudo else []
        self._which = which

    def is_available(self) -> bool:
        return self._which("apt") is not None

    def has_repository(self, marker: str, paths: Iterable[str]) -> bool:
        """
        Check whether any apt source file already mentions the repository.

        Unreadable or missing files are skipped.
        """
        for path in sources_files(paths):
            try:
                with open(path, "r", encoding="utf-8", errors="replace") as f:
                    if marker in f.read():
                        logger.debug("Found %s in %s", marker, path)
                        return True
            except OSError as e:
                logger.debug("Skipping unreadable source %s: %s", path, e)
        return False

    def add_repository(self, ppa: str) -> bool:
        return self._run(self._prefix + ["add-apt-repository", "-y", ppa])

    def update(self) -> bool:
        return self._run(self._prefix + ["apt", "update"])

    def install(self, package: str) -> bool:
        return self._run(self._prefix + ["apt", "install", "-y", package])
