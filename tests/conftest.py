from __future__ import annotations

import pytest

from kicad_bootstrap.log import logger as package_logger
from tests.fakes import FakePackageManager


@pytest.fixture
def fake_pm() -> FakePackageManager:
    return FakePackageManager()


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(0)
