import logging
import sys
from pathlib import Path

import pytest
import structlog

# Ensure src/ is on sys.path for local test runs without installation
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast unit tests")
    config.addinivalue_line("markers", "slow: slow-running tests")


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Undo any structlog configuration a test applied."""
    yield
    structlog.reset_defaults()


@pytest.fixture(autouse=True)
def _restore_package_logger():
    """Restore the cachehash stdlib logger after configure_logging ran."""
    package_logger = logging.getLogger("cachehash")
    handlers, level, propagate = (
        package_logger.handlers[:],
        package_logger.level,
        package_logger.propagate,
    )
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
