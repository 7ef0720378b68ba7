import sys

import pytest

from wiremodels.logging_config import setup_logging


def _configure_logging():
    # sys.__stdout__ stays open for the whole session, unlike the streams capsys swaps in
    setup_logging(stream=sys.__stdout__)


@pytest.fixture(scope="session", autouse=True)
def setup_app_logging():
    """
    Configure the package logging once for the whole test session.
    """
    _configure_logging()


@pytest.fixture
def restore_logging():
    """
    For tests that run the CLI, which reconfigures logging onto whatever
    sys.stdout is at the time.
    """
    yield
    _configure_logging()
