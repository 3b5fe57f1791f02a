import pytest

from moonphase import logger


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output readable; tests that check logging re-enable it"""
    logger.set_silent_mode(True)
    yield
    logger.set_silent_mode(True)
    logger.set_debug_mode(False)
