import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop sinks bound to the captured streams of the finished test."""
    yield
    logger.remove()
