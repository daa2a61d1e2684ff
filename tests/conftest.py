import pytest

from asyncstreams.config import LoggingConfig, StreamConfig


@pytest.fixture(autouse=True)
def reset_config():
    StreamConfig.reset()
    LoggingConfig.reset()
    yield
    StreamConfig.reset()
    LoggingConfig.reset()
