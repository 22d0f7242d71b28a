import logging

import pytest

from minpath.config import reset_config


@pytest.fixture(autouse=True)
def fresh_state():
    """Drop cached config and installed log handlers between tests."""
    reset_config()
    yield
    reset_config()

    logger = logging.getLogger("minpath")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
