import logging

import pytest

from album_m3u.log_utils import LOGGER_NAME


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
    logger.setLevel(logging.NOTSET)
