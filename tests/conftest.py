import logging

import pytest

from py_quantities import PreferredUnits, Settings
from py_quantities.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def restore_defaults():
    yield
    PreferredUnits.restore_defaults()
    Settings.restore_defaults()
    logger.setLevel(logging.DEBUG)
