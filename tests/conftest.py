import logging

import pytest

from py_quantify import PreferredUnits
from py_quantify.logger import logger

logger.setLevel(logging.DEBUG)


@pytest.fixture(autouse=True)
def default_preferred_units():
    """Every test starts and ends with the default preferred units."""
    PreferredUnits.restore_defaults()
    yield
    PreferredUnits.restore_defaults()
