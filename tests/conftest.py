import logging

import numpy as np
import pytest

from src.digitview import DigitViewConfig


def pytest_addoption(parser):
    parser.addoption(
        "--digit-log",
        action="store",
        type=int,
        default=0,
        help="Enable digit view logging at the given verbosity during tests",
    )


def pytest_configure(config):
    verbosity = config.getoption("--digit-log")
    if verbosity:
        DigitViewConfig.configure(enabled=True, verbosity=verbosity)


@pytest.fixture(autouse=True)
def _restore_config():
    saved = (DigitViewConfig.logging_enabled, DigitViewConfig.verbosity, DigitViewConfig.default_radix)
    root_level = logging.getLogger().level
    yield
    DigitViewConfig.logging_enabled, DigitViewConfig.verbosity, DigitViewConfig.default_radix = saved
    logging.getLogger().setLevel(root_level)


@pytest.fixture(params=[np.int16, np.int32, np.int64])
def signed_dtype(request):
    """Signed widths wide enough for five decimal digits."""
    return request.param


@pytest.fixture(params=[np.uint32, np.uint64])
def unsigned_dtype(request):
    return request.param
