import logging

import numpy as np
import pytest

from src.digitview import DigitView, DigitViewConfig


def test_configure_logs_construction_and_writes(caplog):
    caplog.set_level(logging.DEBUG)
    DigitViewConfig.configure(enabled=True, verbosity=2)
    v = np.array(12345)
    view = DigitView(v)
    view[0] = 9
    assert "[DigitView.__init__] value=12345" in caplog.text
    assert "[DigitRef.set] weight=10000, digit=9, 12345 -> 92345" in caplog.text


def test_verbosity_one_skips_write_logging(caplog):
    caplog.set_level(logging.DEBUG)
    DigitViewConfig.configure(enabled=True, verbosity=1)
    view = DigitView(np.array(7))
    view[0] = 1
    assert "[DigitView.__init__]" in caplog.text
    assert "[DigitRef.set]" not in caplog.text


def test_logging_disabled(caplog):
    DigitViewConfig.configure(enabled=False)
    caplog.set_level(logging.DEBUG)
    DigitView(np.array(7))[0] = 1
    assert "[DigitView" not in caplog.text


def test_logging_does_not_change_results():
    DigitViewConfig.configure(enabled=True, verbosity=2)
    v = np.array(54321)
    DigitView(v).sort()
    assert v == 12345


def test_bad_default_radix_rejected():
    with pytest.raises(ValueError):
        DigitViewConfig.configure(default_radix=1)
    assert DigitViewConfig.default_radix == 10


def test_root_logger_level_restored_between_tests(request):
    # runs after the configure(enabled=True) tests above
    if request.config.getoption("--digit-log"):
        pytest.skip("--digit-log keeps debug logging on for the session")
    assert logging.getLogger().level != logging.DEBUG
