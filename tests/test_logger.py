import logging

import pytest

from py_quantities import basicConfig, Distance
from py_quantities.logger import logger, set_log_level, DEFAULT_LOG_LEVEL


def test_logger_name():
    assert logger.name == 'py_quantities'


class TestSetLogLevel:

    @pytest.mark.parametrize(
        "level, expected",
        [
            ("debug", logging.DEBUG),
            (" Warning ", logging.WARNING),
            ("ERROR", logging.ERROR),
            (logging.CRITICAL, logging.CRITICAL),
            (DEFAULT_LOG_LEVEL, logging.INFO),
        ]
    )
    def test_known_levels(self, level, expected):
        assert set_log_level(level) == expected
        assert logger.level == expected

    @pytest.mark.parametrize("level, error", [("loud", ValueError), (15, ValueError),
                                              (True, TypeError), (2.5, TypeError), (None, TypeError)])
    def test_invalid_levels(self, level, error):
        set_log_level(logging.DEBUG)
        with pytest.raises(error):
            set_log_level(level)
        assert logger.level == logging.DEBUG

    def test_level_filters_records(self, caplog):
        set_log_level("error")
        with caplog.at_level(logging.DEBUG):
            logger.warning("converted 5 km")
        assert caplog.records == []


class TestLogLevelConfig:

    def test_log_level_from_file(self, tmp_path):
        config = tmp_path / "quiet.toml"
        config.write_text('[py_quantities]\nlog_level = "error"\n', encoding="utf-8")
        basicConfig(str(config))
        assert logger.level == logging.ERROR

    def test_bad_log_level_warns(self, tmp_path, caplog):
        set_log_level(logging.DEBUG)
        config = tmp_path / "bad.toml"
        config.write_text('[py_quantities]\nlog_level = "shouty"\n', encoding="utf-8")
        with caplog.at_level('WARNING', logger='py_quantities'):
            basicConfig(str(config))
        assert "log_level` ignored" in caplog.text
        assert "sets none of" not in caplog.text


def test_overflow_goes_through_library_logger(caplog):
    with caplog.at_level('WARNING', logger='py_quantities'):
        Distance.LightYear(1e300).converted_value(Distance.Millimeter)
    assert [record.name for record in caplog.records] == ['py_quantities']
