"""
Unit Tests for Utility Modules

Tests for the logger and exception hierarchy.
"""

import json
import logging
import sys

import pytest

from confprovider.utils.exceptions import (
    ConfigurationProviderError,
    ConfigurationSettingError,
    SettingKeyFormatError,
    StoreNotLoadedError,
)
from confprovider.utils.logger import JSONFormatter, TextFormatter, get_logger, setup_logging


pytestmark = pytest.mark.usefixtures('restore_root_logger')


class TestLogger:
    """Test logging setup and formatting."""

    def test_json_formatter_includes_extra(self):
        record = logging.LogRecord('confprovider.stores', logging.INFO, __file__, 10,
                                   "Loaded %d settings", (5,), None)
        record.store = 'DatabaseSettingsStore'
        record.settings = 5

        payload = json.loads(JSONFormatter().format(record))

        assert payload['message'] == "Loaded 5 settings"
        assert payload['level'] == 'INFO'
        assert payload['logger'] == 'confprovider.stores'
        assert payload['store'] == 'DatabaseSettingsStore'
        assert payload['settings'] == 5
        assert payload['timestamp'].endswith('Z')
        assert 'args' not in payload

    def test_json_formatter_exception(self):
        try:
            raise ConfigurationSettingError("bad value")
        except ConfigurationSettingError:
            record = logging.LogRecord('x', logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

        payload = json.loads(JSONFormatter().format(record))
        assert 'ConfigurationSettingError: bad value' in payload['exception']

    def test_text_formatter_appends_context(self):
        record = logging.LogRecord('confprovider.providers', logging.DEBUG, __file__, 10,
                                   "NotifyOnUpload not configured, using default", (), None)
        record.setting = 'NotifyOnUpload'
        record.default = True

        line = TextFormatter().format(record)

        assert line.endswith("NotifyOnUpload not configured, using default [setting=NotifyOnUpload default=True]")
        assert '[   DEBUG] confprovider.providers' in line

    def test_text_formatter_without_context(self):
        record = logging.LogRecord('x', logging.INFO, __file__, 1, "plain", (), None)
        assert TextFormatter().format(record).endswith("x - plain")

    def test_setup_logging_file_handler(self, tmp_path):
        log_file = tmp_path / 'logs' / 'provider.log'
        setup_logging(level='debug', log_file=str(log_file), format_type='json', console=False)

        get_logger('confprovider.test').info("hello", extra={'setting': 'NotifyOnUpload'})
        for handler in logging.getLogger().handlers:
            handler.flush()

        lines = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert lines[-1]['message'] == 'hello'
        assert lines[-1]['setting'] == 'NotifyOnUpload'

    def test_setup_logging_text_console(self):
        setup_logging(level='WARNING', format_type='text', console=True)

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, TextFormatter)


class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self):
        for exc_type in (ConfigurationSettingError, SettingKeyFormatError, StoreNotLoadedError):
            assert issubclass(exc_type, ConfigurationProviderError)

    def test_key_format_error(self):
        error = SettingKeyFormatError('BadKey')

        assert isinstance(error, ValueError)
        assert error.key == 'BadKey'
        assert "section:key" in str(error)
        assert "'BadKey'" in str(error)


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
