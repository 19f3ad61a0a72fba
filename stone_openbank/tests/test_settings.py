"""
Implements tests for settings helpers.
"""
# built-in
from unittest import TestCase
from unittest.mock import patch

# local
from stone_openbank import settings
from stone_openbank.common.enums import EnvironmentEnum


class TestGetBaseUrl(TestCase):
    def test_each_environment(self):
        with patch.object(settings, 'BASE_URL', ''):
            for environment in EnvironmentEnum:
                with self.subTest(environment=environment.environment_name):
                    self.assertEqual(
                        environment.base_url,
                        settings.get_base_url(environment.environment_name),
                    )

    def test_unknown_environment(self):
        with patch.object(settings, 'BASE_URL', ''):
            with self.assertRaises(KeyError):
                settings.get_base_url('HOMOLOG')


class TestConfigureLogging(TestCase):
    @patch('stone_openbank.settings.logging.config.dictConfig')
    def test_applies_logging_dict(self, mock_dict_config):
        settings.configure_logging()

        mock_dict_config.assert_called_once_with(settings.LOGGING)

    def test_package_logger_writes_to_console(self):
        logger_config = settings.LOGGING['loggers']['stone_openbank']

        self.assertIn('console', logger_config['handlers'])
        self.assertEqual(settings.LOG_LEVEL, logger_config['level'])
