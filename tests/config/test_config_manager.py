import logging
import os
import unittest
from unittest.mock import patch

from tests.config.test_property_provider import TestPropertyProvider
from tests.utils import config_logs
from sysload.config.config_manager import ConfigManager
from sysload.config.constants import TIME_SLOTS_KEY, UNIX, STANDARD, SAMPLE_INTERVAL_MS_KEY, \
    DEFAULT_SAMPLE_INTERVAL_MS, REPORT_INTERVAL_SEC_KEY
from sysload.config.env_property_provider import EnvPropertyProvider

config_logs(logging.DEBUG)


class TestConfigManager(unittest.TestCase):

    def test_construction_without_properties(self):
        property_provider = TestPropertyProvider({})
        config_manager = ConfigManager(property_provider)
        self.assertEqual(None, config_manager.get_str("foo"))
        self.assertEqual(None, config_manager.get_str(TIME_SLOTS_KEY))
        self.assertEqual(STANDARD, config_manager.get_str(TIME_SLOTS_KEY, STANDARD))

    def test_none_to_something_update(self):
        property_provider = TestPropertyProvider({})
        config_manager = ConfigManager(property_provider)

        self.assertEqual(None, config_manager.get_str(TIME_SLOTS_KEY))
        property_provider.map[TIME_SLOTS_KEY] = UNIX
        self.assertEqual(UNIX, config_manager.get_str(TIME_SLOTS_KEY))

    def test_numeric_properties(self):
        property_provider = TestPropertyProvider(
            {
                SAMPLE_INTERVAL_MS_KEY: "250",
                REPORT_INTERVAL_SEC_KEY: "2.5"
            })
        config_manager = ConfigManager(property_provider)

        self.assertEqual(250, config_manager.get_int(SAMPLE_INTERVAL_MS_KEY, DEFAULT_SAMPLE_INTERVAL_MS))
        self.assertEqual(2.5, config_manager.get_float(REPORT_INTERVAL_SEC_KEY))

    def test_numeric_defaults(self):
        config_manager = ConfigManager(TestPropertyProvider({}))
        self.assertEqual(DEFAULT_SAMPLE_INTERVAL_MS,
                         config_manager.get_int(SAMPLE_INTERVAL_MS_KEY, DEFAULT_SAMPLE_INTERVAL_MS))

    def test_env_property_provider(self):
        with patch.dict(os.environ, {TIME_SLOTS_KEY: UNIX}):
            config_manager = ConfigManager(EnvPropertyProvider())
            self.assertEqual(UNIX, config_manager.get_str(TIME_SLOTS_KEY))

        with patch.dict(os.environ, {}, clear=True):
            config_manager = ConfigManager(EnvPropertyProvider())
            self.assertEqual(None, config_manager.get_str(TIME_SLOTS_KEY))
