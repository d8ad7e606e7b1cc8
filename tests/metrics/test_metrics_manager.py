import logging
import os
import unittest
from unittest.mock import MagicMock, patch

from spectator import Registry

from tests.utils import config_logs
from sysload.config.constants import EC2_INSTANCE_ID
from sysload.metrics.constants import NODE_TAG
from sysload.metrics.metrics_manager import MetricsManager

config_logs(logging.DEBUG)


class TestMetricsManager(unittest.TestCase):

    def test_reporters_receive_registry_and_tags(self):
        registry = Registry()
        reporter = MagicMock()

        with patch.dict(os.environ, {EC2_INSTANCE_ID: "i-1234"}):
            manager = MetricsManager([reporter], reg=registry, report_interval=60)
            manager.report_metrics()
            manager.cancel()

        reporter.set_registry.assert_called_once_with(registry, {NODE_TAG: "i-1234"})
        reporter.report_metrics.assert_called_once_with({NODE_TAG: "i-1234"})

    def test_tags_without_instance_id(self):
        with patch.dict(os.environ, {}, clear=True):
            self.assertEqual({}, MetricsManager.get_tags())

    def test_reporter_failure_is_not_raised(self):
        reporter = MagicMock()
        reporter.report_metrics = MagicMock(side_effect=RuntimeError("report failed"))

        manager = MetricsManager([reporter], reg=Registry(), report_interval=60)
        manager.report_metrics()
        manager.cancel()
