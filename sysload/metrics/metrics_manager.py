import os
from typing import List

import schedule
from spectator import GlobalRegistry

from sysload import log
from sysload.config.constants import EC2_INSTANCE_ID, DEFAULT_REPORT_INTERVAL_SEC
from sysload.metrics.constants import NODE_TAG
from sysload.metrics.metrics_reporter import MetricsReporter

registry = GlobalRegistry


class MetricsManager:

    def __init__(self, reporters: List[MetricsReporter], reg=registry, report_interval=DEFAULT_REPORT_INTERVAL_SEC):
        self.__reporters = reporters
        self.__reg = reg

        for reporter in self.__reporters:
            reporter.set_registry(self.__reg, self.get_tags())

        log.info("Scheduling metrics reporting every {} seconds".format(report_interval))
        self.__job = schedule.every(report_interval).seconds.do(self.report_metrics)

    def report_metrics(self):
        try:
            tags = self.get_tags()

            for reporter in self.__reporters:
                reporter.report_metrics(tags)
        except Exception:
            log.exception("Failed to report metrics.")

    def cancel(self):
        schedule.cancel_job(self.__job)

    @staticmethod
    def get_tags():
        tags = {}
        if EC2_INSTANCE_ID in os.environ:
            tags[NODE_TAG] = os.environ[EC2_INSTANCE_ID]

        return tags
