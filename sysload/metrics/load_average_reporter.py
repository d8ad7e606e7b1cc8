from sysload import log
from sysload.load.exceptions import InvalidStateException
from sysload.load.load_averager import LoadAverager
from sysload.metrics.constants import LOAD_AVERAGE_KEY, RUNNING, SLOT_TAG, SAMPLE_COUNT_KEY
from sysload.metrics.metrics_reporter import MetricsReporter


class LoadAverageReporter(MetricsReporter):

    def __init__(self, load_averager: LoadAverager):
        self.__load_averager = load_averager
        self.__reg = None

    def set_registry(self, registry, tags):
        self.__reg = registry

    def report_metrics(self, tags):
        log.debug("Reporting metrics")
        try:
            averages = self.__load_averager.average()
            self.__reg.gauge(RUNNING, tags).set(1)
            self.__reg.gauge(SAMPLE_COUNT_KEY, tags).set(self.__load_averager.get_sample_count())

            for slot, load in averages.items():
                slot_tags = dict(tags)
                slot_tags[SLOT_TAG] = slot
                self.__reg.gauge(LOAD_AVERAGE_KEY, slot_tags).set(load)

            log.info("Load averages: {}".format(averages))
        except InvalidStateException:
            self.__reg.gauge(RUNNING, tags).set(0)
            log.debug("Load averager is not running, skipping load averages")
        except Exception:
            log.exception("Failed to report metrics.")
