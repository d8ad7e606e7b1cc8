import time
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock

from sysload import log
from sysload.config.constants import DEFAULT_MEASURE_DURATION_MS
from sysload.cpu.cpu_time_source import CpuTimeSource
from sysload.load.utils import get_load

measure_executor_lock = Lock()
__measure_executor = None


def get_measure_executor() -> ThreadPoolExecutor:
    global __measure_executor

    with measure_executor_lock:
        if __measure_executor is None:
            __measure_executor = ThreadPoolExecutor(thread_name_prefix="sysload-measure")

        return __measure_executor


class Sampler:

    def __init__(self, cpu_time_source: CpuTimeSource):
        self.__cpu_time_source = cpu_time_source

    def measure(self, duration_ms=DEFAULT_MEASURE_DURATION_MS) -> float:
        """
        Measures the system load over the given duration.  The calling thread sleeps while the duration elapses.

        :param duration_ms: the measurement window in milliseconds
        :return: the CPU utilization percentage over the window, truncated to one decimal
        """
        if duration_ms < 0:
            raise ValueError("A measurement duration must be non-negative, got: '{}'".format(duration_ms))

        start = self.__cpu_time_source.get_cpu_times()
        time.sleep(duration_ms / 1000)
        end = self.__cpu_time_source.get_cpu_times()

        load = get_load(start, end)
        log.debug("Measured load: '{}' over {} ms, from: {} to: {}".format(load, duration_ms, start, end))
        return load

    def measure_async(self, duration_ms=DEFAULT_MEASURE_DURATION_MS) -> Future:
        return get_measure_executor().submit(self.measure, duration_ms)
