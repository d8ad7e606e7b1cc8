import time
from threading import Lock

from sysload import log
from sysload.cpu.cpu_time_source import CpuTimeSource
from sysload.cpu.cpu_times import CpuTimes
from sysload.utils import config_logs

DEFAULT_TIMEOUT_SECONDS = 3
DEFAULT_TOTAL_STEP = 1000
DEFAULT_IDLE_STEP = 500


def wait_until(func, timeout=DEFAULT_TIMEOUT_SECONDS, period=0.01):
    deadline = time.time() + timeout
    while time.time() < deadline:
        if func():
            return
        time.sleep(period)

    raise TimeoutError(
        "Function did not succeed within timeout: '{}'.".format(timeout))


class ScriptedCpuTimeSource(CpuTimeSource):

    def __init__(self, cpu_times):
        self.__cpu_times = list(cpu_times)
        self.call_count = 0

    def get_cpu_times(self) -> CpuTimes:
        index = min(self.call_count, len(self.__cpu_times) - 1)
        self.call_count += 1
        return self.__cpu_times[index]


class SteppingCpuTimeSource(CpuTimeSource):
    """
    Advances the counters by a fixed step on every read, so every measurement sees the same load.
    """

    def __init__(self, total_step=DEFAULT_TOTAL_STEP, idle_step=DEFAULT_IDLE_STEP):
        self.__lock = Lock()
        self.__total_step = total_step
        self.__idle_step = idle_step
        self.__total = 0
        self.__idle = 0

    def get_cpu_times(self) -> CpuTimes:
        with self.__lock:
            self.__total += self.__total_step
            self.__idle += self.__idle_step
            log.debug("Stepped CPU times to total: '{}', idle: '{}'".format(self.__total, self.__idle))
            return CpuTimes(total=self.__total, idle=self.__idle)


class FailingCpuTimeSource(CpuTimeSource):

    def get_cpu_times(self) -> CpuTimes:
        raise OSError("Fake CPU time source failing for tests.")


class FlakyCpuTimeSource(SteppingCpuTimeSource):

    def __init__(self, failure_count, total_step=DEFAULT_TOTAL_STEP, idle_step=DEFAULT_IDLE_STEP):
        super().__init__(total_step, idle_step)
        self.__failures_left = failure_count

    def get_cpu_times(self) -> CpuTimes:
        if self.__failures_left > 0:
            self.__failures_left -= 1
            raise OSError("Fake CPU time source failing for tests.")

        return super().get_cpu_times()
