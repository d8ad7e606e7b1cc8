import math
import numbers
from concurrent.futures import Future
from threading import Event, Lock, Thread
from typing import Dict

from sysload import log
from sysload.config.constants import DEFAULT_SAMPLE_INTERVAL_MS, DEFAULT_MEASURE_DURATION_MS, STANDARD
from sysload.cpu.cpu_time_source import CpuTimeSource
from sysload.cpu.psutil_cpu_time_source import PsutilCpuTimeSource
from sysload.load.exceptions import InvalidArgumentException, InvalidStateException
from sysload.load.sampler import Sampler
from sysload.load.slot_history import SlotHistory
from sysload.load.time_slots import get_time_slots
from sysload.load.utils import get_capacity


class LoadAverager:

    def __init__(
            self,
            config=STANDARD,
            cpu_time_source: CpuTimeSource = None,
            sample_interval_ms=DEFAULT_SAMPLE_INTERVAL_MS):

        if isinstance(sample_interval_ms, bool) or not isinstance(sample_interval_ms, numbers.Real):
            raise InvalidArgumentException(
                "The sample interval must be numeric, got: '{}'".format(sample_interval_ms))
        if not sample_interval_ms > 0 or math.isinf(sample_interval_ms):
            raise InvalidArgumentException(
                "The sample interval must be positive and finite, got: '{}'".format(sample_interval_ms))

        if cpu_time_source is None:
            cpu_time_source = PsutilCpuTimeSource()

        self.__config = get_time_slots(config)
        self.__sample_interval_ms = sample_interval_ms
        self.__sampler = Sampler(cpu_time_source)

        self.__lock = Lock()
        self.__running = False
        self.__stopped = None
        self.__histories = {}
        self.__sample_count = 0

    def get_config(self) -> Dict[str, float]:
        return dict(self.__config)

    def get_capacities(self) -> Dict[str, int]:
        return {slot: get_capacity(duration, self.__sample_interval_ms) for slot, duration in self.__config.items()}

    def get_sample_count(self) -> int:
        with self.__lock:
            return self.__sample_count

    def get_history_lengths(self) -> Dict[str, int]:
        with self.__lock:
            return {slot: len(history) for slot, history in self.__histories.items()}

    def is_running(self) -> bool:
        with self.__lock:
            return self.__running

    def measure(self, duration_ms=DEFAULT_MEASURE_DURATION_MS) -> float:
        return self.__sampler.measure(duration_ms)

    def measure_async(self, duration_ms=DEFAULT_MEASURE_DURATION_MS) -> Future:
        return self.__sampler.measure_async(duration_ms)

    def start(self):
        with self.__lock:
            if self.__running:
                raise InvalidStateException("Continuous measurement is already running, stop it first.")

            capacities = self.get_capacities()
            histories = {slot: SlotHistory(slot, capacity) for slot, capacity in capacities.items()}
            stopped = Event()

            self.__histories = histories
            self.__stopped = stopped
            self.__sample_count = 0
            self.__running = True

        log.info("Starting continuous measurement every {} ms with slot capacities: {}".format(
            self.__sample_interval_ms, capacities))
        sampling_thread = Thread(target=self.__sample_loop, args=[stopped, histories])
        sampling_thread.daemon = True
        sampling_thread.start()

    def stop(self):
        with self.__lock:
            if not self.__running:
                raise InvalidStateException("Continuous measurement is not running, start it first.")

            self.__running = False
            self.__stopped.set()

        log.info("Stopped continuous measurement")

    def average(self) -> Dict[str, float]:
        with self.__lock:
            if not self.__running:
                raise InvalidStateException("Continuous measurement is not running, start it first.")

            return {slot: history.get_average() for slot, history in self.__histories.items()}

    def __sample_loop(self, stopped: Event, histories: Dict[str, SlotHistory]):
        # A run only ever appends to the histories allocated by its own start()
        while not stopped.is_set():
            try:
                load = self.__sampler.measure(self.__sample_interval_ms)
            except Exception:
                log.exception("Failed to measure system load, retrying in {} ms".format(self.__sample_interval_ms))
                stopped.wait(self.__sample_interval_ms / 1000)
                continue

            with self.__lock:
                for history in histories.values():
                    history.add(load)
                if histories is self.__histories:
                    self.__sample_count += 1

            log.debug("Accounted load: '{}'".format(load))

        log.info("Continuous measurement loop exited")
