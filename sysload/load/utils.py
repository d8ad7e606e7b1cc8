import math

from sysload import log
from sysload.cpu.cpu_times import CpuTimes

MAX_SAFE_INTEGER = 2 ** 53 - 1


def truncate(value: float) -> float:
    """
    Reduces a value to one decimal place by rounding toward zero, e.g. 42.37 -> 42.3 and -0.05 -> 0.0
    """
    return math.trunc(value * 10) / 10


def get_capacity(slot_duration_sec, sample_interval_ms) -> int:
    # Halves round up, not to even
    return int(math.floor(slot_duration_sec * 1000 / sample_interval_ms + 0.5))


def get_deltas(start: CpuTimes, end: CpuTimes):
    if end.get_total() > start.get_total():
        return end.get_total() - start.get_total(), end.get_idle() - start.get_idle()

    # The counters wrapped around, this is a best effort estimate only
    log.debug("CPU time counters went backwards from {} to {}".format(start, end))
    delta_total = MAX_SAFE_INTEGER - start.get_total() + end.get_total()
    delta_idle = MAX_SAFE_INTEGER - start.get_idle() + end.get_idle()
    return delta_total, delta_idle


def get_load(start: CpuTimes, end: CpuTimes) -> float:
    delta_total, delta_idle = get_deltas(start, end)
    if delta_total <= 0:
        log.debug("Degenerate CPU time delta: '{}', reporting no load".format(delta_total))
        return 0.0

    return truncate(100 - (100 * delta_idle / delta_total))


def get_average(samples) -> float:
    if len(samples) == 0:
        return 0.0

    # Samples carry one decimal, so whole tenths sum and divide exactly
    tenths = sum([round(sample * 10) for sample in samples])
    mean_tenths = abs(tenths) // len(samples)
    if tenths < 0:
        mean_tenths = -mean_tenths
    return mean_tenths / 10
