import psutil

from sysload.cpu.cpu_time_source import CpuTimeSource
from sysload.cpu.cpu_times import CpuTimes

# Linux already accounts guest time inside user and nice time
EXCLUDED_FIELDS = ['guest', 'guest_nice']


class PsutilCpuTimeSource(CpuTimeSource):

    def get_cpu_times(self) -> CpuTimes:
        per_cpu_times = psutil.cpu_times(percpu=True)
        cpu_count = len(per_cpu_times)

        total = 0.0
        idle = 0.0
        for times in per_cpu_times:
            total += self.__get_total(times)
            idle += times.idle

        return CpuTimes(total=total / cpu_count, idle=idle / cpu_count)

    @staticmethod
    def __get_total(times) -> float:
        return sum([getattr(times, field) for field in times._fields if field not in EXCLUDED_FIELDS])
