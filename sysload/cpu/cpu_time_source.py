from abc import abstractmethod

from sysload.cpu.cpu_times import CpuTimes


class CpuTimeSource:

    @abstractmethod
    def get_cpu_times(self) -> CpuTimes:
        """
        Returns the accumulated CPU times of the machine, averaged per logical core.

        The counters are measured from an arbitrary reference point and only differences between
        two calls are meaningful.
        :return: the per core average of the total time across all categories and of the idle time
        """
        pass

    def get_name(self) -> str:
        return self.__class__.__name__
