class CpuTimes:

    def __init__(self, total, idle):
        if total < 0 or idle < 0:
            raise ValueError("CPU times must be non-negative, got total: '{}', idle: '{}'".format(total, idle))

        self.__total = total
        self.__idle = idle

    def get_total(self) -> float:
        return self.__total

    def get_idle(self) -> float:
        return self.__idle

    def to_dict(self):
        return {
            "total": self.get_total(),
            "idle": self.get_idle()
        }

    def __str__(self):
        return "CpuTimes(total={}, idle={})".format(self.get_total(), self.get_idle())
