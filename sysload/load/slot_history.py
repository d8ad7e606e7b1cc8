from collections import deque
from typing import List

from sysload.load.utils import get_average


class SlotHistory:

    def __init__(self, slot, capacity):
        if capacity < 0:
            raise ValueError("A slot history must have a non-negative capacity.")

        self.__slot = slot
        self.__capacity = capacity
        self.__samples = deque([])

    def get_slot(self) -> str:
        return self.__slot

    def get_capacity(self) -> int:
        return self.__capacity

    def get_samples(self) -> List[float]:
        return list(self.__samples)

    def add(self, sample: float):
        self.__samples.append(sample)
        while len(self.__samples) > self.__capacity:
            self.__samples.popleft()

    def get_average(self) -> float:
        return get_average(self.__samples)

    def __len__(self):
        return len(self.__samples)
