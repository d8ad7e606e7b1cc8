import math
import numbers
from collections.abc import Mapping
from typing import Dict

from sysload.config.constants import STANDARD, STD, UNIX
from sysload.load.exceptions import InvalidArgumentException

STANDARD_TIME_SLOTS = {
    "s1": 1,
    "s10": 10,
    "m1": 60,
    "m10": 10 * 60,
    "h1": 60 * 60,
    "h10": 10 * 60 * 60
}

UNIX_TIME_SLOTS = {
    "m5": 5 * 60,
    "m10": 10 * 60,
    "m15": 15 * 60
}

PRESETS = {
    STANDARD: STANDARD_TIME_SLOTS,
    STD: STANDARD_TIME_SLOTS,
    UNIX: UNIX_TIME_SLOTS
}


def get_time_slots(config) -> Dict[str, float]:
    if isinstance(config, str):
        if config not in PRESETS:
            raise InvalidArgumentException(
                "Invalid time slot configuration: '{}', acceptable values are: '{}'".format(
                    config, sorted(PRESETS.keys())))
        return dict(PRESETS[config])

    if not isinstance(config, Mapping):
        raise InvalidArgumentException(
            "Invalid time slot configuration type: '{}', expected a preset name or a mapping".format(type(config)))

    if len(config) == 0:
        raise InvalidArgumentException("A time slot configuration must contain at least 1 slot.")

    for slot, duration in config.items():
        if not isinstance(slot, str) or len(slot) == 0:
            raise InvalidArgumentException("Time slot names must be non-empty strings, got: '{}'".format(slot))
        if isinstance(duration, bool) or not isinstance(duration, numbers.Real):
            raise InvalidArgumentException("Time slot '{}' has a non-numeric duration: '{}'".format(slot, duration))
        if not duration > 0 or math.isinf(duration):
            raise InvalidArgumentException("Time slot '{}' must have a positive finite duration, got: '{}'".format(
                slot, duration))

    return dict(config)
