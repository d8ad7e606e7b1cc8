import logging
import time

import schedule

from sysload import log
from sysload.config.constants import LOG_FMT_STRING, SCHEDULING_LOOP_FAILURE_EXIT_CODE
from sysload.exit_handler import ExitHandler

SCHEDULING_SLEEP_INTERVAL = 1.0


def config_logs(level):
    logging.basicConfig(
        format=LOG_FMT_STRING,
        datefmt='%d-%m-%Y:%H:%M:%S',
        level=level)


def schedule_once() -> float:
    schedule.run_pending()
    return SCHEDULING_SLEEP_INTERVAL


def schedule_loop(exit_handler: ExitHandler):
    log.info("Starting scheduling loop...")
    while True:
        try:
            sleep_time = schedule_once()
            log.debug("Scheduling thread sleeping for: '%s' seconds", sleep_time)
            time.sleep(sleep_time)
        except Exception:
            log.exception("Failed to run scheduling loop")
            exit_handler.exit(SCHEDULING_LOOP_FAILURE_EXIT_CODE)
