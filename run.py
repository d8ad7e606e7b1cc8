#!/usr/bin/env python3
import logging

import click

from sysload.config.config_manager import ConfigManager
from sysload.config.constants import TIME_SLOTS_KEY, DEFAULT_TIME_SLOTS, SAMPLE_INTERVAL_MS_KEY, \
    DEFAULT_SAMPLE_INTERVAL_MS, REPORT_INTERVAL_SEC_KEY, DEFAULT_REPORT_INTERVAL_SEC
from sysload.load.load_averager import LoadAverager
from sysload.metrics.load_average_reporter import LoadAverageReporter
from sysload.metrics.metrics_manager import MetricsManager
from sysload.real_exit_handler import RealExitHandler
from sysload.utils import config_logs, schedule_loop

log = logging.getLogger()

config_manager = ConfigManager()


@click.command()
@click.option('--time-slots',
              default=config_manager.get_str(TIME_SLOTS_KEY, DEFAULT_TIME_SLOTS),
              help="The time slot preset: 'standard' or 'unix' (default: standard)")
@click.option('--sample-interval-ms',
              default=config_manager.get_int(SAMPLE_INTERVAL_MS_KEY, DEFAULT_SAMPLE_INTERVAL_MS),
              help="The sampling cadence in milliseconds (default: 1000)")
@click.option('--report-interval-sec',
              default=config_manager.get_float(REPORT_INTERVAL_SEC_KEY, DEFAULT_REPORT_INTERVAL_SEC),
              help="The interval between load average reports in seconds (default: 10)")
def main(time_slots, sample_interval_ms, report_interval_sec):
    log.info("Setting up the load averager with time slots: '{}'...".format(time_slots))
    load_averager = LoadAverager(time_slots, sample_interval_ms=sample_interval_ms)
    exit_handler = RealExitHandler(load_averager)

    log.info("Starting continuous measurement...")
    load_averager.start()

    log.info("Setting up metrics reporting...")
    MetricsManager([LoadAverageReporter(load_averager)], report_interval=report_interval_sec)

    log.info("Startup complete, reporting load averages...")

    # The scheduling loop blocks exit forever
    schedule_loop(exit_handler)


if __name__ == "__main__":
    config_logs(logging.INFO)
    main()
