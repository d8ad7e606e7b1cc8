import os
import signal
import time

from sysload import log
from sysload.exit_handler import ExitHandler
from sysload.load.exceptions import InvalidStateException


class RealExitHandler(ExitHandler):

    def __init__(self, load_averager=None):
        self.__load_averager = load_averager
        signal.signal(signal.SIGINT, self.__sig_exit)
        signal.signal(signal.SIGTERM, self.__sig_exit)

    def __sig_exit(self, signum, frame):
        log.info("Exiting due to signal: {} and frame: {}".format(signum, frame))
        self.exit(signum)

    def exit(self, code):
        if self.__load_averager is not None:
            try:
                self.__load_averager.stop()
            except InvalidStateException:
                log.debug("Load averager was already stopped")

        # Sleep briefly so log messages get flushed.
        time.sleep(0.1)
        os._exit(code)
