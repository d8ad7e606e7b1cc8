import logging

from sysload.config.constants import LOG_FMT_STRING

log = logging.getLogger()
log.setLevel(logging.INFO)
