LOG_FMT_STRING = '%(asctime)s,%(msecs)d %(levelname)s %(process)d [%(filename)s:%(lineno)d] %(message)s'

# TIME SLOT CONSTANTS
TIME_SLOTS_KEY = 'SYSLOAD_TIME_SLOTS'
STANDARD = 'standard'
STD = 'std'
UNIX = 'unix'
DEFAULT_TIME_SLOTS = STANDARD

# SAMPLING CONSTANTS
SAMPLE_INTERVAL_MS_KEY = 'SYSLOAD_SAMPLE_INTERVAL_MS'
DEFAULT_SAMPLE_INTERVAL_MS = 1000
DEFAULT_MEASURE_DURATION_MS = 100

# REPORTING CONSTANTS
REPORT_INTERVAL_SEC_KEY = 'SYSLOAD_REPORT_INTERVAL_SEC'
DEFAULT_REPORT_INTERVAL_SEC = 10

# Static environment variables
EC2_INSTANCE_ID = 'EC2_INSTANCE_ID'

# EXIT CODES
SCHEDULING_LOOP_FAILURE_EXIT_CODE = 3
