LOAD_AVERAGE_KEY = 'sysload.loadAverage'
SAMPLE_COUNT_KEY = 'sysload.sampleCount'
RUNNING = 'sysload.running'

SLOT_TAG = 'slot'
NODE_TAG = 'node'
