MAX_SAMPLE_TIME_MS = 2000
SAMPLE_SEED = 0

MAX_ELEMENTS = 511
LABEL_CROP_LENGTH = 6
SHOW_FULL_LABELS = False
USER_STATE_STORAGE_TYPE = "session"

DEFAULT_VALUES = [5, 3, 8]
RANDOM_VALUE_RANGE = (0, 99)
