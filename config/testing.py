SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

FISCAL_POLICY = "calendar"
OFFICE_TARGET_RATIO = 0.5

AUTO_SEED_DB = False
DEFAULT_QUARTER = None

LOG_LEVEL = "WARNING"
LOG_FILE = None
