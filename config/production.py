import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False

FISCAL_POLICY = os.getenv("FISCAL_POLICY", "calendar")
OFFICE_TARGET_RATIO = float(os.getenv("OFFICE_TARGET_RATIO", "0.5"))

AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
DEFAULT_QUARTER = os.getenv("DEFAULT_QUARTER") or None

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE") or None
