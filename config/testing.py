from .config import Config

SECRET_KEY = "test-secret"

DB_CONFIG = Config.db_config()

LATE_CUTOFF_HOUR = Config.LATE_CUTOFF_HOUR
LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
