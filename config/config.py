import os


class Config:
    """Shared defaults; each environment module reads from here."""

    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key"

    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "student_attendance")
    # Seconds; bounds every storage call so an outage surfaces as StorageUnavailable.
    DB_TIMEOUT = int(os.environ.get("DB_TIMEOUT", "3"))

    # Hour from which a check-in counts as late (10 = one grace hour after a 09:00 start).
    LATE_CUTOFF_HOUR = int(os.environ.get("LATE_CUTOFF_HOUR", "10"))

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))

    @classmethod
    def db_config(cls) -> dict:
        return {
            "host": cls.DB_HOST,
            "port": cls.DB_PORT,
            "user": cls.DB_USER,
            "password": cls.DB_PASSWORD,
            "database": cls.DB_NAME,
            "connection_timeout": cls.DB_TIMEOUT,
        }
