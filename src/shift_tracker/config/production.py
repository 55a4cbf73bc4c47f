import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "json")
DATA_FILE = os.getenv("DATA_FILE", "data/shifts.json")
STORAGE_KEY = os.getenv("STORAGE_KEY", "bartending-shifts")

DEFAULT_HOURLY_RATE = float(os.getenv("DEFAULT_HOURLY_RATE", "15"))

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "shift_tracker"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
