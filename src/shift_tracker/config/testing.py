SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DATA_FILE = ""
STORAGE_KEY = "bartending-shifts"

DEFAULT_HOURLY_RATE = 15.0

DB_CONFIG = {
    "host": "localhost",
    "port": 3306,
    "user": "root",
    "password": "",
    "database": "shift_tracker_test",
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
