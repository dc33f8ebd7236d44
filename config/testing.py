import os

from .config import db_config_from_env, engine_config_from_env

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_database="attendance_reconciliation_test")
ENGINE_CONFIG = engine_config_from_env()

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
