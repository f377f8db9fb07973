# taskmanager/config.py
"""Environment-driven settings for the task manager service."""

import os
from pathlib import Path

DB_PATH = Path(__file__).parent / "data.db"
DATABASE_URL = os.getenv("TASKMANAGER_DATABASE_URL", f"sqlite:///{DB_PATH}")

SQL_ECHO = os.getenv("TASKMANAGER_SQL_ECHO", "").lower() in ("1", "true", "yes")

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS",
    "http://localhost:3000,http://localhost:5173,http://localhost:8000",
).split(",")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
