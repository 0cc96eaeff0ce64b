"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_LEVEL = os.getenv("RAMP_LOG_LEVEL", "INFO").upper()
LOG_FILE_LEVEL = os.getenv("RAMP_LOG_FILE_LEVEL", "DEBUG").upper()
LOG_DIR = Path(os.getenv("RAMP_LOG_DIR", "logs"))
LOG_RETENTION = os.getenv("RAMP_LOG_RETENTION", "7 days")

# API
API_BASE_URL = os.getenv("RAMP_API_BASE_URL", "http://localhost:3001/api")
API_TIMEOUT = int(os.getenv("RAMP_API_TIMEOUT", "30"))
MAX_CONCURRENT = int(os.getenv("RAMP_MAX_CONCURRENT", "10"))
REQUEST_DELAY = float(os.getenv("RAMP_REQUEST_DELAY", "0.05"))

# Cache
EMPLOYEE_CACHE_KEY = "employee"
