"""
Runtime settings for ebike-status, read from the environment.

A .env file next to this package is loaded first, so local runs can keep
settings there; Lambda sets them as function environment variables.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent / ".env")

# Successor host of the fordgobike feed; scripts/debug_feed.py checks REGIONS against it
STATUS_URL = os.getenv("STATUS_URL", "https://gbfs.baywheels.com/gbfs/en/station_status.json")
FEED_TIMEOUT = float(os.getenv("FEED_TIMEOUT", "10"))

# Minimum e-bike count for a green row; 1..GREEN_THRESHOLD-1 is yellow
GREEN_THRESHOLD = int(os.getenv("GREEN_THRESHOLD", "3"))

LISTEN_ADDR = os.getenv("LISTEN_ADDR", "127.0.0.1:1234")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "console")
