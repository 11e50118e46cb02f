"""Runtime configuration read from the environment (and an optional ``.env``)."""
from __future__ import annotations

import os
from typing import Final, Optional

from dotenv import load_dotenv

__all__ = [
    "FEED_URL",
    "TIMEOUT_S",
    "MAX_RETRIES",
    "BACKOFF",
    "LOG_LEVEL",
    "LOG_FILE",
]

load_dotenv()

# ---------------------------------------------------------------------------
# Observation feed
# ---------------------------------------------------------------------------

FEED_URL: Final[str] = os.getenv(
    "METAR_FEED_URL",
    "https://tgftp.nws.noaa.gov/data/observations/metar/stations/{icao}.TXT",
)
TIMEOUT_S: Final[float] = float(os.getenv("METAR_FEED_TIMEOUT", "5.0"))
MAX_RETRIES: Final[int] = int(os.getenv("METAR_FEED_RETRIES", "3"))
BACKOFF: Final[float] = 1.5  # multiplier for exponential back-off

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL: Final[str] = os.getenv("METAR_DECODER_LOG_LEVEL", "WARNING").upper()
LOG_FILE: Final[Optional[str]] = os.getenv("METAR_DECODER_LOG_FILE") or None
