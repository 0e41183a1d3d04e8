"""Runtime configuration read from the environment."""

import os

# IANA timezone used for "now" when a request omits its reference time
DEFAULT_TIMEZONE: str = os.environ.get("SLEEPCYCLE_DEFAULT_TZ", "UTC")

LOG_LEVEL: str = os.environ.get("SLEEPCYCLE_LOG_LEVEL", "INFO")
