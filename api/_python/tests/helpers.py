"""
Test helper functions for sleep calculator tests.

These functions can be imported by test modules to keep expected values
readable as "HH:MM" strings.
"""

import sys
from datetime import time
from pathlib import Path
from typing import Iterable, List

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from sleepcycle.clock import format_time, parse_time


def at(time_str: str) -> time:
    """Shorthand for a clock time: at("07:00")."""
    return parse_time(time_str)


def hhmm(times: Iterable[time]) -> List[str]:
    """Render a sequence of times as "HH:MM" strings for comparison."""
    return [format_time(t) for t in times]


def every_minute() -> List[time]:
    """All 1440 clock times of a day."""
    return [time(h, m) for h in range(24) for m in range(60)]
