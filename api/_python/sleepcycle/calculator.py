"""
Bedtime and wake-time calculation based on 90-minute sleep cycles.

Waking at the end of a cycle (light sleep) rather than in the middle of one
(deep sleep) reduces grogginess. Both directions add the time it takes to
fall asleep, so they are exact inverses of each other:

    bedtime   = wake_time - (cycles * 90 + 15)
    wake_time = bedtime + 15 + cycles * 90

Cycle counts are not validated. Zero or negative counts go through the same
formula (0 cycles gives the wake time minus the 15-minute latency).
"""

from datetime import time
from typing import Iterable, List

from .clock import format_time_12h, shift_time
from .constants import (
    BEDTIME_CYCLES,
    FALL_ASLEEP_MINUTES,
    RECOMMENDED_CYCLES,
    SLEEP_CYCLE_MINUTES,
    WAKE_TIME_CYCLES,
)
from .types import CalculatorMode, SleepOption

SHARE_SIGNATURE = "Calculated with Sleep Cycle Calculator"


def derive_bedtimes(
    wake_time: time,
    cycles: Iterable[int] = BEDTIME_CYCLES,
) -> List[time]:
    """
    Candidate bedtimes for a target wake-up time.

    Args:
        wake_time: When the user wants to wake up
        cycles: Cycle counts, one result per entry (default 6, 5, 4, 3)

    Returns:
        Bedtimes in the same order as `cycles`
    """
    return [
        shift_time(wake_time, -(c * SLEEP_CYCLE_MINUTES + FALL_ASLEEP_MINUTES))
        for c in cycles
    ]


def derive_wake_times(
    bedtime: time,
    cycles: Iterable[int] = WAKE_TIME_CYCLES,
) -> List[time]:
    """
    Candidate wake-up times for a given bedtime.

    Args:
        bedtime: When the user gets into bed
        cycles: Cycle counts, one result per entry (default 3, 4, 5, 6)

    Returns:
        Wake times in the same order as `cycles`
    """
    return [
        shift_time(bedtime, FALL_ASLEEP_MINUTES + c * SLEEP_CYCLE_MINUTES)
        for c in cycles
    ]


def is_recommended(cycles: int) -> bool:
    """True for the recommended 5 or 6 cycles (7.5-9 hours)."""
    return cycles in RECOMMENDED_CYCLES


def format_sleep_duration(cycles: int) -> str:
    """Format total sleep for a cycle count, e.g. "9h" or "7h 30m"."""
    total = cycles * SLEEP_CYCLE_MINUTES
    hours, minutes = divmod(total, 60)
    if minutes:
        return f"{hours}h {minutes}m"
    return f"{hours}h"


def _build_options(times: List[time], cycles: List[int]) -> List[SleepOption]:
    return [
        SleepOption(
            time=t,
            cycles=c,
            sleep_minutes=c * SLEEP_CYCLE_MINUTES,
            duration_label=format_sleep_duration(c),
            recommended=is_recommended(c),
        )
        for t, c in zip(times, cycles)
    ]


def bedtime_options(
    wake_time: time,
    cycles: Iterable[int] = BEDTIME_CYCLES,
) -> List[SleepOption]:
    """Bedtimes for `wake_time`, annotated with duration and recommendation."""
    cycles = list(cycles)
    return _build_options(derive_bedtimes(wake_time, cycles), cycles)


def wake_time_options(
    bedtime: time,
    cycles: Iterable[int] = WAKE_TIME_CYCLES,
) -> List[SleepOption]:
    """Wake times for `bedtime`, annotated with duration and recommendation."""
    cycles = list(cycles)
    return _build_options(derive_wake_times(bedtime, cycles), cycles)


def build_share_text(options: List[SleepOption], mode: CalculatorMode) -> str:
    """
    Plain-text summary of the results for sharing or copying.

    Args:
        options: Results from bedtime_options() or wake_time_options()
        mode: "wakeup" when the options are bedtimes, "sleep" for wake times

    Returns:
        Multi-line text, one line per option
    """
    if mode == "wakeup":
        header = "My bedtime options:"
    elif mode == "sleep":
        header = "My wake-up time options:"
    else:
        raise ValueError(f"Unknown calculator mode: {mode}")

    lines = [header]
    for option in options:
        lines.append(
            f"{format_time_12h(option.time)} ({option.duration_label} of sleep)"
        )
    lines.append(SHARE_SIGNATURE)
    return "\n".join(lines)
