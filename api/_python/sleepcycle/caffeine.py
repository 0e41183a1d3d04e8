"""
Caffeine load at bedtime.

Key findings:
- Caffeine half-life is 3-7 hours (5 hours is a typical adult value;
  significant individual variation via CYP1A2 and ADORA2A)
- Elimination is first-order: remaining = dose * 0.5^(hours / half_life)
- Under ~30 mg in the system at lights-out has little effect on sleep
- Stopping caffeine ~8 hours before bed protects sleep quality

Practical use:
- Estimate how much of today's caffeine is still active at bedtime
- Suggest a daily cutoff time
"""

import math
from datetime import time
from typing import List, Sequence, Tuple

from .clock import minutes_between, minutes_to_time, shift_time, time_to_minutes
from .constants import MINUTES_PER_DAY
from .types import CaffeineIntake, CaffeineReport, CaffeineSource

DEFAULT_HALF_LIFE_HOURS = 5.0
RECOMMENDED_CUTOFF_HOURS = 8
SAFE_BEDTIME_CAFFEINE_MG = 30

CAFFEINE_SOURCES = (
    CaffeineSource("Espresso (1 shot)", 63),
    CaffeineSource("Coffee (8 oz)", 95),
    CaffeineSource("Black Tea (8 oz)", 47),
    CaffeineSource("Green Tea (8 oz)", 28),
    CaffeineSource("Cola (12 oz)", 34),
    CaffeineSource("Energy Drink (8 oz)", 80),
    CaffeineSource("Dark Chocolate (1 oz)", 12),
    CaffeineSource("Caffeine Pill (standard)", 200),
)


def _check_inputs(intakes: Sequence[CaffeineIntake], half_life_hours: float) -> None:
    if half_life_hours <= 0:
        raise ValueError(f"Half-life must be positive, got {half_life_hours}")
    for intake in intakes:
        if intake.amount_mg < 0:
            raise ValueError(
                f"Caffeine amount must not be negative: {intake.source} ({intake.amount_mg} mg)"
            )


def remaining_caffeine(
    amount_mg: float,
    hours_elapsed: float,
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> float:
    """Caffeine (mg) left after `hours_elapsed` of first-order elimination."""
    return amount_mg * math.pow(0.5, hours_elapsed / half_life_hours)


def hours_before_bedtime(consumed: time, bedtime: time) -> float:
    """
    Hours between an intake and bedtime.

    An intake later on the clock than bedtime is treated as the previous
    day's (e.g. 23:00 coffee with a 22:30 bedtime is 23.5 hours earlier).
    """
    return minutes_between(consumed, bedtime) / 60


def calculate_caffeine_report(
    bedtime: time,
    intakes: Sequence[CaffeineIntake],
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
) -> CaffeineReport:
    """
    Summarize how much caffeine will still be active at bedtime.

    Args:
        bedtime: Planned bedtime
        intakes: Doses consumed today
        half_life_hours: Elimination half-life (default 5)

    Returns:
        CaffeineReport with totals, bedtime level, safety flag and cutoff

    Raises:
        ValueError: for a non-positive half-life or a negative amount
    """
    _check_inputs(intakes, half_life_hours)

    total = sum(intake.amount_mg for intake in intakes)
    at_bedtime = sum(
        remaining_caffeine(
            intake.amount_mg,
            hours_before_bedtime(intake.time, bedtime),
            half_life_hours,
        )
        for intake in intakes
    )

    cutoff_time = None
    last_intake_time = None
    if intakes:
        cutoff_time = shift_time(bedtime, -RECOMMENDED_CUTOFF_HOURS * 60)
        last_intake_time = max(intake.time for intake in intakes)

    return CaffeineReport(
        bedtime=bedtime,
        half_life_hours=half_life_hours,
        total_mg=total,
        at_bedtime_mg=math.floor(at_bedtime + 0.5),
        safe_to_sleep=at_bedtime < SAFE_BEDTIME_CAFFEINE_MG,
        cutoff_time=cutoff_time,
        last_intake_time=last_intake_time,
    )


def caffeine_curve(
    intakes: Sequence[CaffeineIntake],
    half_life_hours: float = DEFAULT_HALF_LIFE_HOURS,
    start_hour: int = 6,
) -> List[Tuple[time, float]]:
    """
    Hourly caffeine level over a 24-hour window, for charting.

    The window starts at `start_hour` and each dose only counts from the
    moment it was consumed.

    Returns:
        24 (time, mg) points, mg rounded to one decimal
    """
    _check_inputs(intakes, half_life_hours)

    start_minutes = start_hour * 60
    points = []
    for i in range(24):
        slot_offset = i * 60
        level = 0.0
        for intake in intakes:
            consumed_offset = (time_to_minutes(intake.time) - start_minutes) % MINUTES_PER_DAY
            if slot_offset < consumed_offset:
                continue
            hours = (slot_offset - consumed_offset) / 60
            level += remaining_caffeine(intake.amount_mg, hours, half_life_hours)
        points.append((minutes_to_time(start_minutes + slot_offset), round(level, 1)))
    return points
