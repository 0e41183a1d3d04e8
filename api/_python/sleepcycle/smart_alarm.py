"""
Smart alarm planning.

Picks an alarm time that lands at the end of a sleep cycle, as close as
possible to when the user wants to get up, and backs off by the user's
typical sleep inertia so they are alert at the right moment.
"""

from datetime import time
from typing import List, Optional, Sequence

from .clock import minutes_between, shift_time, time_to_minutes
from .constants import MINUTES_PER_DAY, SLEEP_CYCLE_MINUTES
from .types import RoutineStep, SleepInertiaOption, SmartAlarmPlan

SLEEP_INERTIA_OPTIONS = (
    SleepInertiaOption("minimal", "Minimal", 15, "Rarely feel groggy in the morning"),
    SleepInertiaOption("moderate", "Moderate", 20, "Sometimes feel groggy after waking up"),
    SleepInertiaOption("heavy", "Heavy", 30, "Often feel very groggy and disoriented when waking up"),
)

DEFAULT_INERTIA_MINUTES = 20
ALARM_CYCLES = (4, 5, 6)
IDEAL_CYCLES = 5

# Candidate times before this hour are treated as the next morning
NEXT_DAY_CUTOFF_HOUR = 4


def inertia_minutes_for(option_id: str) -> int:
    """Minutes of sleep inertia for an option id (20 if unknown)."""
    for option in SLEEP_INERTIA_OPTIONS:
        if option.id == option_id:
            return option.duration_min
    return DEFAULT_INERTIA_MINUTES


def optimal_wake_times(
    bedtime: time,
    inertia_minutes: int = DEFAULT_INERTIA_MINUTES,
    cycles: Sequence[int] = ALARM_CYCLES,
) -> List[time]:
    """End of each complete cycle after bedtime, pulled earlier by inertia."""
    return [
        shift_time(bedtime, c * SLEEP_CYCLE_MINUTES - inertia_minutes)
        for c in cycles
    ]


def find_best_wake_time(candidates: Sequence[time], desired: time) -> Optional[time]:
    """
    Candidate closest to the desired wake time.

    Ties keep the earlier candidate in the input order.
    """
    if not candidates:
        return None

    desired_minutes = time_to_minutes(desired)

    def distance(t: time) -> int:
        minutes = time_to_minutes(t)
        if t.hour < NEXT_DAY_CUTOFF_HOUR:
            minutes += MINUTES_PER_DAY
        return abs(minutes - desired_minutes)

    return min(candidates, key=distance)


def sleep_duration_hours(start: time, end: time) -> float:
    """Hours from start to end (overnight aware), one decimal."""
    return round(minutes_between(start, end) / 60, 1)


def suggested_bedtime(
    desired_wake: time,
    inertia_minutes: int = DEFAULT_INERTIA_MINUTES,
    cycles: int = IDEAL_CYCLES,
) -> time:
    """Bedtime giving `cycles` full cycles before the desired wake time."""
    return shift_time(desired_wake, -(cycles * SLEEP_CYCLE_MINUTES + inertia_minutes))


def morning_routine(
    wake_time: time,
    inertia_minutes: int = DEFAULT_INERTIA_MINUTES,
    activity_time: Optional[time] = None,
) -> List[RoutineStep]:
    """Suggested schedule for the first hour after the alarm."""
    return [
        RoutineStep("Wake up", wake_time),
        RoutineStep("Feel alert (after sleep inertia)", shift_time(wake_time, inertia_minutes)),
        RoutineStep("Light stretching or yoga", shift_time(wake_time, inertia_minutes + 10)),
        RoutineStep("Hydration & breakfast", shift_time(wake_time, inertia_minutes + 25)),
        RoutineStep("Main morning activity", activity_time),
    ]


def plan_smart_alarm(
    bedtime: time,
    desired_wake: time,
    inertia: str = "moderate",
    activity_time: Optional[time] = None,
) -> SmartAlarmPlan:
    """
    Full smart-alarm recommendation.

    Args:
        bedtime: When the user plans to go to bed
        desired_wake: When the user would like to get up
        inertia: Sleep inertia option id ("minimal", "moderate", "heavy")
        activity_time: Optional start of the main morning activity

    Returns:
        SmartAlarmPlan with the chosen alarm, cycle count and routine
    """
    inertia_minutes = inertia_minutes_for(inertia)
    candidates = optimal_wake_times(bedtime, inertia_minutes)
    alarm = find_best_wake_time(candidates, desired_wake)

    duration = sleep_duration_hours(bedtime, alarm)
    return SmartAlarmPlan(
        bedtime=bedtime,
        desired_wake_time=desired_wake,
        inertia_minutes=inertia_minutes,
        candidate_wake_times=candidates,
        suggested_alarm_time=alarm,
        sleep_duration_hours=duration,
        sleep_cycles=round(duration * 60 / SLEEP_CYCLE_MINUTES),
        suggested_bedtime=suggested_bedtime(desired_wake, inertia_minutes),
        morning_routine=morning_routine(alarm, inertia_minutes, activity_time),
    )
