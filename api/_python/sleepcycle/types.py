"""
Data structures returned by the sleep calculators.

All times are `datetime.time` values (wall-clock only, no date).
"""

from dataclasses import dataclass, field
from datetime import time
from typing import Literal

# "wakeup": user picked a wake time and wants bedtimes
# "sleep": user picked a bedtime and wants wake times
CalculatorMode = Literal["wakeup", "sleep"]

DebtCategory = Literal["none", "mild", "moderate", "severe"]


# =============================================================================
# Sleep Cycle Types
# =============================================================================


@dataclass(frozen=True)
class SleepOption:
    """One candidate bedtime or wake time, paired with its cycle count."""

    time: time
    cycles: int
    sleep_minutes: int  # cycles * 90, excludes time to fall asleep
    duration_label: str  # "7h 30m"
    recommended: bool  # True for 5 or 6 cycles


@dataclass(frozen=True)
class NapTimes:
    """When the napper falls asleep and when the alarm should ring."""

    onset: time
    wake: time


# =============================================================================
# Nap Types
# =============================================================================


@dataclass(frozen=True)
class NapOption:
    """A named nap length offered by the nap calculator."""

    duration_min: int
    name: str
    description: str
    benefits: str


@dataclass
class NapPlan:
    """Derived nap times plus display extras."""

    start: time
    duration_min: int
    times: NapTimes
    option: NapOption | None  # None for custom durations
    tips: list[str] = field(default_factory=list)


# =============================================================================
# Caffeine Types
# =============================================================================


@dataclass(frozen=True)
class CaffeineSource:
    """Common drink or product with its typical caffeine content."""

    name: str
    amount_mg: int


@dataclass(frozen=True)
class CaffeineIntake:
    """A single caffeine dose consumed at a clock time."""

    source: str
    amount_mg: float
    time: time


@dataclass
class CaffeineReport:
    """Caffeine load relative to a planned bedtime."""

    bedtime: time
    half_life_hours: float
    total_mg: float
    at_bedtime_mg: int  # rounded for display
    safe_to_sleep: bool
    cutoff_time: time | None  # None when nothing was consumed
    last_intake_time: time | None


# =============================================================================
# Sleep Debt Types
# =============================================================================


@dataclass(frozen=True)
class SleepRecommendation:
    """Recommended nightly sleep for an age group."""

    age_group: str
    hours_range: str  # "7-9"
    optimal_hours: float


@dataclass
class SleepDebtReport:
    """Average sleep debt over a 5 weekday + 2 weekend day week."""

    recommended_hours: float
    daily_debt_hours: float  # negative = surplus
    weekly_debt_hours: float
    category: DebtCategory
    recovery_time: str


# =============================================================================
# Smart Alarm Types
# =============================================================================


@dataclass(frozen=True)
class SleepInertiaOption:
    """How groggy the user typically feels after waking."""

    id: str
    name: str
    duration_min: int
    description: str


@dataclass(frozen=True)
class RoutineStep:
    """One entry of the suggested morning routine."""

    activity: str
    time: time | None  # None when the user gave no activity time


@dataclass
class SmartAlarmPlan:
    """Alarm suggestion for a given bedtime and desired wake time."""

    bedtime: time
    desired_wake_time: time
    inertia_minutes: int
    candidate_wake_times: list[time]
    suggested_alarm_time: time
    sleep_duration_hours: float
    sleep_cycles: int
    suggested_bedtime: time
    morning_routine: list[RoutineStep] = field(default_factory=list)
