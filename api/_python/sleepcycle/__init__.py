"""
Sleep Cycle Calculator

Pure time arithmetic behind the sleep-cycle, nap, caffeine, sleep-debt and
smart-alarm calculators. Clock times are `datetime.time` values.
"""

from .caffeine import caffeine_curve, calculate_caffeine_report
from .calculator import (
    bedtime_options,
    build_share_text,
    derive_bedtimes,
    derive_wake_times,
    format_sleep_duration,
    is_recommended,
    wake_time_options,
)
from .clock import (
    ParseError,
    format_time,
    format_time_12h,
    parse_time,
    parse_time_12h,
    parse_time_input,
)
from .nap import build_calendar_url, derive_nap_times, plan_nap
from .sleep_debt import calculate_sleep_debt, recommended_hours_for
from .smart_alarm import plan_smart_alarm
from .types import (
    CaffeineIntake,
    CaffeineReport,
    NapPlan,
    NapTimes,
    SleepDebtReport,
    SleepOption,
    SmartAlarmPlan,
)

__all__ = [
    # Types
    "SleepOption",
    "NapTimes",
    "NapPlan",
    "CaffeineIntake",
    "CaffeineReport",
    "SleepDebtReport",
    "SmartAlarmPlan",
    # Clock
    "ParseError",
    "parse_time",
    "parse_time_12h",
    "parse_time_input",
    "format_time",
    "format_time_12h",
    # Sleep cycles
    "derive_bedtimes",
    "derive_wake_times",
    "is_recommended",
    "format_sleep_duration",
    "bedtime_options",
    "wake_time_options",
    "build_share_text",
    # Naps
    "derive_nap_times",
    "plan_nap",
    "build_calendar_url",
    # Caffeine
    "calculate_caffeine_report",
    "caffeine_curve",
    # Sleep debt
    "calculate_sleep_debt",
    "recommended_hours_for",
    # Smart alarm
    "plan_smart_alarm",
]
