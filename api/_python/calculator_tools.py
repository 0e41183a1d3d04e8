"""
JSON tool implementations for the sleep calculators.

Each tool takes a dict of JSON arguments (times as "HH:MM" or "H:MM AM/PM"
strings) and returns a JSON-serializable dict. Shared by the HTTP endpoint
and the command-line script.

Tools:
1. calculate_bedtimes - Bedtimes for a target wake-up time
2. calculate_wake_times - Wake-up times for a bedtime
3. calculate_nap - Nap onset/wake times, tips and calendar link
4. calculate_caffeine - Caffeine left at bedtime and cutoff time
5. calculate_sleep_debt - Weekly sleep debt
6. plan_smart_alarm - Cycle-aligned alarm and morning routine
"""

import logging
from datetime import time
from typing import Any, Callable, Sequence

import pytz

from sleepcycle import config
from sleepcycle.caffeine import (
    DEFAULT_HALF_LIFE_HOURS,
    caffeine_curve,
    calculate_caffeine_report,
)
from sleepcycle.calculator import (
    bedtime_options,
    build_share_text,
    wake_time_options,
)
from sleepcycle.clock import (
    current_time_in_tz,
    format_time,
    format_time_12h,
    parse_time_input,
)
from sleepcycle.constants import BEDTIME_CYCLES, NAP_FALL_ASLEEP_MINUTES, WAKE_TIME_CYCLES
from sleepcycle.nap import build_calendar_url, plan_nap
from sleepcycle.sleep_debt import (
    DEFAULT_RECOMMENDED_HOURS,
    calculate_sleep_debt,
    recommended_hours_for,
)
from sleepcycle.smart_alarm import plan_smart_alarm
from sleepcycle.types import CaffeineIntake, SleepOption

logger = logging.getLogger(__name__)


def _time_fields(t: time | None) -> dict[str, str | None]:
    """Both display forms of a time, for JSON output."""
    if t is None:
        return {"time": None, "time_12h": None}
    return {"time": format_time(t), "time_12h": format_time_12h(t)}


def _timezone(arguments: dict[str, Any]) -> str:
    """IANA timezone from the request, or the configured default."""
    tz_name = arguments.get("timezone") or config.DEFAULT_TIMEZONE
    if tz_name not in pytz.all_timezones_set:
        raise ValueError(f"Unknown timezone: {tz_name}")
    return tz_name


def _time_value(value: Any, key: str) -> time:
    """Parse a JSON time string, rejecting other JSON types."""
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a time string")
    return parse_time_input(value)


def _reference_time(arguments: dict[str, Any], key: str) -> time:
    """Parse arguments[key], defaulting to "now" in the request's timezone."""
    value = arguments.get(key)
    if value is not None and value != "":
        return _time_value(value, key)
    return current_time_in_tz(_timezone(arguments))


def _cycles(arguments: dict[str, Any], default: Sequence[int]) -> Sequence[int]:
    """Cycle counts from the request; must be a list of integers."""
    cycles = arguments.get("cycles", default)
    if not isinstance(cycles, (list, tuple)) or not all(
        isinstance(c, int) and not isinstance(c, bool) for c in cycles
    ):
        raise ValueError("cycles must be a list of integers")
    return cycles


def _number(arguments: dict[str, Any], key: str, default: Any = None) -> float:
    """Numeric argument; arguments[key] is required when no default is given."""
    value = arguments[key] if default is None else arguments.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"{key} must be a number")
    return value


def _options_to_dict(options: list[SleepOption]) -> list[dict[str, Any]]:
    return [
        {
            **_time_fields(option.time),
            "cycles": option.cycles,
            "sleep_minutes": option.sleep_minutes,
            "duration": option.duration_label,
            "recommended": option.recommended,
        }
        for option in options
    ]


def calculate_bedtimes(arguments: dict[str, Any]) -> dict[str, Any]:
    """Bedtime options for a wake-up time (defaults to now)."""
    wake_time = _reference_time(arguments, "wake_time")
    cycles = _cycles(arguments, BEDTIME_CYCLES)
    options = bedtime_options(wake_time, cycles)

    return {
        "wake_time": format_time(wake_time),
        "options": _options_to_dict(options),
        "share_text": build_share_text(options, "wakeup"),
    }


def calculate_wake_times(arguments: dict[str, Any]) -> dict[str, Any]:
    """Wake-up options for a bedtime (defaults to now)."""
    bedtime = _reference_time(arguments, "bedtime")
    cycles = _cycles(arguments, WAKE_TIME_CYCLES)
    options = wake_time_options(bedtime, cycles)

    return {
        "bedtime": format_time(bedtime),
        "options": _options_to_dict(options),
        "share_text": build_share_text(options, "sleep"),
    }


def calculate_nap(arguments: dict[str, Any]) -> dict[str, Any]:
    """Nap plan with an optional calendar link."""
    start = _reference_time(arguments, "start_time")
    plan = plan_nap(
        start,
        int(_number(arguments, "duration_minutes")),
        int(_number(arguments, "fall_asleep_minutes", NAP_FALL_ASLEEP_MINUTES)),
    )

    result: dict[str, Any] = {
        "start": format_time(plan.start),
        "duration_minutes": plan.duration_min,
        "sleep_onset": _time_fields(plan.times.onset),
        "wake": _time_fields(plan.times.wake),
        "nap_type": plan.option.name if plan.option else None,
        "tips": plan.tips,
    }
    if arguments.get("timezone"):
        result["calendar_url"] = build_calendar_url(plan.times, _timezone(arguments))
    return result


def calculate_caffeine(arguments: dict[str, Any]) -> dict[str, Any]:
    """Caffeine report and hourly curve for the day's intakes."""
    bedtime = _time_value(arguments["bedtime"], "bedtime")
    half_life = float(_number(arguments, "half_life_hours", DEFAULT_HALF_LIFE_HOURS))
    items = arguments.get("intakes", [])
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise ValueError("intakes must be a list of objects")
    intakes = [
        CaffeineIntake(
            source=item.get("source", "Custom"),
            amount_mg=float(_number(item, "amount_mg")),
            time=_time_value(item["time"], "time"),
        )
        for item in items
    ]

    report = calculate_caffeine_report(bedtime, intakes, half_life)
    curve = caffeine_curve(intakes, half_life) if intakes else []

    return {
        "bedtime": format_time(report.bedtime),
        "half_life_hours": report.half_life_hours,
        "total_mg": report.total_mg,
        "at_bedtime_mg": report.at_bedtime_mg,
        "safe_to_sleep": report.safe_to_sleep,
        "cutoff": _time_fields(report.cutoff_time),
        "last_intake": _time_fields(report.last_intake_time),
        "curve": [{"time": format_time(t), "mg": mg} for t, mg in curve],
    }


def calculate_sleep_debt_tool(arguments: dict[str, Any]) -> dict[str, Any]:
    """Sleep debt from weekday/weekend hours and an age group or target."""
    if "age_group" in arguments:
        recommended = recommended_hours_for(arguments["age_group"])
    else:
        recommended = float(_number(arguments, "recommended_hours", DEFAULT_RECOMMENDED_HOURS))

    report = calculate_sleep_debt(
        float(_number(arguments, "weekday_hours")),
        float(_number(arguments, "weekend_hours")),
        recommended,
    )
    return {
        "recommended_hours": report.recommended_hours,
        "daily_debt_hours": report.daily_debt_hours,
        "weekly_debt_hours": report.weekly_debt_hours,
        "category": report.category,
        "recovery_time": report.recovery_time,
    }


def plan_smart_alarm_tool(arguments: dict[str, Any]) -> dict[str, Any]:
    """Smart alarm plan for a bedtime and desired wake time."""
    activity = arguments.get("activity_time")
    plan = plan_smart_alarm(
        _time_value(arguments["bedtime"], "bedtime"),
        _time_value(arguments["desired_wake_time"], "desired_wake_time"),
        arguments.get("sleep_inertia", "moderate"),
        _time_value(activity, "activity_time") if activity else None,
    )

    return {
        "bedtime": format_time(plan.bedtime),
        "desired_wake_time": format_time(plan.desired_wake_time),
        "inertia_minutes": plan.inertia_minutes,
        "candidate_wake_times": [format_time(t) for t in plan.candidate_wake_times],
        "suggested_alarm": _time_fields(plan.suggested_alarm_time),
        "sleep_duration_hours": plan.sleep_duration_hours,
        "sleep_cycles": plan.sleep_cycles,
        "suggested_bedtime": _time_fields(plan.suggested_bedtime),
        "morning_routine": [
            {"activity": step.activity, "time": format_time(step.time) if step.time else None}
            for step in plan.morning_routine
        ],
    }


TOOLS: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
    "calculate_bedtimes": calculate_bedtimes,
    "calculate_wake_times": calculate_wake_times,
    "calculate_nap": calculate_nap,
    "calculate_caffeine": calculate_caffeine,
    "calculate_sleep_debt": calculate_sleep_debt_tool,
    "plan_smart_alarm": plan_smart_alarm_tool,
}


def invoke_tool(tool_name: str, arguments: dict[str, Any]) -> dict[str, Any]:
    """Router function for HTTP and CLI invocation."""
    tool = TOOLS.get(tool_name)
    if tool is None:
        raise ValueError(f"Unknown tool: {tool_name}")

    logger.debug("Invoking %s with %s", tool_name, arguments)
    return tool(arguments)
