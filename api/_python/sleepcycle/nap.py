"""
Nap timing.

Key findings:
- 10-20 minute naps stay in light sleep (N1/N2) and avoid sleep inertia
- 30-60 minute naps reach slow-wave sleep; waking from it causes grogginess
- A 90 minute nap completes a full cycle including REM
- Falling asleep for a nap takes ~5 minutes
"""

from datetime import date, datetime, time, timedelta
from typing import List, Optional
from urllib.parse import quote

import pytz

from .clock import get_current_datetime_in_tz, shift_time
from .constants import NAP_FALL_ASLEEP_MINUTES
from .types import NapOption, NapPlan, NapTimes

POWER_NAP = 20
SHORT_NAP = 30
RECOVERY_NAP = 60
FULL_CYCLE_NAP = 90

NAP_OPTIONS = (
    NapOption(
        duration_min=POWER_NAP,
        name="Power Nap",
        description="Quick refresh without entering deep sleep",
        benefits="Increases alertness and concentration",
    ),
    NapOption(
        duration_min=SHORT_NAP,
        name="Short Nap",
        description="Light sleep phase for quick recovery",
        benefits="Improves mood and reduces fatigue",
    ),
    NapOption(
        duration_min=RECOVERY_NAP,
        name="Recovery Nap",
        description="Reaches deep sleep for better restoration",
        benefits="Enhances memory and cognitive processing",
    ),
    NapOption(
        duration_min=FULL_CYCLE_NAP,
        name="Full Cycle Nap",
        description="Complete sleep cycle including REM",
        benefits="Maximum restoration, creativity boost",
    ),
)

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
CALENDAR_DETAILS = "Scheduled nap from Sleep Calculator"


def derive_nap_times(
    start: time,
    duration_minutes: int,
    fall_asleep_minutes: int = NAP_FALL_ASLEEP_MINUTES,
) -> NapTimes:
    """
    Sleep-onset and wake times for a nap.

    Args:
        start: When the user lies down
        duration_minutes: Intended sleep time
        fall_asleep_minutes: Latency before sleep starts (default 5)

    Returns:
        NapTimes with onset = start + latency and wake = onset + duration
    """
    onset = shift_time(start, fall_asleep_minutes)
    wake = shift_time(onset, duration_minutes)
    return NapTimes(onset=onset, wake=wake)


def find_nap_option(duration_minutes: int) -> Optional[NapOption]:
    """Named nap option for a duration, or None for custom lengths."""
    for option in NAP_OPTIONS:
        if option.duration_min == duration_minutes:
            return option
    return None


def nap_tips(duration_minutes: int) -> List[str]:
    """Practical tips for the chosen nap length."""
    if duration_minutes <= 20:
        return [
            "Find a quiet, comfortable place",
            "Set an alarm to avoid oversleeping",
            "Use an eye mask to block light",
            "Try to nap sitting slightly upright to avoid deep sleep",
        ]
    if duration_minutes <= 60:
        return [
            "Find a quiet, dark place to lie down",
            "Use a light blanket as body temperature drops during sleep",
            "Set an alarm to avoid sleep inertia",
            "Consider a caffeine nap (drink coffee right before your nap)",
        ]
    return [
        "Make sure your nap environment is comfortable and quiet",
        "Block all light sources for deeper sleep",
        "Expect to feel groggy upon waking (sleep inertia)",
        "Allow 15-30 minutes to fully wake up after your nap",
    ]


def plan_nap(
    start: time,
    duration_minutes: int,
    fall_asleep_minutes: int = NAP_FALL_ASLEEP_MINUTES,
) -> NapPlan:
    """
    Build a complete nap plan for the nap calculator.

    Raises:
        ValueError: if duration_minutes is not positive
    """
    if duration_minutes <= 0:
        raise ValueError(f"Nap duration must be positive, got {duration_minutes}")

    return NapPlan(
        start=start,
        duration_min=duration_minutes,
        times=derive_nap_times(start, duration_minutes, fall_asleep_minutes),
        option=find_nap_option(duration_minutes),
        tips=nap_tips(duration_minutes),
    )


def _to_utc_stamp(local_dt: datetime, tz) -> str:
    """Format a naive local datetime as a UTC "YYYYMMDDTHHMMSSZ" stamp."""
    localized = tz.localize(local_dt)
    return localized.astimezone(pytz.UTC).strftime("%Y%m%dT%H%M%SZ")


def build_calendar_url(
    nap_times: NapTimes,
    tz_name: str,
    on_date: date | None = None,
    title: str = "Power Nap",
) -> str:
    """
    Google Calendar "add event" link for a nap.

    Args:
        nap_times: Onset and wake times
        tz_name: IANA timezone the times are expressed in
        on_date: Date of the nap (defaults to today in tz_name)
        title: Event title

    Returns:
        URL with the event start/end in UTC
    """
    tz = pytz.timezone(tz_name)
    if on_date is None:
        on_date = get_current_datetime_in_tz(tz_name).date()

    start_dt = datetime.combine(on_date, nap_times.onset)
    end_dt = datetime.combine(on_date, nap_times.wake)
    # Nap runs past midnight
    if end_dt < start_dt:
        end_dt += timedelta(days=1)

    dates = f"{_to_utc_stamp(start_dt, tz)}/{_to_utc_stamp(end_dt, tz)}"
    return (
        f"{GOOGLE_CALENDAR_URL}?action=TEMPLATE"
        f"&text={quote(title)}"
        f"&dates={dates}"
        f"&details={quote(CALENDAR_DETAILS)}"
    )
