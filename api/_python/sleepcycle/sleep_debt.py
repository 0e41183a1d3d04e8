"""
Sleep debt estimation.

Sleep debt is the gap between recommended and actual sleep, averaged over a
week of 5 weekdays and 2 weekend days. Recommendations follow the National
Sleep Foundation age-group ranges (Hirshkowitz et al. 2015).
"""

from .types import DebtCategory, SleepDebtReport, SleepRecommendation

SLEEP_RECOMMENDATIONS = (
    SleepRecommendation("Newborns (0-3 months)", "14-17", 15.5),
    SleepRecommendation("Infants (4-12 months)", "12-16", 14),
    SleepRecommendation("Toddlers (1-2 years)", "11-14", 12.5),
    SleepRecommendation("Preschoolers (3-5 years)", "10-13", 11.5),
    SleepRecommendation("School-age (6-12 years)", "9-12", 10.5),
    SleepRecommendation("Teens (13-18 years)", "8-10", 9),
    SleepRecommendation("Adults (18-64 years)", "7-9", 8),
    SleepRecommendation("Older Adults (65+ years)", "7-8", 7.5),
)

DEFAULT_RECOMMENDED_HOURS = 8.0

RECOVERY_TIMES: dict[DebtCategory, str] = {
    "none": "You're getting enough sleep!",
    "mild": "1-2 nights of good sleep",
    "moderate": "2-3 nights of good sleep",
    "severe": "7-10 days of consistent adequate sleep",
}


def recommended_hours_for(age_group: str) -> float:
    """Optimal nightly hours for an age group label."""
    for recommendation in SLEEP_RECOMMENDATIONS:
        if recommendation.age_group == age_group:
            return recommendation.optimal_hours
    raise ValueError(f"Unknown age group: {age_group}")


def classify_debt(daily_debt_hours: float) -> DebtCategory:
    """Bucket average daily debt into none / mild / moderate / severe."""
    if daily_debt_hours <= 0:
        return "none"
    elif daily_debt_hours < 2:
        return "mild"
    elif daily_debt_hours < 5:
        return "moderate"
    else:
        return "severe"


def calculate_sleep_debt(
    weekday_hours: float,
    weekend_hours: float,
    recommended_hours: float = DEFAULT_RECOMMENDED_HOURS,
) -> SleepDebtReport:
    """
    Average sleep debt for a typical week.

    Args:
        weekday_hours: Nightly sleep Monday-Friday
        weekend_hours: Nightly sleep Saturday-Sunday
        recommended_hours: Target nightly sleep (default 8)

    Returns:
        SleepDebtReport; negative debt means a surplus
    """
    if weekday_hours < 0 or weekend_hours < 0 or recommended_hours < 0:
        raise ValueError("Sleep hours must not be negative")

    actual_weekly = weekday_hours * 5 + weekend_hours * 2
    ideal_weekly = recommended_hours * 7
    weekly_debt = ideal_weekly - actual_weekly
    daily_debt = weekly_debt / 7

    category = classify_debt(daily_debt)
    return SleepDebtReport(
        recommended_hours=recommended_hours,
        daily_debt_hours=round(daily_debt, 1),
        weekly_debt_hours=round(weekly_debt, 1),
        category=category,
        recovery_time=RECOVERY_TIMES[category],
    )
