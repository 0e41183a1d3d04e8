"""
Fixed durations used by the sleep calculators.

Scientific basis:
- A sleep cycle (light → deep → REM) averages ~90 minutes in adults
- Average sleep-onset latency is 10-20 minutes; 15 is used for bedtime,
  5 for naps (sleep pressure is lower but the sleeper is usually already
  lying down in a quiet place)
- 5-6 full cycles (7.5-9 hours) is the recommended nightly amount
"""

SLEEP_CYCLE_MINUTES = 90
FALL_ASLEEP_MINUTES = 15
NAP_FALL_ASLEEP_MINUTES = 5

# Flags preferred results, never filters them
RECOMMENDED_CYCLES = frozenset({5, 6})

# Longest sleep first so the earliest bedtime is listed first
BEDTIME_CYCLES = (6, 5, 4, 3)
WAKE_TIME_CYCLES = (3, 4, 5, 6)

MINUTES_PER_DAY = 24 * 60
