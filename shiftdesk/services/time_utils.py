# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Wall-clock time arithmetic for shifts.

Times are ``HH:mm`` strings on a single calendar day. Intervals are
half-open, so a shift ending at 13:00 does not overlap one starting at
13:00.
"""

import re

MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR

TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$"
_TIME_RE = re.compile(TIME_PATTERN)


def is_valid_time(value: str) -> bool:
    """Check whether a string is a 24-hour ``H:mm`` or ``HH:mm`` time."""
    return bool(_TIME_RE.match(value))


def normalize_time(value: str) -> str:
    """Return a validated time zero-padded to ``HH:mm``.

    Raises:
        ValueError: If the value is not a valid time of day.
    """
    value = value.strip()
    if not is_valid_time(value):
        raise ValueError(f"Invalid time format (use HH:mm): {value!r}")
    return minutes_to_time(time_to_minutes(value))


def time_to_minutes(value: str) -> int:
    """Convert an ``HH:mm`` string to minutes since midnight.

    No validation is done here; callers pass well-formed times.
    """
    hours, minutes = value.split(":")
    return int(hours) * MINUTES_PER_HOUR + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """Convert minutes since midnight to an ``HH:mm`` string."""
    return f"{minutes // MINUTES_PER_HOUR:02d}:{minutes % MINUTES_PER_HOUR:02d}"


def duration_hours(start_time: str, end_time: str) -> float:
    """Hours between two times. Negative when end is before start."""
    return (time_to_minutes(end_time) - time_to_minutes(start_time)) / MINUTES_PER_HOUR


def times_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    """Check if two same-day time ranges overlap.

    Args:
        start1: Start time of first range.
        end1: End time of first range.
        start2: Start time of second range.
        end2: End time of second range.

    Returns:
        True if the ranges share any instant. Touching endpoints do not count.
    """
    return (
        time_to_minutes(start1) < time_to_minutes(end2)
        and time_to_minutes(start2) < time_to_minutes(end1)
    )
