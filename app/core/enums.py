"""Shared enums for models and API."""

from enum import Enum


class DayState(str, Enum):
    """What the schedule says about a day of the week."""

    UNSCHEDULED = "unscheduled"  # No schedule row at all
    REST = "rest"  # Explicit rest day (row with no muscle group)
    TRAINING = "training"


class WeekStart(str, Enum):
    """First day of the week used for weekly statistics buckets."""

    SUNDAY = "sunday"
    MONDAY = "monday"


# 0 = Sunday .. 6 = Saturday
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
