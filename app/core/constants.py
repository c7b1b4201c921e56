"""Application constants."""

# Entry limits (weight in kg)
MAX_WEIGHT = 2900
MAX_REPS = 2900
MAX_SETS = 2900

# Exercise field limits
EXERCISE_NAME_MAX = 100
EXERCISE_DESCRIPTION_MAX = 300
EXTERNAL_LINK_MAX = 150
EXTERNAL_LINK_NAME_MAX = 100
MUSCLE_GROUP_NAME_MAX = 50

# Rest timer preset per exercise (seconds)
DEFAULT_REST_TIME_SECONDS = 90
MAX_REST_TIME_SECONDS = 3600

# Statistics windows
DEFAULT_STATS_RANGE_WEEKS = 5
DAILY_LOOKBACK_DAYS = 7
WEEKDAY_LOOKBACK_WEEKS = 7
LAST_N_BUCKETS = 7

# Account
MIN_PASSWORD_LENGTH = 6

DEFAULT_MUSCLE_GROUPS = (
    "Abs",
    "Back",
    "Biceps",
    "Calves",
    "Chest",
    "Forearms",
    "Glutes",
    "Hamstrings",
    "Quads",
    "Shoulders",
    "Triceps",
)
