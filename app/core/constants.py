"""Application constants."""

# Ego lifting: max session-over-session top-set increase (percent)
EGO_PROGRESS_THRESHOLD_PERCENT = 10

# Stagnation detection
STAGNATION_WINDOW_SESSIONS = 4
STAGNATION_MIN_SESSIONS = 3

# Minimum matching logs before a progression comparison is attempted
EGO_MIN_SESSIONS = 2

# Days-since-stimulus sentinel when a muscle group was never trained
NO_STIMULUS_DAYS = 999

# Recovery buckets (days since last stimulus)
RECOVERY_GREEN_MAX_DAYS = 3
RECOVERY_YELLOW_MAX_DAYS = 6

# Body weight trend dead band (kg)
WEIGHT_TREND_THRESHOLD_KG = 0.1

# Energy density (kcal per gram)
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9
