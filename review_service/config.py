RETRY_DAYS = 1                 # incorrect answer, any streak
MAX_INTERVAL_DAYS = 365
FIXED_INTERVAL_DAYS = {
    0: 1,       # first correct answer
    1: 3,
    2: 7,
    3: 14,
    4: 30,      # last fixed rung
}
GROWTH = 1.5                   # past the fixed rungs
SERVICE_NAME = "Review Management Service"
