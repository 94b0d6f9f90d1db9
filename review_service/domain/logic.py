import math
from datetime import timedelta

from ..config import FIXED_INTERVAL_DAYS, GROWTH, MAX_INTERVAL_DAYS, RETRY_DAYS

ONE_DAY = timedelta(days=1)

LAST_RUNG = max(FIXED_INTERVAL_DAYS)
# Smallest exponent at which growth off the last rung reaches the cap
CAP_EXPONENT = math.ceil(
    math.log(MAX_INTERVAL_DAYS / FIXED_INTERVAL_DAYS[LAST_RUNG], GROWTH)
)


def interval_days(streak: int, is_correct: bool) -> int:
    # streak is the value before this grading was applied
    if not is_correct:
        return RETRY_DAYS

    if streak in FIXED_INTERVAL_DAYS:
        return FIXED_INTERVAL_DAYS[streak]

    exponent = streak - LAST_RUNG
    if exponent >= CAP_EXPONENT:
        return MAX_INTERVAL_DAYS

    proposed = FIXED_INTERVAL_DAYS[LAST_RUNG] * GROWTH ** exponent
    # Whole days only, capped at a year, never below one day
    return max(RETRY_DAYS, int(min(MAX_INTERVAL_DAYS, proposed)))


def next_review_at(now, streak: int, is_correct: bool):
    return now + timedelta(days=interval_days(streak, is_correct))


def is_due(next_review_date, now) -> bool:
    return next_review_date <= now


def overdue_days(next_review_date, now) -> int:
    return math.floor((now - next_review_date) / ONE_DAY)


def in_deck(item_id: str, deck) -> bool:
    if deck is None:
        return True
    return item_id.startswith(f"{deck}_")
