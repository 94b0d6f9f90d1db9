from dataclasses import dataclass, replace
from datetime import datetime

from ..utils.time import parse_iso, to_iso


@dataclass
class ReviewRecord:
    item_id: str
    streak: int
    last_reviewed: datetime
    next_review_date: datetime
    total_reviews: int = 0
    correct_reviews: int = 0

    @classmethod
    def fresh(cls, item_id: str, now: datetime) -> "ReviewRecord":
        """Zero-state record, due immediately."""
        return cls(item_id=item_id, streak=0, last_reviewed=now, next_review_date=now)

    def copy(self) -> "ReviewRecord":
        return replace(self)

    def to_dict(self) -> dict:
        return {
            "cardId": self.item_id,
            "streak": self.streak,
            "lastReviewed": to_iso(self.last_reviewed),
            "nextReviewDate": to_iso(self.next_review_date),
            "totalReviews": self.total_reviews,
            "correctReviews": self.correct_reviews,
        }

    @classmethod
    def from_dict(cls, item_id: str, data: dict) -> "ReviewRecord":
        # Raises KeyError/TypeError/ValueError on malformed entries
        rec = cls(
            item_id=item_id,
            streak=int(data["streak"]),
            last_reviewed=parse_iso(data["lastReviewed"]),
            next_review_date=parse_iso(data["nextReviewDate"]),
            total_reviews=int(data.get("totalReviews", 0)),
            correct_reviews=int(data.get("correctReviews", 0)),
        )
        if min(rec.streak, rec.total_reviews, rec.correct_reviews) < 0:
            raise ValueError(f"negative counter for {item_id!r}")
        if rec.correct_reviews > rec.total_reviews:
            raise ValueError(f"correctReviews exceeds totalReviews for {item_id!r}")
        return rec
