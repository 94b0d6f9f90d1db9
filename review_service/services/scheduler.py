import threading

import structlog
from django.utils import timezone

from ..data.models import ReviewRecord
from ..data.writer import SnapshotWriter
from ..domain.logic import in_deck, interval_days, is_due, next_review_at, overdue_days
from ..utils.time import to_iso

logger = structlog.get_logger()


class ReviewScheduler:
    """
    In-memory review state keyed by card id.

    One lock guards the whole mapping: every read-modify-write (grade, reset,
    lazy creation) and every snapshot copy runs under it, and nothing slow
    happens while it is held. Records handed out are copies.
    """

    def __init__(self, records=None, clock=None, on_change=None):
        self._records = dict(records or {})
        self._lock = threading.RLock()
        self._clock = clock or timezone.now
        self._on_change = on_change
        self.writer = None

    @classmethod
    def from_store(cls, store, clock=None):
        """Load the full snapshot, then start the background writer."""
        scheduler = cls(store.load_all(), clock=clock)
        scheduler.writer = SnapshotWriter(store, scheduler.query_all)
        scheduler._on_change = scheduler.writer.notify
        scheduler.writer.start()
        return scheduler

    def close(self):
        if self.writer is not None:
            self.writer.close()
            self.writer = None

    def __len__(self):
        with self._lock:
            return len(self._records)

    def _changed(self):
        if self._on_change is not None:
            self._on_change()

    def _ensure(self, item_id, now):
        rec = self._records.get(item_id)
        if rec is None:
            rec = ReviewRecord.fresh(item_id, now)
            self._records[item_id] = rec
            return rec, True
        return rec, False

    def initialize_if_absent(self, item_id) -> ReviewRecord:
        with self._lock:
            rec, created = self._ensure(item_id, self._clock())
            result = rec.copy()
        if created:
            logger.info("card_initialized", card_id=item_id)
            self._changed()
        return result

    def grade(self, item_id, is_correct: bool) -> ReviewRecord:
        with self._lock:
            now = self._clock()
            rec, _ = self._ensure(item_id, now)
            # The ladder keys on the streak before this grading
            days = interval_days(rec.streak, is_correct)
            rec.next_review_date = next_review_at(now, rec.streak, is_correct)

            rec.total_reviews += 1
            rec.last_reviewed = now
            if is_correct:
                rec.streak += 1
                rec.correct_reviews += 1
            else:
                rec.streak = 0
            result = rec.copy()

        logger.info("card_graded",
            card_id=item_id,
            is_correct=is_correct,
            streak=result.streak,
            interval_days=days,
            next_review_utc=to_iso(result.next_review_date),
        )
        self._changed()
        return result

    def reset(self, item_id) -> ReviewRecord:
        with self._lock:
            rec = ReviewRecord.fresh(item_id, self._clock())
            self._records[item_id] = rec
            result = rec.copy()
        logger.info("card_reset", card_id=item_id)
        self._changed()
        return result

    def query_due(self, now=None, deck=None):
        """
        Due records as ``(record, overdue_days)`` pairs, oldest due date first.

        With ``deck`` only ids starting with ``"<deck>_"`` are considered.
        Ties keep mapping order.
        """
        if now is None:
            now = self._clock()
        with self._lock:
            candidates = [
                rec.copy()
                for item_id, rec in self._records.items()
                if in_deck(item_id, deck) and is_due(rec.next_review_date, now)
            ]
        candidates.sort(key=lambda rec: rec.next_review_date)
        return [(rec, overdue_days(rec.next_review_date, now)) for rec in candidates]

    def query_all(self):
        with self._lock:
            return {item_id: rec.copy() for item_id, rec in self._records.items()}
