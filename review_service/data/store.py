import json
import os
from pathlib import Path

import structlog

from .models import ReviewRecord

logger = structlog.get_logger()


class JsonFileStore:
    """
    Whole-snapshot persistence of review records in one JSON file.

    The file holds ``{card_id: record}`` objects. Writes go to a sibling
    ``.tmp`` file that is renamed over the target, so readers never see a
    half-written snapshot.
    """

    def __init__(self, path):
        self.path = Path(path)
        self.tmp_path = self.path.with_name(self.path.name + ".tmp")

    def load_all(self):
        """Return every stored record; a missing or unreadable file yields ``{}``."""
        try:
            with open(self.path, encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError:
            logger.info("progress_file_missing", path=str(self.path))
            return {}
        except (OSError, ValueError):
            logger.exception("progress_load_failed", path=str(self.path))
            return {}

        if not isinstance(raw, dict):
            logger.warning("progress_file_invalid", path=str(self.path), kind=type(raw).__name__)
            return {}

        records = {}
        for item_id, data in raw.items():
            try:
                records[item_id] = ReviewRecord.from_dict(item_id, data)
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("progress_record_skipped", path=str(self.path), card_id=item_id)

        logger.info("progress_loaded", path=str(self.path), card_count=len(records))
        return records

    def save_all(self, records):
        """Write the full snapshot atomically. Raises ``OSError`` on failure."""
        payload = {item_id: rec.to_dict() for item_id, rec in records.items()}
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.tmp_path, "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, ensure_ascii=False)
        os.replace(self.tmp_path, self.path)
