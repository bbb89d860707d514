"""
File-backed progress store.

Ratings and mistakes live in two independent JSON files inside a storage
directory: a message-id keyed object and an append-only list.
"""

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import Config
from ..errors import PersistenceError
from ..models import MistakeRecord, RatingRecord
from ..practice.ratings import Rating
from .base import ProgressStore


class JsonFileProgressStore(ProgressStore):
    """
    Persists progress as JSON files on disk.
    """

    def __init__(self, storage_dir: str = None):
        """
        Initialize the store.

        Args:
            storage_dir: Directory for the progress files. If None, defaults to
                        Config.STORAGE_DIR. Path will be resolved to absolute.
        """
        self.logger = logging.getLogger(__name__)
        self.storage_dir = Path(storage_dir or Config.STORAGE_DIR).resolve()
        self.ratings_path = self.storage_dir / Config.RATINGS_FILE
        self.mistakes_path = self.storage_dir / Config.MISTAKES_FILE

    def load_ratings(self) -> Dict[int, RatingRecord]:
        raw = self._read_json(self.ratings_path, default={})
        if not isinstance(raw, dict):
            raise PersistenceError(f"Ratings file is not a JSON object: {self.ratings_path}")

        ratings: Dict[int, RatingRecord] = {}
        for key, value in raw.items():
            try:
                record = RatingRecord.from_dict(value)
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                self.logger.warning(f"Skipping unreadable rating entry {key!r}: {e}")
                continue
            ratings[record.message_id] = record
        return ratings

    def save_rating(self, message_id: int, rating: Rating,
                    updated_at: Optional[datetime] = None) -> RatingRecord:
        record = self.make_rating_record(message_id, rating, updated_at)

        raw = self._read_json(self.ratings_path, default={})
        if not isinstance(raw, dict):
            raw = {}
        # JSON object keys are strings
        raw[str(message_id)] = record.to_dict()
        self._write_json(self.ratings_path, raw)

        return record

    def load_mistakes(self) -> List[MistakeRecord]:
        raw = self._read_json(self.mistakes_path, default=[])
        if not isinstance(raw, list):
            raise PersistenceError(f"Mistakes file is not a JSON list: {self.mistakes_path}")

        mistakes: List[MistakeRecord] = []
        for value in raw:
            try:
                mistakes.append(MistakeRecord.from_dict(value))
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                self.logger.warning(f"Skipping unreadable mistake entry: {e}")
        return mistakes

    def append_mistake(self, record: MistakeRecord) -> None:
        raw = self._read_json(self.mistakes_path, default=[])
        if not isinstance(raw, list):
            raw = []
        raw.append(record.to_dict())
        self._write_json(self.mistakes_path, raw)

    def clear_all(self) -> None:
        for path in (self.ratings_path, self.mistakes_path):
            try:
                if path.exists():
                    path.unlink()
            except OSError as e:
                raise PersistenceError(f"Could not remove {path}: {e}") from e

    def _read_json(self, path: Path, default: Any) -> Any:
        """Read a JSON file, returning default when it does not exist yet."""
        if not path.exists():
            return default

        try:
            with open(path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise PersistenceError(f"Could not read {path}: {e}") from e

    def _write_json(self, path: Path, data: Any) -> None:
        """Write JSON through a temporary file so a failed write keeps the old file."""
        temp_path = path.with_suffix(path.suffix + '.tmp')
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            with open(temp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(temp_path, path)
        except OSError as e:
            raise PersistenceError(f"Could not write {path}: {e}") from e
