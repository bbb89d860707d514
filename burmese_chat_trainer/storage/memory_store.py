"""
In-memory progress store, used for tests and throwaway sessions.
"""

from datetime import datetime
from typing import Dict, List, Optional

from ..models import MistakeRecord, RatingRecord
from ..practice.ratings import Rating
from .base import ProgressStore


class InMemoryProgressStore(ProgressStore):
    """Keeps ratings and mistakes in process memory only."""

    def __init__(self):
        self._ratings: Dict[int, RatingRecord] = {}
        self._mistakes: List[MistakeRecord] = []

    def load_ratings(self) -> Dict[int, RatingRecord]:
        return dict(self._ratings)

    def save_rating(self, message_id: int, rating: Rating,
                    updated_at: Optional[datetime] = None) -> RatingRecord:
        record = self.make_rating_record(message_id, rating, updated_at)
        self._ratings[message_id] = record
        return record

    def load_mistakes(self) -> List[MistakeRecord]:
        return list(self._mistakes)

    def append_mistake(self, record: MistakeRecord) -> None:
        self._mistakes.append(record)

    def clear_all(self) -> None:
        self._ratings.clear()
        self._mistakes.clear()
