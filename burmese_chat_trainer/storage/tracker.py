"""
Learner progress tracking.

ProgressTracker keeps ratings and mistakes in memory as the source of truth
for the running session and forwards every change to a ProgressStore. A
store failure is logged and recorded but never undoes or blocks the
in-memory update.
"""

import logging
from collections import Counter
from datetime import datetime
from typing import Dict, List, Optional

from ..errors import ErrorHandler
from ..models import MistakeRecord, RatingRecord
from ..practice.ratings import Rating
from .base import ProgressStore


class ProgressTracker:
    """
    In-memory ratings and mistake log backed by a ProgressStore.
    """

    def __init__(self, store: ProgressStore, error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the tracker.

        Args:
            store: persistence backend
            error_handler: collects persistence failures (a private one if None)
        """
        self.logger = logging.getLogger(__name__)
        self.store = store
        self.error_handler = error_handler or ErrorHandler()
        self.ratings: Dict[int, RatingRecord] = {}
        self.mistakes: List[MistakeRecord] = []

    def load(self) -> None:
        """Read stored progress once, before interactive practice starts."""
        try:
            self.ratings = dict(self.store.load_ratings())
        except Exception as e:
            self._record_failure("load ratings", e)
            self.ratings = {}

        try:
            self.mistakes = list(self.store.load_mistakes())
        except Exception as e:
            self._record_failure("load mistakes", e)
            self.mistakes = []

        self.logger.info(f"Loaded {len(self.ratings)} ratings and {len(self.mistakes)} mistakes")

    def submit_rating(self, message_id: int, rating: Rating) -> RatingRecord:
        """
        Record a rating for a message; the latest rating replaces any earlier one.

        Args:
            message_id: id of the rated message
            rating: the chosen level

        Returns:
            The in-memory RatingRecord
        """
        record = ProgressStore.make_rating_record(message_id, rating)
        self.ratings[message_id] = record

        try:
            self.store.save_rating(message_id, rating, record.updated_at)
        except Exception as e:
            self._record_failure("save rating", e, {'message_id': message_id, 'rating_id': rating.id})

        return record

    def record_mistake(self, question_id: int, wrong_answer_id: int) -> MistakeRecord:
        """
        Append a wrong pick to the mistake log.

        Args:
            question_id: id of the message being asked
            wrong_answer_id: id of the option picked by mistake

        Returns:
            The appended MistakeRecord
        """
        record = MistakeRecord(
            question_id=question_id,
            wrong_answer_id=wrong_answer_id,
            created_at=datetime.now()
        )
        self.mistakes.append(record)

        try:
            self.store.append_mistake(record)
        except Exception as e:
            self._record_failure("append mistake", e, {'question_id': question_id})

        return record

    def rating_for(self, message_id: int) -> Optional[Rating]:
        """Return the current rating level of a message, if it has one."""
        record = self.ratings.get(message_id)
        if record is None:
            return None
        return Rating.from_id(record.rating_id)

    def mistake_counts(self) -> Dict[int, int]:
        """Number of wrong picks per question id."""
        return dict(Counter(record.question_id for record in self.mistakes))

    def clear_all(self) -> bool:
        """
        Forget all progress, in memory and in the store.

        Returns:
            True if the store was cleared as well
        """
        self.ratings = {}
        self.mistakes = []

        try:
            self.store.clear_all()
        except Exception as e:
            self._record_failure("clear progress", e)
            return False
        return True

    def _record_failure(self, operation: str, error: Exception, context: Dict = None) -> None:
        """Log a store failure; in-memory progress stays as it is."""
        processing_error = self.error_handler.handle_persistence_error(operation, error, context)
        self.error_handler.add_error(processing_error)
