"""
Progress store interface.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from ..models import MistakeRecord, RatingRecord
from ..practice.ratings import Rating


class ProgressStore(ABC):
    """
    Base interface for persisting ratings and mistakes.

    Implementations raise PersistenceError when a call fails; callers in the
    practice core go through ProgressTracker, which absorbs those failures.
    """

    @abstractmethod
    def load_ratings(self) -> Dict[int, RatingRecord]:
        """
        Load every stored rating.

        Returns:
            Mapping of message id to its latest RatingRecord
        """
        pass

    @abstractmethod
    def save_rating(self, message_id: int, rating: Rating,
                    updated_at: Optional[datetime] = None) -> RatingRecord:
        """
        Store the rating for a message, replacing any previous one.

        Args:
            message_id: id of the rated message
            rating: the chosen level
            updated_at: timestamp to store (defaults to now)

        Returns:
            The stored RatingRecord
        """
        pass

    @abstractmethod
    def load_mistakes(self) -> List[MistakeRecord]:
        """
        Load the mistake log.

        Returns:
            MistakeRecords in the order they were appended
        """
        pass

    @abstractmethod
    def append_mistake(self, record: MistakeRecord) -> None:
        """
        Append one record to the mistake log.

        Args:
            record: the wrong pick to store
        """
        pass

    @abstractmethod
    def clear_all(self) -> None:
        """Remove all stored ratings and mistakes."""
        pass

    @staticmethod
    def make_rating_record(message_id: int, rating: Rating,
                           updated_at: Optional[datetime] = None) -> RatingRecord:
        """Build the record stored for a rating submission."""
        return RatingRecord(
            message_id=message_id,
            rating_id=rating.id,
            rating_label=rating.label,
            updated_at=updated_at or datetime.now()
        )
