"""
Self-assessment levels a learner gives each practised message.
"""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class RatingLevel:
    """Fixed attributes of one rating level."""
    id: int
    label: str
    description: str
    review_days: int


class Rating(Enum):
    """The five rating levels, from best known (1) to unknown (5)."""
    MONTHLY_REVIEW = RatingLevel(1, "Monthly Review", "You know this well", 30)
    CANT_USE_IN_CONVERSATION = RatingLevel(2, "Can't use in conversation", "Understand but can't speak", 7)
    CANT_WRITE = RatingLevel(3, "Can't write in Burmese", "Know meaning but can't write", 3)
    CANT_USE = RatingLevel(4, "Understand but can't use", "Don't know when to use", 1)
    UNKNOWN = RatingLevel(5, "Don't know at all", "Need to learn from scratch", 0)

    @property
    def id(self) -> int:
        return self.value.id

    @property
    def label(self) -> str:
        return self.value.label

    @property
    def description(self) -> str:
        return self.value.description

    @property
    def review_interval(self) -> timedelta:
        """How long until a message with this rating should be reviewed again."""
        return timedelta(days=self.value.review_days)

    @classmethod
    def from_id(cls, rating_id: int) -> Optional['Rating']:
        """Return the level with the given id, or None for an unknown id."""
        for rating in cls:
            if rating.id == rating_id:
                return rating
        return None
