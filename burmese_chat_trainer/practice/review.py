"""
Review filters over the message index and stored progress.
"""

from collections import Counter
from datetime import datetime
from typing import Dict, List, Mapping, Optional, Sequence

from ..models import IndexedMessage, MistakeRecord, RatingRecord
from .ratings import Rating


def messages_with_rating(messages: Sequence[IndexedMessage],
                         ratings: Mapping[int, RatingRecord],
                         rating: Rating) -> List[IndexedMessage]:
    """Messages whose current rating is the given level, in index order."""
    return [
        message for message in messages
        if message.id in ratings and ratings[message.id].rating_id == rating.id
    ]


def unrated_messages(messages: Sequence[IndexedMessage],
                     ratings: Mapping[int, RatingRecord]) -> List[IndexedMessage]:
    """Messages that have never been rated."""
    return [message for message in messages if message.id not in ratings]


def mistake_counts(mistakes: Sequence[MistakeRecord]) -> Dict[int, int]:
    """Number of wrong picks per question id."""
    return dict(Counter(record.question_id for record in mistakes))


def rating_breakdown(messages: Sequence[IndexedMessage],
                     ratings: Mapping[int, RatingRecord]) -> Dict[Optional[Rating], int]:
    """
    Count the index messages per rating level.

    Every level is present in the result; the None key counts unrated
    messages. Ratings for messages outside the index are not counted.
    """
    breakdown: Dict[Optional[Rating], int] = {rating: 0 for rating in Rating}
    breakdown[None] = 0

    for message in messages:
        record = ratings.get(message.id)
        level = Rating.from_id(record.rating_id) if record else None
        breakdown[level] = breakdown.get(level, 0) + 1

    return breakdown


def due_messages(messages: Sequence[IndexedMessage],
                 ratings: Mapping[int, RatingRecord],
                 now: Optional[datetime] = None) -> List[IndexedMessage]:
    """
    Rated messages whose review interval has elapsed.

    A message is due once updated_at plus its level's review interval is at
    or before now. Unrated messages and unknown rating ids are not due.
    """
    now = now or datetime.now()
    due = []
    for message in messages:
        record = ratings.get(message.id)
        if record is None:
            continue
        level = Rating.from_id(record.rating_id)
        if level is None:
            continue
        if record.updated_at + level.review_interval <= now:
            due.append(message)
    return due
