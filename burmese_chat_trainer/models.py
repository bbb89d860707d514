"""
Core data models for the Burmese Chat Trainer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class RowTag(Enum):
    """Tag column values of the conversation source data."""
    TITLE = "Title"
    DESCRIPTION = "Description"
    BOT = "Bot"
    USER = "User"
    END = "End"

    @classmethod
    def from_label(cls, label: str) -> Optional['RowTag']:
        """Return the tag for a raw cell value, or None if it is not a known tag."""
        if not label:
            return None
        wanted = label.strip().lower()
        for tag in cls:
            if tag.value.lower() == wanted:
                return tag
        return None


class MessageRole(Enum):
    """Who speaks a message in a practice conversation."""
    BOT = "bot"
    USER = "user"


@dataclass(frozen=True)
class GlyphRule:
    """Maps a Burmese character sequence to its Devanagari rendering."""
    pattern: str
    replacement: str
    alternate: str = ""  # second reading, consonants only
    gloss: str = ""      # English hint, consonants only


@dataclass(frozen=True)
class SpecialCase:
    """Whole-phrase transliteration override."""
    phrase: str
    replacement: str


@dataclass(frozen=True)
class ConversationRow:
    """One validated row of the conversation source data."""
    sequence_no: int
    tag: RowTag
    burmese_text: str
    english_text: str


@dataclass(frozen=True)
class Message:
    """A single bot or user line of a topic."""
    id: int
    role: MessageRole
    burmese_text: str
    english_text: str
    devanagari_text: str

    @property
    def is_bot(self) -> bool:
        return self.role == MessageRole.BOT

    @property
    def is_user(self) -> bool:
        return self.role == MessageRole.USER


@dataclass(frozen=True)
class Topic:
    """A self-contained practice conversation."""
    id: int
    title: str
    description: str
    messages: Tuple[Message, ...] = ()


@dataclass(frozen=True)
class IndexedMessage:
    """A message of the flattened, deduplicated message index."""
    message: Message
    topic_id: int
    topic_title: str
    previous_message: Optional[Message] = None
    next_message: Optional[Message] = None

    @property
    def id(self) -> int:
        return self.message.id

    @property
    def role(self) -> MessageRole:
        return self.message.role

    @property
    def burmese_text(self) -> str:
        return self.message.burmese_text

    @property
    def english_text(self) -> str:
        return self.message.english_text

    @property
    def devanagari_text(self) -> str:
        return self.message.devanagari_text


@dataclass(frozen=True)
class ParsedConversations:
    """Output of the conversation parser."""
    topics: Tuple[Topic, ...] = ()
    messages: Tuple[IndexedMessage, ...] = ()


def parse_timestamp(value: Optional[str]) -> datetime:
    """
    Parse a stored ISO-8601 timestamp into a naive local datetime.

    Accepts a trailing "Z" as written by JavaScript clients; a missing value
    means now.
    """
    if not value:
        return datetime.now()
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


@dataclass
class RatingRecord:
    """Stored self-assessment for one message."""
    message_id: int
    rating_id: int
    rating_label: str
    updated_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'message_id': self.message_id,
            'rating_id': self.rating_id,
            'rating_label': self.rating_label,
            'updated_at': self.updated_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RatingRecord':
        """Create instance from dictionary, ignoring unknown keys."""
        updated_at = data.get('updated_at')
        return cls(
            message_id=int(data['message_id']),
            rating_id=int(data['rating_id']),
            rating_label=data.get('rating_label', ''),
            updated_at=parse_timestamp(updated_at),
        )


@dataclass
class MistakeRecord:
    """A wrong pick made while answering a question."""
    question_id: int
    wrong_answer_id: int
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'question_id': self.question_id,
            'wrong_answer_id': self.wrong_answer_id,
            'created_at': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'MistakeRecord':
        """Create instance from dictionary, ignoring unknown keys."""
        created_at = data.get('created_at')
        return cls(
            question_id=int(data['question_id']),
            wrong_answer_id=int(data['wrong_answer_id']),
            created_at=parse_timestamp(created_at),
        )
