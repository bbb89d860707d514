"""
Conversation parser.

Groups the flat, tagged conversation rows into topics of ordered messages
and attaches a Devanagari reading to every message.
"""

import logging
from typing import Iterable, List, Optional

from ..config import Config
from ..models import (
    ConversationRow,
    Message,
    MessageRole,
    ParsedConversations,
    RowTag,
    Topic
)
from ..transliteration.engine import TransliterationEngine
from .index import build_message_index


logger = logging.getLogger(__name__)


class _OpenTopic:
    """Mutable topic under construction; frozen into a Topic when pushed."""

    def __init__(self, title: str):
        self.title = title
        self.description = ""
        self.messages: List[Message] = []


def parse_topics(
    rows: Iterable[ConversationRow],
    engine: TransliterationEngine,
    drop_empty_topics: bool = Config.DROP_EMPTY_TOPICS
) -> List[Topic]:
    """
    Build topics from conversation rows.

    Malformed sequences are recovered rather than rejected: a Title while a
    topic is open closes it, Bot/User/Description rows outside a topic are
    dropped, and a topic still open at the end of input is kept.

    Args:
        rows: conversation rows in source order
        engine: engine used to transliterate each message
        drop_empty_topics: skip topics that end up with no messages

    Returns:
        Topics numbered 1..n in parse order
    """
    topics: List[Topic] = []
    current: Optional[_OpenTopic] = None

    def push(topic: _OpenTopic) -> None:
        if drop_empty_topics and not topic.messages:
            logger.debug(f"Dropping empty topic '{topic.title}'")
            return
        topics.append(Topic(
            id=len(topics) + 1,
            title=topic.title,
            description=topic.description,
            messages=tuple(topic.messages)
        ))

    for row in rows:
        if row.tag == RowTag.TITLE:
            if current is not None:
                push(current)
            title = (row.english_text or "").strip()
            current = _OpenTopic(title or Config.UNTITLED_TOPIC)

        elif row.tag == RowTag.DESCRIPTION:
            if current is not None:
                current.description = row.english_text or ""

        elif row.tag in (RowTag.BOT, RowTag.USER):
            if current is None:
                continue
            burmese = (row.burmese_text or "").strip()
            if not burmese or burmese == Config.EMPTY_PLACEHOLDER:
                continue
            current.messages.append(Message(
                id=row.sequence_no,
                role=MessageRole(row.tag.value.lower()),
                burmese_text=burmese,
                english_text=row.english_text or "",
                devanagari_text=engine.transliterate(burmese)
            ))

        elif row.tag == RowTag.END:
            if current is not None:
                push(current)
                current = None

    if current is not None:
        push(current)

    return topics


def parse_conversations(
    rows: Iterable[ConversationRow],
    engine: TransliterationEngine,
    drop_empty_topics: bool = Config.DROP_EMPTY_TOPICS
) -> ParsedConversations:
    """
    Parse conversation rows into topics and the flattened message index.

    Args:
        rows: conversation rows in source order
        engine: engine holding the lookup index and special cases
        drop_empty_topics: skip topics that end up with no messages

    Returns:
        ParsedConversations with topics and deduplicated indexed messages
    """
    topics = parse_topics(rows, engine, drop_empty_topics)
    messages = build_message_index(topics)

    logger.info(f"Parsed {len(topics)} topics with {len(messages)} unique messages")

    return ParsedConversations(topics=tuple(topics), messages=tuple(messages))
