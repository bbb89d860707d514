"""
Flattened message index over parsed topics.
"""

from typing import Iterable, List, Tuple

from ..models import IndexedMessage, Message, Topic


def build_message_index(topics: Iterable[Topic]) -> List[IndexedMessage]:
    """
    Flatten topics into one list, keeping the first message per Burmese text.

    Later duplicates are left out of the index but stay in their own topic.
    Previous/next links always point into the message's own topic.

    Args:
        topics: topics in parse order

    Returns:
        Indexed messages in topic order, then message order
    """
    seen_burmese = set()
    indexed: List[IndexedMessage] = []

    for topic in topics:
        messages = topic.messages
        for position, message in enumerate(messages):
            if message.burmese_text in seen_burmese:
                continue
            seen_burmese.add(message.burmese_text)

            indexed.append(IndexedMessage(
                message=message,
                topic_id=topic.id,
                topic_title=topic.title,
                previous_message=messages[position - 1] if position > 0 else None,
                next_message=messages[position + 1] if position + 1 < len(messages) else None
            ))

    return indexed


def bot_reply_pairs(topics: Iterable[Topic]) -> List[Tuple[Message, Message]]:
    """
    Collect every bot message that is immediately followed by a user reply.

    Pairs come from each topic's full message list, so duplicates dropped
    from the message index still count here.
    """
    pairs: List[Tuple[Message, Message]] = []

    for topic in topics:
        messages = topic.messages
        for current, following in zip(messages, messages[1:]):
            if current.is_bot and following.is_user:
                pairs.append((current, following))

    return pairs
