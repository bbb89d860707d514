"""
Conversation module: parsing tagged rows into topics and the message index.
"""

from burmese_chat_trainer.conversation.parser import (
    parse_conversations,
    parse_topics
)
from burmese_chat_trainer.conversation.index import (
    build_message_index,
    bot_reply_pairs
)
from burmese_chat_trainer.conversation.defaults import DEFAULT_CONVERSATION_ROWS

__all__ = [
    'parse_conversations',
    'parse_topics',
    'build_message_index',
    'bot_reply_pairs',
    'DEFAULT_CONVERSATION_ROWS'
]
