"""
Pytest configuration and fixtures for the Burmese Chat Trainer tests.

Provides shared engines, parsed conversations and progress stores, and
configures Hypothesis for the property-based tests.
"""

import pytest
from hypothesis import settings, Verbosity

from burmese_chat_trainer.conversation import DEFAULT_CONVERSATION_ROWS, parse_conversations
from burmese_chat_trainer.models import ConversationRow, RowTag
from burmese_chat_trainer.storage import InMemoryProgressStore, ProgressTracker
from burmese_chat_trainer.transliteration import (
    DEFAULT_CONSONANTS,
    DEFAULT_MEDIALS,
    DEFAULT_SPECIAL_CASES,
    DEFAULT_VOWELS,
    TransliterationEngine,
    build_lookup_index
)


# Configure Hypothesis for property-based testing
settings.register_profile("trainer",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None
)
settings.load_profile("trainer")


def pytest_configure(config):
    config.addinivalue_line("markers", "property: property-based tests using Hypothesis")


@pytest.fixture
def default_index():
    """Lookup index built from the built-in rule tables."""
    return build_lookup_index(
        medials=DEFAULT_MEDIALS,
        vowels=DEFAULT_VOWELS,
        consonants=DEFAULT_CONSONANTS
    )


@pytest.fixture
def engine(default_index):
    """Engine with the built-in rules and special cases."""
    return TransliterationEngine(default_index, DEFAULT_SPECIAL_CASES)


@pytest.fixture
def parsed(engine):
    """The built-in conversations, parsed."""
    return parse_conversations(DEFAULT_CONVERSATION_ROWS, engine)


@pytest.fixture
def tracker():
    """Progress tracker over an in-memory store."""
    return ProgressTracker(InMemoryProgressStore())


@pytest.fixture
def small_topic_rows():
    """One topic with two bot/user exchanges and a closing bot line."""
    return [
        ConversationRow(1, RowTag.TITLE, '', 'Shopping'),
        ConversationRow(2, RowTag.DESCRIPTION, '', 'At the market'),
        ConversationRow(3, RowTag.BOT, 'ဘာလိုချင်လဲ။', 'What do you want?'),
        ConversationRow(4, RowTag.USER, 'ငှက်ပျောသီး ပေးပါ။', 'Bananas, please.'),
        ConversationRow(5, RowTag.BOT, 'ဘယ်လောက်လဲ။', 'How many?'),
        ConversationRow(6, RowTag.USER, 'တစ်ဖီး ပေးပါ။', 'One bunch, please.'),
        ConversationRow(7, RowTag.BOT, 'ရော့။', 'Here.'),
        ConversationRow(8, RowTag.END, '---------', '---------'),
    ]
