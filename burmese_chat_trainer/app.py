"""
Application context for the Burmese Chat Trainer.

TrainerApp owns everything a running trainer needs: the data tables, the
lookup index and engine built from them, the parsed conversations and the
progress tracker. Derived data is only ever rebuilt wholesale.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from .config import Config
from .conversation.parser import parse_conversations
from .errors import BurmeseTrainerError, ErrorHandler, ProcessingError
from .ingestion.base import TABLE_NAMES, TableSource
from .ingestion.tables import TrainerTables
from .models import IndexedMessage, ParsedConversations, Topic
from .practice.chat import ChatSession
from .practice.quiz import QuizMode, QuizScope, QuizSession
from .practice.ratings import Rating
from .practice.review import due_messages, messages_with_rating, unrated_messages
from .practice.shuffle import Shuffler
from .storage.base import ProgressStore
from .storage.memory_store import InMemoryProgressStore
from .storage.tracker import ProgressTracker
from .transliteration.engine import TransliterationEngine
from .transliteration.lookup import LookupIndex, build_lookup_index


class TrainerApp:
    """
    Explicit context object tying data, engine, conversations and progress together.
    """

    def __init__(self, source: Optional[TableSource] = None,
                 store: Optional[ProgressStore] = None,
                 drop_empty_topics: bool = Config.DROP_EMPTY_TOPICS,
                 error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the app with built-in tables; call load_data() to read the source.

        Args:
            source: where the data tables come from (built-in data only if None)
            store: progress backend (in-memory if None)
            drop_empty_topics: skip topics without messages when parsing
            error_handler: collects loading and persistence problems
        """
        self.logger = logging.getLogger(__name__)
        self.source = source
        self.drop_empty_topics = drop_empty_topics
        self.error_handler = error_handler or ErrorHandler()
        self.tracker = ProgressTracker(store or InMemoryProgressStore(), self.error_handler)

        self.tables = TrainerTables()
        self.load_warnings: List[ProcessingError] = []

        self.lookup_index: Optional[LookupIndex] = None
        self.engine: Optional[TransliterationEngine] = None
        self.conversations = ParsedConversations()
        self.rebuild()

    @property
    def topics(self) -> List[Topic]:
        return list(self.conversations.topics)

    @property
    def messages(self) -> List[IndexedMessage]:
        return list(self.conversations.messages)

    def load_data(self) -> TrainerTables:
        """
        Read every table from the source, falling back to built-in data per table.

        Problems are logged and collected in load_warnings; they never abort
        the load.

        Returns:
            The tables now in use
        """
        self.load_warnings = []
        tables = TrainerTables()

        if self.source is None:
            self.logger.info("No data source configured, using built-in data")
        else:
            self.logger.info(f"Loading data tables from {self.source.describe()}")
            for name in TABLE_NAMES:
                try:
                    rows = self.source.read_table(name)
                except (OSError, BurmeseTrainerError) as e:
                    warning = self.error_handler.handle_data_loading_error(
                        name, e, {'source': self.source.describe()}
                    )
                    self.error_handler.add_error(warning)
                    self.load_warnings.append(warning)
                    continue
                tables = tables.with_table(name, rows)

        self.tables = tables
        self.rebuild()
        return tables

    def load_progress(self) -> None:
        """Read stored ratings and mistakes into the tracker."""
        self.tracker.load()

    def set_tables(self, tables: TrainerTables) -> None:
        """Replace the data tables and rebuild everything derived from them."""
        self.tables = tables
        self.rebuild()

    def rebuild(self) -> None:
        """Recompute lookup index, engine and conversations from the current tables."""
        self.lookup_index = build_lookup_index(
            medials=self.tables.medials,
            vowels=self.tables.vowels,
            consonants=self.tables.consonants
        )
        self.engine = TransliterationEngine(self.lookup_index, self.tables.special_cases)
        self.conversations = parse_conversations(
            self.tables.conversations, self.engine, self.drop_empty_topics
        )
        self.logger.debug(f"Rebuilt lookup index with {len(self.lookup_index)} patterns")

    def transliterate(self, text: str) -> str:
        return self.engine.transliterate(text)

    def find_topic(self, topic_id: int) -> Optional[Topic]:
        for topic in self.conversations.topics:
            if topic.id == topic_id:
                return topic
        return None

    def start_quiz(self, topic_id: Optional[int] = None,
                   mode: QuizMode = QuizMode.RECOGNITION,
                   seed: Optional[int] = None) -> QuizSession:
        """
        Start a quiz over one topic, or over every message when topic_id is None.

        Raises:
            ValueError: If topic_id does not name a topic
        """
        if topic_id is None:
            scope = QuizScope.everything(self.conversations.topics, self.conversations.messages)
        else:
            topic = self.find_topic(topic_id)
            if topic is None:
                raise ValueError(f"No topic with id {topic_id}")
            scope = QuizScope.topic(topic)

        return QuizSession(scope, mode, self.tracker, Shuffler(seed))

    def start_chat(self, topic_id: int, seed: Optional[int] = None) -> ChatSession:
        """
        Start chat playback of a topic.

        Raises:
            ValueError: If topic_id does not name a topic
        """
        topic = self.find_topic(topic_id)
        if topic is None:
            raise ValueError(f"No topic with id {topic_id}")
        return ChatSession(topic, self.tracker, Shuffler(seed))

    def review(self, rating: Optional[Rating] = None, unrated: bool = False,
               due: bool = False, now: Optional[datetime] = None) -> List[IndexedMessage]:
        """Index messages filtered by rating level, missing rating or review due date."""
        messages = self.conversations.messages
        ratings = self.tracker.ratings
        if rating is not None:
            return messages_with_rating(messages, ratings, rating)
        if unrated:
            return unrated_messages(messages, ratings)
        if due:
            return due_messages(messages, ratings, now)
        return list(messages)

    def stats(self) -> Dict[str, int]:
        """Sizes of the loaded data and of the stored progress."""
        return {
            'consonants': len(self.tables.consonants),
            'vowels': len(self.tables.vowels),
            'medials': len(self.tables.medials),
            'special_cases': len(self.tables.special_cases),
            'topics': len(self.conversations.topics),
            'messages': len(self.conversations.messages),
            'ratings': len(self.tracker.ratings),
            'wrong_answers': len(self.tracker.mistakes),
        }

    def clear_progress(self) -> bool:
        """Forget all ratings and mistakes; False if the store could not be cleared."""
        cleared = self.tracker.clear_all()
        if cleared:
            self.logger.info("Cleared all progress")
        return cleared
