"""
Quiz sessions over parsed conversations.

A QuizSession walks a shuffled, non-repeating order of questions from a
scope (one topic, or everything) in one of three modes:

- recognition: pick the English meaning of a Burmese message
- recall: type the Burmese while the Devanagari and meaning are shown
- production: pick the correct Burmese reply to a bot message

Wrong picks are logged as mistakes and stay marked; a correct pick or a
manual reveal opens rating, and submitting a rating moves on.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Sequence, Tuple

from ..config import Config
from ..conversation.index import bot_reply_pairs
from ..models import IndexedMessage, Message, Topic
from .ratings import Rating
from .shuffle import Shuffler

if TYPE_CHECKING:
    from ..storage.tracker import ProgressTracker


class QuizMode(Enum):
    """Difficulty policies over the question stream."""
    RECOGNITION = "recognition"
    RECALL = "recall"
    PRODUCTION = "production"


class QuizState(Enum):
    """Where the session is in the question/answer/rating cycle."""
    EMPTY = "empty"
    AWAITING_ANSWER = "awaiting_answer"
    RATING_PENDING = "rating_pending"
    COMPLETE = "complete"


@dataclass(frozen=True)
class QuizScope:
    """The messages a quiz draws questions and distractors from."""
    title: str
    messages: Tuple[Message, ...]
    reply_pairs: Tuple[Tuple[Message, Message], ...]
    loops: bool
    topic_id: Optional[int] = None

    @classmethod
    def topic(cls, topic: Topic) -> 'QuizScope':
        """Questions from one topic; the session completes after one pass."""
        return cls(
            title=topic.title,
            messages=tuple(topic.messages),
            reply_pairs=tuple(bot_reply_pairs([topic])),
            loops=False,
            topic_id=topic.id
        )

    @classmethod
    def everything(cls, topics: Sequence[Topic],
                   index: Sequence[IndexedMessage]) -> 'QuizScope':
        """Questions from the whole message index; reshuffles and loops forever."""
        return cls(
            title="All topics",
            messages=tuple(indexed.message for indexed in index),
            reply_pairs=tuple(bot_reply_pairs(topics)),
            loops=True
        )


@dataclass(frozen=True)
class QuizQuestion:
    """One question; production questions also carry the expected reply."""
    message: Message
    expected_reply: Optional[Message] = None

    @property
    def id(self) -> int:
        return self.message.id

    @property
    def answer(self) -> Message:
        """The message whose selection counts as correct."""
        return self.expected_reply or self.message


def distinct_from(answer: Message, candidates: Sequence[Message],
                  fields: Tuple[str, ...]) -> List[Message]:
    """
    Candidates that can be told apart from the answer and from each other.

    A candidate is dropped when any of the given text fields repeats one
    already taken (the answer's included), so no two options read the same.
    """
    seen = {field: {getattr(answer, field)} for field in fields}
    distinct = []
    for candidate in candidates:
        if candidate.id == answer.id:
            continue
        if any(getattr(candidate, field) in seen[field] for field in fields):
            continue
        for field in fields:
            seen[field].add(getattr(candidate, field))
        distinct.append(candidate)
    return distinct


class QuizSession:
    """
    Question/answer/rating state machine for one quiz.
    """

    def __init__(self, scope: QuizScope, mode: QuizMode = QuizMode.RECOGNITION,
                 tracker: Optional['ProgressTracker'] = None,
                 shuffler: Optional[Shuffler] = None):
        """
        Initialize the session and prepare the first question.

        Args:
            scope: messages to quiz on
            mode: difficulty policy
            tracker: receives mistakes and ratings (nothing is recorded if None)
            shuffler: source of randomness; seed it for reproducible order
        """
        self.logger = logging.getLogger(__name__)
        self.scope = scope
        self.mode = mode
        self.tracker = tracker
        self.shuffler = shuffler or Shuffler()

        self.questions: Tuple[QuizQuestion, ...] = tuple(self._build_questions())
        self.state = QuizState.EMPTY
        self.pass_number = 0
        self.answered_count = 0

        self._order: List[QuizQuestion] = []
        self._position = 0
        self._options: Tuple[Message, ...] = ()
        self._wrong_option_ids: FrozenSet[int] = frozenset()
        self._attempt: Optional[str] = None
        self._is_correct: Optional[bool] = None

        self._start_pass()

    def _build_questions(self) -> List[QuizQuestion]:
        if self.mode == QuizMode.PRODUCTION:
            # bots without a following user reply are left out entirely
            return [QuizQuestion(bot, reply) for bot, reply in self.scope.reply_pairs]
        return [QuizQuestion(message) for message in self.scope.messages]

    @property
    def current_question(self) -> Optional[QuizQuestion]:
        if self.state in (QuizState.AWAITING_ANSWER, QuizState.RATING_PENDING):
            return self._order[self._position]
        return None

    @property
    def position(self) -> int:
        """1-based number of the current question within this pass."""
        return self._position + 1 if self.current_question else 0

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def options(self) -> Tuple[Message, ...]:
        """Answer options for the current question; empty in recall mode."""
        return self._options

    @property
    def wrong_option_ids(self) -> FrozenSet[int]:
        return self._wrong_option_ids

    @property
    def attempt(self) -> Optional[str]:
        return self._attempt

    @property
    def is_correct(self) -> Optional[bool]:
        """Result of the revealed answer; None while unanswered or ungraded."""
        return self._is_correct

    @property
    def is_complete(self) -> bool:
        return self.state == QuizState.COMPLETE

    def hints(self) -> Tuple[str, str]:
        """Devanagari reading and meaning shown alongside a recall question."""
        question = self.current_question
        if question is None:
            return ("", "")
        return (question.message.devanagari_text, question.message.english_text)

    def select_option(self, option_id: int) -> bool:
        """
        Pick an answer option.

        Args:
            option_id: message id of the chosen option

        Returns:
            True for the correct option. False for a wrong one, and also when
            the pick is ignored (no question, recall mode, unknown or already
            marked option, answer already revealed); wrong picks show up in
            wrong_option_ids
        """
        if self.state != QuizState.AWAITING_ANSWER or self.mode == QuizMode.RECALL:
            return False
        if option_id in self._wrong_option_ids:
            return False
        if option_id not in {option.id for option in self._options}:
            return False

        question = self.current_question
        if option_id == question.answer.id:
            self._is_correct = True
            self.state = QuizState.RATING_PENDING
            return True

        self._wrong_option_ids = self._wrong_option_ids | {option_id}
        if self.tracker is not None:
            self.tracker.record_mistake(question.id, option_id)
        return False

    def submit_attempt(self, text: str) -> bool:
        """
        Check a typed Burmese answer in recall mode and reveal the answer.

        Returns:
            True if the attempt matched exactly, False otherwise (also when
            the call is not valid in the current state)
        """
        if self.state != QuizState.AWAITING_ANSWER or self.mode != QuizMode.RECALL:
            return False

        self._attempt = text or ""
        matched = self._attempt.strip() == self.current_question.message.burmese_text
        self._is_correct = matched
        self.state = QuizState.RATING_PENDING
        return matched

    def reveal(self) -> bool:
        """Show the answer without typing anything (recall mode only)."""
        if self.state != QuizState.AWAITING_ANSWER or self.mode != QuizMode.RECALL:
            return False

        self._is_correct = None
        self.state = QuizState.RATING_PENDING
        return True

    def submit_rating(self, rating: Rating) -> bool:
        """
        Rate the current question and move to the next one.

        Returns:
            True if the rating was accepted
        """
        if self.state != QuizState.RATING_PENDING:
            return False

        question = self.current_question
        if self.tracker is not None:
            self.tracker.submit_rating(question.id, rating)

        self.answered_count += 1
        self._advance()
        return True

    def restart(self) -> None:
        """Reshuffle and start again from the first question."""
        self.answered_count = 0
        self._start_pass()

    def _start_pass(self) -> None:
        if not self.questions:
            self.state = QuizState.EMPTY
            self._order = []
            self._reset_answer()
            self._options = ()
            return

        self.pass_number += 1
        self._order = self.shuffler.shuffle(self.questions)
        self._position = 0
        self._prepare_question()

    def _advance(self) -> None:
        if self._position + 1 < len(self._order):
            self._position += 1
            self._prepare_question()
        elif self.scope.loops:
            self.logger.debug(f"Quiz pass {self.pass_number} finished, reshuffling")
            self._start_pass()
        else:
            self.state = QuizState.COMPLETE
            self._reset_answer()
            self._options = ()

    def _prepare_question(self) -> None:
        self.state = QuizState.AWAITING_ANSWER
        self._reset_answer()
        self._options = tuple(self._build_options(self._order[self._position]))

    def _reset_answer(self) -> None:
        self._wrong_option_ids = frozenset()
        self._attempt = None
        self._is_correct = None

    def _build_options(self, question: QuizQuestion) -> List[Message]:
        answer = question.answer
        if self.mode == QuizMode.RECOGNITION:
            pool = distinct_from(answer, self.scope.messages, ('english_text',))
            distractors = self.shuffler.sample(pool, Config.RECOGNITION_DISTRACTORS)
        elif self.mode == QuizMode.PRODUCTION:
            users = [m for m in self.scope.messages if m.is_user]
            pool = distinct_from(answer, users, ('burmese_text', 'english_text'))
            distractors = self.shuffler.sample(pool, Config.PRODUCTION_DISTRACTORS)
        else:
            return []

        return self.shuffler.shuffle([answer] + distractors)
