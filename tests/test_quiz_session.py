"""
Tests for quiz sessions.
"""

import pytest
from hypothesis import given, strategies as st

from burmese_chat_trainer.conversation import parse_topics
from burmese_chat_trainer.models import ConversationRow, RowTag
from burmese_chat_trainer.practice import (
    QuizMode,
    QuizScope,
    QuizSession,
    QuizState,
    Rating,
    Shuffler
)


@pytest.fixture
def topic(engine, small_topic_rows):
    return parse_topics(small_topic_rows, engine)[0]


def wrong_option(session):
    return next(o for o in session.options if o.id != session.current_question.answer.id)


def answer_all(session, rating=Rating.MONTHLY_REVIEW, limit=100):
    """Answer correctly and rate until the session leaves AWAITING_ANSWER; return asked ids."""
    asked = []
    while session.state == QuizState.AWAITING_ANSWER and len(asked) < limit:
        asked.append(session.current_question.id)
        if session.mode == QuizMode.RECALL:
            session.reveal()
        else:
            assert session.select_option(session.current_question.answer.id)
        assert session.submit_rating(rating)
    return asked


class TestRecognitionMode:
    """Test the pick-the-meaning mode."""

    def test_initial_state(self, topic, tracker):
        """Test a new session waits for the first answer."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        assert session.state == QuizState.AWAITING_ANSWER
        assert session.total == 5
        assert session.position == 1
        assert session.is_correct is None

    def test_options_contain_answer_and_distractors(self, topic, tracker):
        """Test options are the answer plus three other topic messages."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        ids = [o.id for o in session.options]

        assert session.current_question.id in ids
        assert len(ids) == 4
        assert len(set(ids)) == 4
        assert set(ids) <= {m.id for m in topic.messages}

    def test_options_are_stable_for_a_question(self, topic, tracker):
        """Test options are computed once per question."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        before = session.options
        session.select_option(wrong_option(session).id)
        assert session.options == before

    def test_correct_pick_opens_rating(self, topic, tracker):
        """Test a correct pick moves to RATING_PENDING."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        assert session.select_option(session.current_question.id) is True
        assert session.state == QuizState.RATING_PENDING
        assert session.is_correct is True

    def test_wrong_pick_is_recorded_and_marked(self, topic, tracker):
        """Test a wrong pick logs a mistake, stays marked and does not advance."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        question = session.current_question
        wrong = wrong_option(session)

        assert session.select_option(wrong.id) is False
        assert session.state == QuizState.AWAITING_ANSWER
        assert session.current_question == question
        assert wrong.id in session.wrong_option_ids
        assert [(r.question_id, r.wrong_answer_id) for r in tracker.mistakes] == [(question.id, wrong.id)]

        # a marked option cannot be picked again
        assert session.select_option(wrong.id) is False
        assert len(tracker.mistakes) == 1

    def test_each_wrong_pick_appends_a_mistake(self, topic, tracker):
        """Test every distinct wrong option adds one record."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(3))
        answer_id = session.current_question.answer.id
        wrong_ids = [o.id for o in session.options if o.id != answer_id]
        for option_id in wrong_ids:
            session.select_option(option_id)
        assert len(tracker.mistakes) == len(wrong_ids)
        assert session.select_option(answer_id) is True

    def test_unknown_option_ignored(self, topic, tracker):
        """Test an id that is not an option does nothing."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        assert session.select_option(9999) is False
        assert tracker.mistakes == []
        assert session.state == QuizState.AWAITING_ANSWER

    def test_rating_saved_and_advances(self, topic, tracker):
        """Test submitting a rating stores it and moves to the next question."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        question = session.current_question
        session.select_option(question.id)

        assert session.submit_rating(Rating.CANT_WRITE) is True
        assert tracker.rating_for(question.id) == Rating.CANT_WRITE
        assert session.position == 2
        assert session.state == QuizState.AWAITING_ANSWER
        assert session.wrong_option_ids == frozenset()

    def test_rating_before_answer_rejected(self, topic, tracker):
        """Test submit_rating is ignored while a question is unanswered."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        assert session.submit_rating(Rating.UNKNOWN) is False
        assert tracker.ratings == {}

    def test_topic_scope_completes(self, topic, tracker):
        """Test every message is asked once and the session completes."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(7))
        asked = answer_all(session)

        assert sorted(asked) == sorted(m.id for m in topic.messages)
        assert session.state == QuizState.COMPLETE
        assert session.is_complete
        assert session.current_question is None
        assert session.options == ()
        assert session.answered_count == 5

    def test_small_scope_has_fewer_options(self, engine, tracker):
        """Test a two-message topic offers two options."""
        rows = [
            ConversationRow(1, RowTag.TITLE, '', 'Tiny'),
            ConversationRow(2, RowTag.BOT, 'က', 'ka'),
            ConversationRow(3, RowTag.USER, 'ခ', 'kha'),
        ]
        tiny = parse_topics(rows, engine)[0]
        session = QuizSession(QuizScope.topic(tiny), QuizMode.RECOGNITION, tracker, Shuffler(1))
        assert len(session.options) == 2

    def test_options_read_differently(self, parsed, tracker):
        """Test a repeated line never shows up as two identical options."""
        greeting = parsed.topics[0]
        session = QuizSession(QuizScope.topic(greeting), QuizMode.RECOGNITION, tracker, Shuffler(3))

        while session.state == QuizState.AWAITING_ANSWER:
            meanings = [o.english_text for o in session.options]
            assert len(meanings) == len(set(meanings))
            assert len(meanings) == 4
            session.select_option(session.current_question.answer.id)
            session.submit_rating(Rating.MONTHLY_REVIEW)

        assert tracker.mistakes == []

    def test_restart_reshuffles(self, topic, tracker):
        """Test restart begins a new pass."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(2))
        answer_all(session)
        session.restart()
        assert session.state == QuizState.AWAITING_ANSWER
        assert session.position == 1
        assert session.answered_count == 0
        assert session.pass_number == 2

    def test_without_tracker(self, topic):
        """Test a session works with nothing to record to."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, None, Shuffler(1))
        session.select_option(wrong_option(session).id)
        assert answer_all(session)


class TestProductionMode:
    """Test the pick-the-reply mode."""

    def test_only_bots_with_replies(self, topic, tracker):
        """Test the closing bot line without a reply is not asked."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.PRODUCTION, tracker, Shuffler(1))
        asked = answer_all(session)
        assert sorted(asked) == [3, 5]

    def test_options_are_user_messages(self, topic, tracker):
        """Test options are the expected reply plus other user messages."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.PRODUCTION, tracker, Shuffler(1))
        question = session.current_question
        ids = {o.id for o in session.options}

        assert question.answer.id in ids
        assert all(o.is_user for o in session.options)
        assert ids == {4, 6}

    def test_duplicate_replies_not_offered(self, engine, tracker):
        """Test a user line repeating the expected reply is not a distractor."""
        rows = [
            ConversationRow(1, RowTag.TITLE, '', 'Thanks'),
            ConversationRow(2, RowTag.BOT, 'က', 'ka'),
            ConversationRow(3, RowTag.USER, 'ခ', 'kha'),
            ConversationRow(4, RowTag.BOT, 'ဂ', 'ga'),
            ConversationRow(5, RowTag.USER, 'ခ', 'kha'),
            ConversationRow(6, RowTag.USER, 'ဃ', 'gha'),
        ]
        thanks = parse_topics(rows, engine)[0]
        session = QuizSession(QuizScope.topic(thanks), QuizMode.PRODUCTION, tracker, Shuffler(1))

        while session.state == QuizState.AWAITING_ANSWER:
            texts = sorted(o.burmese_text for o in session.options)
            assert texts == ['ခ', 'ဃ']
            session.select_option(session.current_question.answer.id)
            session.submit_rating(Rating.CANT_USE)

    def test_mistake_keyed_by_bot_question(self, topic, tracker):
        """Test a wrong reply is logged against the bot question."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.PRODUCTION, tracker, Shuffler(1))
        question = session.current_question
        session.select_option(wrong_option(session).id)
        assert tracker.mistakes[0].question_id == question.id

    def test_rating_keyed_by_bot_question(self, topic, tracker):
        """Test the rating goes to the bot message id."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.PRODUCTION, tracker, Shuffler(1))
        question = session.current_question
        session.select_option(question.answer.id)
        session.submit_rating(Rating.CANT_USE)
        assert question.id in tracker.ratings
        assert question.answer.id not in tracker.ratings

    def test_no_pairs_gives_empty_session(self, engine, tracker):
        """Test a topic of only bot lines has no production questions."""
        rows = [
            ConversationRow(1, RowTag.TITLE, '', 'Monologue'),
            ConversationRow(2, RowTag.BOT, 'က', 'ka'),
            ConversationRow(3, RowTag.BOT, 'ခ', 'kha'),
        ]
        monologue = parse_topics(rows, engine)[0]
        session = QuizSession(QuizScope.topic(monologue), QuizMode.PRODUCTION, tracker, Shuffler(1))

        assert session.state == QuizState.EMPTY
        assert session.current_question is None
        assert session.options == ()
        assert session.select_option(2) is False
        assert session.submit_rating(Rating.UNKNOWN) is False

    def test_everything_scope(self, parsed, tracker):
        """Test the global scope asks all six bot/reply pairs per pass."""
        scope = QuizScope.everything(parsed.topics, parsed.messages)
        session = QuizSession(scope, QuizMode.PRODUCTION, tracker, Shuffler(4))
        assert session.total == 6
        asked = answer_all(session, limit=6)
        assert sorted(asked) == [3, 5, 11, 13, 15, 17]


class TestRecallMode:
    """Test the type-the-Burmese mode."""

    def test_no_options(self, topic, tracker):
        """Test recall questions have no options and ignore picks."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECALL, tracker, Shuffler(1))
        assert session.options == ()
        assert session.select_option(session.current_question.id) is False

    def test_hints(self, topic, tracker):
        """Test the Devanagari reading and meaning are offered as hints."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECALL, tracker, Shuffler(1))
        message = session.current_question.message
        assert session.hints() == (message.devanagari_text, message.english_text)

    def test_exact_attempt_is_correct(self, topic, tracker):
        """Test a matching attempt is graded correct."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECALL, tracker, Shuffler(1))
        burmese = session.current_question.message.burmese_text
        assert session.submit_attempt(f" {burmese} ") is True
        assert session.is_correct is True
        assert session.state == QuizState.RATING_PENDING

    def test_wrong_attempt(self, topic, tracker):
        """Test a different attempt is graded wrong but still opens rating."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECALL, tracker, Shuffler(1))
        assert session.submit_attempt("abc") is False
        assert session.is_correct is False
        assert session.attempt == "abc"
        assert session.state == QuizState.RATING_PENDING
        assert tracker.mistakes == []

    def test_reveal_without_attempt(self, topic, tracker):
        """Test a manual reveal leaves the result ungraded."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECALL, tracker, Shuffler(1))
        assert session.reveal() is True
        assert session.is_correct is None
        assert session.state == QuizState.RATING_PENDING
        assert session.reveal() is False

    def test_reveal_not_available_in_option_modes(self, topic, tracker):
        """Test reveal and attempts are refused outside recall."""
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, tracker, Shuffler(1))
        assert session.reveal() is False
        assert session.submit_attempt("က") is False
        assert session.state == QuizState.AWAITING_ANSWER


class TestEverythingScope:
    """Test the looping global quiz."""

    def test_loops_after_a_pass(self, parsed, tracker):
        """Test the global scope reshuffles instead of completing."""
        scope = QuizScope.everything(parsed.topics, parsed.messages)
        session = QuizSession(scope, QuizMode.RECOGNITION, tracker, Shuffler(5))
        assert session.total == 11

        asked = answer_all(session, limit=11)
        assert sorted(asked) == sorted(m.id for m in parsed.messages)
        assert session.state == QuizState.AWAITING_ANSWER
        assert session.pass_number == 2
        assert session.position == 1

    def test_empty_everything_scope(self, tracker):
        """Test a global quiz with no messages is empty rather than looping."""
        session = QuizSession(QuizScope.everything([], []), QuizMode.RECOGNITION, tracker)
        assert session.state == QuizState.EMPTY


class TestQuizProperties:
    """Property-based tests for quiz sessions."""

    @pytest.mark.property
    @given(st.integers(min_value=0, max_value=10_000))
    def test_same_seed_same_order(self, seed):
        """Two sessions with the same seed ask questions in the same order."""
        from burmese_chat_trainer.conversation import DEFAULT_CONVERSATION_ROWS, parse_conversations
        from burmese_chat_trainer.transliteration import TransliterationEngine, build_lookup_index

        parsed = parse_conversations(DEFAULT_CONVERSATION_ROWS, TransliterationEngine(build_lookup_index()))
        scope = QuizScope.everything(parsed.topics, parsed.messages)

        first = QuizSession(scope, QuizMode.RECOGNITION, None, Shuffler(seed))
        second = QuizSession(scope, QuizMode.RECOGNITION, None, Shuffler(seed))

        assert answer_all(first, limit=11) == answer_all(second, limit=11)

    @pytest.mark.property
    @given(st.integers(min_value=0, max_value=10_000))
    def test_pass_is_a_permutation(self, seed):
        """One pass asks every question exactly once."""
        from burmese_chat_trainer.conversation import DEFAULT_CONVERSATION_ROWS, parse_conversations
        from burmese_chat_trainer.transliteration import TransliterationEngine, build_lookup_index

        parsed = parse_conversations(DEFAULT_CONVERSATION_ROWS, TransliterationEngine(build_lookup_index()))
        topic = parsed.topics[1]
        session = QuizSession(QuizScope.topic(topic), QuizMode.RECOGNITION, None, Shuffler(seed))

        asked = answer_all(session)
        assert sorted(asked) == sorted(m.id for m in topic.messages)
