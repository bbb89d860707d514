"""
Practice module: quiz and chat sessions, ratings and review filters.
"""

from burmese_chat_trainer.practice.ratings import Rating, RatingLevel
from burmese_chat_trainer.practice.shuffle import Shuffler
from burmese_chat_trainer.practice.quiz import (
    QuizMode, QuizQuestion, QuizScope, QuizSession, QuizState
)
from burmese_chat_trainer.practice.chat import ChatSession
from burmese_chat_trainer.practice.review import (
    due_messages, messages_with_rating, mistake_counts, rating_breakdown, unrated_messages
)

__all__ = [
    'Rating',
    'RatingLevel',
    'Shuffler',
    'QuizMode',
    'QuizQuestion',
    'QuizScope',
    'QuizSession',
    'QuizState',
    'ChatSession',
    'due_messages',
    'messages_with_rating',
    'mistake_counts',
    'rating_breakdown',
    'unrated_messages'
]
