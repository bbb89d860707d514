"""
Storage module for learner progress (ratings and mistakes).
"""

from burmese_chat_trainer.storage.base import ProgressStore
from burmese_chat_trainer.storage.memory_store import InMemoryProgressStore
from burmese_chat_trainer.storage.json_store import JsonFileProgressStore
from burmese_chat_trainer.storage.tracker import ProgressTracker

__all__ = [
    'ProgressStore',
    'InMemoryProgressStore',
    'JsonFileProgressStore',
    'ProgressTracker'
]
